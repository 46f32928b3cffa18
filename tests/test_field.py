from __future__ import annotations

import pytest

from ecosim.sim.config import FIELD
from ecosim.sim.field import Field
from ecosim.sim.models import Actor, Location
from ecosim.sim.rng import RNG
from ecosim.sim.species import GRASS, LION


def _actor(i: int = 1, species=GRASS) -> Actor:
    return Actor(id=i, species=species)


def test_place_records_both_sides():
    f = Field(4, 4)
    a = _actor()
    f.place(a, Location(1, 2))
    assert f.get_object_at(Location(1, 2)) is a
    assert a.location == Location(1, 2)
    assert a.field is f


def test_place_again_vacates_old_cell():
    f = Field(4, 4)
    a = _actor()
    f.place(a, Location(0, 0))
    f.place(a, Location(3, 3))
    assert f.get_object_at(Location(0, 0)) is None
    assert f.get_object_at(Location(3, 3)) is a
    assert len(f) == 1


def test_place_on_occupied_cell_drops_previous_bookkeeping():
    f = Field(3, 3)
    first, second = _actor(1), _actor(2, LION)
    f.place(first, Location(1, 1))
    f.place(second, Location(1, 1))
    assert f.get_object_at(Location(1, 1)) is second
    assert first.location is None and first.field is None
    assert len(f) == 1


def test_clear():
    f = Field(3, 3)
    a = _actor()
    f.place(a, Location(2, 2))
    f.clear(Location(2, 2))
    assert f.get_object_at(Location(2, 2)) is None
    f.clear(Location(2, 2))  # already empty


def test_location_is_a_value():
    assert Location(1, 2) == Location(1, 2)
    assert Location(1, 2) != Location(2, 1)
    assert len({Location(0, 0), Location(0, 0)}) == 1


@pytest.mark.parametrize("loc, expected", [
    (Location(0, 0), 3),
    (Location(0, 2), 5),
    (Location(2, 2), 8),
    (Location(4, 4), 3),
])
def test_adjacent_counts_respect_bounds(loc, expected):
    f = Field(5, 5)
    adj = f.adjacent_locations(loc)
    assert len(adj) == expected
    assert loc not in adj
    assert all(f.in_bounds(a) for a in adj)


def test_adjacent_band_radius_two():
    f = Field(9, 9)
    centre = Location(4, 4)
    assert len(f.adjacent_locations(centre, 1, 2)) == 24
    ring = f.adjacent_locations(centre, 2, 2)
    assert len(ring) == 16
    assert all(max(abs(l.row - 4), abs(l.col - 4)) == 2 for l in ring)


def test_inner_band_starting_at_zero_excludes_self():
    f = Field(5, 5)
    centre = Location(2, 2)
    assert f.adjacent_locations(centre, 0, 1) == f.adjacent_locations(centre, 1, 1)


def test_neighbor_order_is_row_major_without_rng():
    f = Field(3, 3)
    adj = f.adjacent_locations(Location(1, 1))
    assert adj == [Location(0, 0), Location(0, 1), Location(0, 2), Location(1, 0),
                   Location(1, 2), Location(2, 0), Location(2, 1), Location(2, 2)]


def test_shuffled_neighbor_order_reproducible_from_seed():
    a = Field(5, 5, rng=RNG(3)).adjacent_locations(Location(2, 2), 1, 2)
    b = Field(5, 5, rng=RNG(3)).adjacent_locations(Location(2, 2), 1, 2)
    assert a == b
    assert sorted(a, key=lambda l: (l.row, l.col)) == Field(5, 5).adjacent_locations(Location(2, 2), 1, 2)


def test_free_adjacent_locations():
    f = Field(3, 3)
    f.place(_actor(1), Location(0, 0))
    f.place(_actor(2), Location(0, 1))
    free = f.free_adjacent_locations(Location(1, 1))
    assert Location(0, 0) not in free and Location(0, 1) not in free
    assert len(free) == 6
    assert f.free_adjacent_location(Location(1, 1)) == Location(0, 2)


def test_free_adjacent_location_none_when_surrounded():
    f = Field(2, 2)
    for i, loc in enumerate([Location(0, 1), Location(1, 0), Location(1, 1)]):
        f.place(_actor(i), loc)
    assert f.free_adjacent_location(Location(0, 0)) is None


def test_out_of_bounds_query_is_a_programming_error():
    f = Field(3, 3)
    with pytest.raises(AssertionError):
        f.get_object_at(Location(3, 0))
    with pytest.raises(AssertionError):
        f.place(_actor(), Location(-1, 0))


def test_invalid_dimensions_fall_back_to_defaults(capsys):
    f = Field(0, -3)
    assert (f.depth, f.width) == (FIELD.depth, FIELD.width)
    assert "Using default values" in capsys.readouterr().err
