# ecosim/sim/field.py
from __future__ import annotations
import sys
from typing import Dict, Iterator, List, Optional, Tuple

from .config import FIELD
from .models import Actor, Location
from .rng import RNG


def checked_dimensions(depth: int, width: int) -> Tuple[int, int]:
    """Fall back to the default grid size when either dimension is not positive."""
    if depth <= 0 or width <= 0:
        print("[Simulator] The dimensions must be greater than zero. Using default values.",
              file=sys.stderr)
        return FIELD.depth, FIELD.width
    return int(depth), int(width)


class Field:
    """
    Rectangular grid holding at most one actor per location.

    Neighbor lists come out in row-major order; when the field is given an
    RNG they are shuffled with it, so order is reproducible from the seed.
    """

    def __init__(self, depth: int = FIELD.depth, width: int = FIELD.width, rng: Optional[RNG] = None):
        self.depth, self.width = checked_dimensions(depth, width)
        self._rng = rng
        self._cells: Dict[Location, Actor] = {}

    # --- occupancy ---
    def in_bounds(self, location: Location) -> bool:
        return 0 <= location.row < self.depth and 0 <= location.col < self.width

    def place(self, actor: Actor, location: Location) -> None:
        """
        Put `actor` at `location`, vacating its old cell. An occupant already
        standing there loses its position bookkeeping.
        """
        assert self.in_bounds(location), f"location {location} outside {self.depth}x{self.width}"
        old = actor.location
        if old is not None and actor.field is self and self._cells.get(old) is actor:
            del self._cells[old]
        previous = self._cells.get(location)
        if previous is not None and previous is not actor:
            previous.location = None
            previous.field = None
        self._cells[location] = actor
        actor.location = location
        actor.field = self

    def clear(self, location: Location) -> None:
        self._cells.pop(location, None)

    def clear_all(self) -> None:
        self._cells.clear()

    def get_object_at(self, location: Location) -> Optional[Actor]:
        assert self.in_bounds(location), f"location {location} outside {self.depth}x{self.width}"
        return self._cells.get(location)

    def occupants(self) -> Iterator[Tuple[Location, Actor]]:
        return iter(list(self._cells.items()))

    def __len__(self) -> int:
        return len(self._cells)

    # --- neighborhoods ---
    def adjacent_locations(self, location: Location, min_radius: int = 1, max_radius: int = 1) -> List[Location]:
        """
        In-bounds locations whose Chebyshev distance from `location` lies in
        [min_radius, max_radius]. The location itself is never included.
        """
        assert self.in_bounds(location), f"location {location} outside {self.depth}x{self.width}"
        lo = max(1, int(min_radius))
        hi = int(max_radius)
        found: List[Location] = []
        for dr in range(-hi, hi + 1):
            r = location.row + dr
            if r < 0 or r >= self.depth:
                continue
            for dc in range(-hi, hi + 1):
                c = location.col + dc
                if c < 0 or c >= self.width:
                    continue
                if max(abs(dr), abs(dc)) < lo:
                    continue
                found.append(Location(r, c))
        if self._rng is not None:
            self._rng.shuffle(found)
        return found

    def free_adjacent_locations(self, location: Location) -> List[Location]:
        return [loc for loc in self.adjacent_locations(location) if loc not in self._cells]

    def free_adjacent_location(self, location: Location) -> Optional[Location]:
        free = self.free_adjacent_locations(location)
        return free[0] if free else None
