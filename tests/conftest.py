"""Shared fixtures: a small, unshuffled field with a fixed seed and weather."""

from __future__ import annotations

import pytest

from ecosim.sim.context import SimContext, make_context
from ecosim.sim.lifecycle import spawn
from ecosim.sim.models import Actor, Gender, Location, Species
from ecosim.sim.weather import Weather


def make_ctx(depth: int = 5, width: int = 5, seed: int = 7, weather: Weather = Weather.RAIN) -> SimContext:
    return make_context(depth, width, seed=seed, weather=weather, shuffle_neighbors=False)


def put(ctx: SimContext, species: Species, row: int, col: int, **attrs) -> Actor:
    """Spawn a newborn at (row, col) and override any of its fields."""
    actor = spawn(ctx, species, Location(row, col))
    for k, v in attrs.items():
        setattr(actor, k, v)
    return actor


def always(ctx: SimContext) -> None:
    """Every probability roll succeeds."""
    ctx.rng.chance = lambda p: True


def never(ctx: SimContext) -> None:
    """Every probability roll fails."""
    ctx.rng.chance = lambda p: False


@pytest.fixture
def ctx() -> SimContext:
    return make_ctx()


MALE = Gender.MALE
FEMALE = Gender.FEMALE
