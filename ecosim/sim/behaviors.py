# ecosim/sim/behaviors.py
from __future__ import annotations
from typing import List, Optional, Tuple

from .breeding import give_birth
from .config import COMBAT
from .context import SimContext
from .lifecycle import (
    advance_animal_age, advance_plant_age, expose, feed, increment_hunger,
    move, progress_disease, set_dead, update_sleep,
)
from .models import Actor, Kind, Location
from .species import GRASS
from .weather import Weather

Band = Tuple[int, int]


# ---------------- vision ----------------
def foraging_band(weather: Weather) -> Band:
    """Predator search band (min, max radius) for the current weather."""
    if weather is Weather.SUN:
        return (1, 2)
    if weather is Weather.FOG:
        return (0, 1)
    return (1, 1)


def _search_band(ctx: SimContext, me: Actor) -> Band:
    if me.kind is Kind.PREDATOR:
        return foraging_band(ctx.weather.current())
    return (1, 1)


# ---------------- diet rules ----------------
def can_eat(eater: Actor, food: Actor) -> bool:
    """
    Predators eat prey; prey eat plants that are old enough to breed.
    Plants eat nothing and nobody eats predators.
    """
    if eater.kind is Kind.PREDATOR:
        return food.kind is Kind.PREY
    if eater.kind is Kind.PREY:
        return food.kind is Kind.PLANT and food.age >= food.species.breeding_age
    if eater.kind is Kind.PLANT:
        return False
    raise AssertionError(f"unhandled kind {eater.kind!r}")


def kill_probability(me: Actor, opponent: Actor) -> float:
    """The acting predator's instinct decides, not the victim's."""
    if me.same_species(opponent):
        return COMBAT.same_species_kill
    return COMBAT.killing_instinct.get(me.species.tag, 0.0)


# ---------------- move candidates ----------------
def combat_enemy(ctx: SimContext, me: Actor) -> Optional[Location]:
    """Fight adjacent predators in turn; the first one killed frees its cell."""
    field = ctx.field
    for where in field.adjacent_locations(me.location, 1, 1):
        other = field.get_object_at(where)
        if other is None or not other.alive or other.kind is not Kind.PREDATOR:
            continue
        if ctx.rng.chance(kill_probability(me, other)):
            set_dead(ctx, other)
            return where
    return None


def find_food(ctx: SimContext, me: Actor) -> Optional[Location]:
    """
    Eat the first edible neighbor that fits in the stomach. Eating sick prey
    is an exposure for a predator. Returns the cell that was eaten clear.
    """
    field = ctx.field
    lo, hi = _search_band(ctx, me)
    for where in field.adjacent_locations(me.location, lo, hi):
        food = field.get_object_at(where)
        if food is None or not food.alive or not can_eat(me, food):
            continue
        value = food.species.food_value
        if me.food_level + value > me.species.max_food:
            continue
        was_sick = food.infected
        set_dead(ctx, food)
        feed(ctx, me, value)
        if not me.alive:
            return None
        if me.kind is Kind.PREDATOR and was_sick:
            expose(ctx, me)
        return where
    return None


def consume_adjacent_grass(ctx: SimContext, me: Actor) -> Optional[Location]:
    """Last resort before overcrowding: trample a neighboring grass and take its cell."""
    field = ctx.field
    for where in field.adjacent_locations(me.location, 1, 1):
        plant = field.get_object_at(where)
        if plant is not None and plant.alive and plant.species is GRASS:
            set_dead(ctx, plant)
            return where
    return None


# ---------------- per-tick routines ----------------
def _resolve_move(ctx: SimContext, me: Actor) -> None:
    new_loc: Optional[Location] = None

    # predators fight before they forage
    if me.kind is Kind.PREDATOR:
        new_loc = combat_enemy(ctx, me)

    if new_loc is None and me.food_level < me.species.max_food:
        new_loc = find_food(ctx, me)
        if not me.alive:
            return

    if new_loc is None:
        new_loc = ctx.field.free_adjacent_location(me.location)

    if new_loc is None:
        new_loc = consume_adjacent_grass(ctx, me)

    if new_loc is None:
        # overcrowding
        set_dead(ctx, me)
        return

    move(me, new_loc)
    if me.kind is Kind.PREDATOR:
        expose(ctx, me)


def act_animal(ctx: SimContext, me: Actor, newborns: List[Actor]) -> None:
    """
    Age and sicken (awake or not), settle sleep against the clock, then,
    while awake: get hungrier, breed, and move.
    """
    advance_animal_age(ctx, me)
    if not me.alive:
        return
    progress_disease(ctx, me)
    if not me.alive:
        return

    update_sleep(ctx, me)
    if not me.awake:
        return

    increment_hunger(ctx, me)
    if not me.alive:
        return
    give_birth(ctx, me, newborns)
    _resolve_move(ctx, me)


def act_plant(ctx: SimContext, me: Actor, newborns: List[Actor]) -> None:
    advance_plant_age(ctx, me)
    if me.alive:
        give_birth(ctx, me, newborns)


def act(ctx: SimContext, me: Actor, newborns: List[Actor]) -> None:
    assert me.alive, f"{me!r} is dead and cannot act"
    assert me.location is not None, f"{me!r} is not placed"
    if me.kind is Kind.PLANT:
        act_plant(ctx, me, newborns)
    elif me.kind is Kind.PREY or me.kind is Kind.PREDATOR:
        act_animal(ctx, me, newborns)
    else:
        raise AssertionError(f"unhandled kind {me.kind!r}")
