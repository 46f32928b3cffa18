# ecosim/sim/breeding.py
from __future__ import annotations
from typing import List

from .context import SimContext
from .lifecycle import expose, infect_at_birth, spawn
from .models import Actor, Kind
from .species import breeding_probability, can_breed_in


def find_partner(ctx: SimContext, me: Actor) -> bool:
    """
    Look for a living same-species neighbor of the other gender.

    Every same-species neighbor inspected on the way is a contact: a sick
    one may infect `me`, and a sick `me` may infect a healthy one.
    """
    field = ctx.field
    for where in field.adjacent_locations(me.location, 1, 1):
        other = field.get_object_at(where)
        if other is None or not other.alive or not other.is_animal:
            continue
        if not me.same_species(other):
            continue
        if other.infected and not me.infected:
            expose(ctx, me)
        elif me.infected and not other.infected:
            expose(ctx, other)
        if other.gender is not me.gender:
            return True
    return False


def can_breed(ctx: SimContext, me: Actor) -> bool:
    if me.age < me.species.breeding_age:
        return False
    if me.kind is Kind.PLANT:
        return True
    return find_partner(ctx, me)


def breed(ctx: SimContext, me: Actor) -> int:
    """Number of births this tick (may be zero)."""
    sp = me.species
    if not can_breed(ctx, me):
        return 0
    p = breeding_probability(sp, ctx.weather.current(), ctx.rng)
    if ctx.rng.chance(p):
        return ctx.rng.randint(1, sp.max_litter)
    return 0


def give_birth(ctx: SimContext, me: Actor, newborns: List[Actor]) -> int:
    """
    Breed and drop the young into free neighboring cells until either runs
    out. Young of a sick parent are born sick. Returns how many were placed.
    """
    if me.kind is Kind.PLANT and not can_breed_in(me.species, ctx.weather.current()):
        return 0
    births = breed(ctx, me)
    if births == 0:
        return 0
    free = ctx.field.free_adjacent_locations(me.location)
    placed = 0
    for loc in free[:births]:
        young = spawn(ctx, me.species, loc)
        if me.is_animal and me.infected:
            infect_at_birth(ctx, young)
        newborns.append(young)
        placed += 1
    return placed
