# ecosim/sim/lifecycle.py
from __future__ import annotations

from .config import CLOCK, DISEASE
from .context import SimContext
from .models import Actor, Gender, Location, Species


# ---------------- birth / placement ----------------
def spawn(ctx: SimContext, species: Species, location: Location, random_age: bool = False) -> Actor:
    """
    Create an actor and place it. Seeded actors get a random age (and, for
    animals, a random food level); newborns start at age 0 and full.
    """
    rng = ctx.rng
    actor = Actor(id=ctx.next_id(), species=species)
    if random_age:
        actor.age = rng.randrange(species.max_age)
    if species.kind.is_animal:
        actor.gender = Gender.MALE if rng.coin() else Gender.FEMALE
        actor.food_level = rng.randint(1, species.max_food) if random_age else species.max_food
        # the clock starts at midnight: nocturnal animals are up, diurnal ones asleep
        actor.awake = species.nocturnal
    ctx.field.place(actor, location)
    return actor


def move(actor: Actor, location: Location) -> None:
    assert actor.alive, f"{actor!r} cannot move"
    assert actor.field is not None, f"{actor!r} is not on a field"
    actor.field.place(actor, location)


def set_dead(ctx: SimContext, actor: Actor) -> None:
    """Kill the actor and vacate its cell. Calling it twice is harmless."""
    actor.alive = False
    if actor.location is not None and actor.field is not None:
        if actor.field.get_object_at(actor.location) is actor:
            actor.field.clear(actor.location)
        actor.location = None
        actor.field = None
    if actor.infected:
        ctx.disease.recover(actor)


# ---------------- aging ----------------
def advance_animal_age(ctx: SimContext, animal: Actor) -> None:
    animal.age_ticks += 1
    if animal.age_ticks >= CLOCK.ticks_per_age:
        animal.age_ticks = 0
        animal.age += 1
        if animal.age > animal.species.max_age:
            set_dead(ctx, animal)


def advance_plant_age(ctx: SimContext, plant: Actor) -> None:
    plant.age += 1
    if plant.species.dies_of_age and plant.age > plant.species.max_age:
        set_dead(ctx, plant)


# ---------------- sleep ----------------
def update_sleep(ctx: SimContext, animal: Actor) -> None:
    sp = animal.species
    if ctx.hour == sp.bedtime:
        animal.awake = False
    if ctx.hour == sp.waketime:
        animal.awake = True


# ---------------- food ----------------
def increment_hunger(ctx: SimContext, animal: Actor) -> None:
    animal.food_level -= 1
    if animal.food_level <= 0:
        animal.food_level = 0
        set_dead(ctx, animal)


def feed(ctx: SimContext, animal: Actor, value: int) -> None:
    """Add a food value (possibly negative); dropping to zero is starvation."""
    animal.food_level = min(animal.food_level + value, animal.species.max_food)
    if animal.food_level <= 0:
        animal.food_level = 0
        set_dead(ctx, animal)


# ---------------- disease ----------------
def expose(ctx: SimContext, animal: Actor) -> bool:
    """One exposure roll for a healthy animal. Returns True if it fell sick."""
    if animal.infected or not animal.alive:
        return False
    if ctx.disease.mark_exposed(animal):
        animal.infected = True
        animal.sick_days = 0
        return True
    return False


def infect_at_birth(ctx: SimContext, newborn: Actor) -> None:
    newborn.infected = ctx.disease.force_infect(newborn)
    newborn.sick_days = 0


def recover(ctx: SimContext, animal: Actor) -> None:
    animal.infected = False
    animal.sick_days = 0
    ctx.disease.recover(animal)


def progress_disease(ctx: SimContext, animal: Actor) -> None:
    """Sick animals age faster; after a fixed number of sick days they recover."""
    if not animal.infected:
        return
    animal.age += ctx.rng.randint(DISEASE.age_penalty_min, DISEASE.age_penalty_max)
    animal.sick_days += 1
    if animal.sick_days >= DISEASE.recovery_days:
        recover(ctx, animal)
    if animal.age > animal.species.max_age:
        set_dead(ctx, animal)
