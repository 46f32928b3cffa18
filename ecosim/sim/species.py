# ecosim/sim/species.py
from __future__ import annotations
from typing import Dict

from .models import Kind, Species
from .rng import RNG
from .weather import Weather

# ---------------- plants ----------------
GRASS = Species(
    tag="grass", name="Grass", kind=Kind.PLANT,
    breeding_age=3, breeding_probability=0.20, max_litter=1,
    food_value=1, max_age=20,
    dies_of_age=False,
    breeding_weather=frozenset({Weather.RAIN, Weather.MIST}),
    mist_boost=(0.01, 0.10),
)

POISON_IVY = Species(
    tag="poison_ivy", name="PoisonIvy", kind=Kind.PLANT,
    breeding_age=3, breeding_probability=0.10, max_litter=1,
    food_value=-5, max_age=100,
    dies_of_age=True,
    breeding_weather=frozenset({Weather.WIND}),
)

# ---------------- prey ----------------
GAZELLE = Species(
    tag="gazelle", name="Gazelle", kind=Kind.PREY,
    breeding_age=4, breeding_probability=0.80, max_litter=9,
    food_value=3, max_food=15, max_age=100,
    bedtime=20, waketime=9,
)

ZEBRA = Species(
    tag="zebra", name="Zebra", kind=Kind.PREY,
    breeding_age=4, breeding_probability=0.80, max_litter=9,
    food_value=3, max_food=15, max_age=100,
    bedtime=23, waketime=9,
)

# ---------------- predators ----------------
LION = Species(
    tag="lion", name="Lion", kind=Kind.PREDATOR,
    breeding_age=85, breeding_probability=0.20, max_litter=2,
    max_food=65, max_age=270,
    bedtime=20, waketime=13,
)

HYENA = Species(
    tag="hyena", name="Hyena", kind=Kind.PREDATOR,
    breeding_age=50, breeding_probability=0.20, max_litter=1,
    max_food=40, max_age=200,
    bedtime=4, waketime=18,
)

ALL_SPECIES = (GRASS, POISON_IVY, GAZELLE, ZEBRA, LION, HYENA)
BY_TAG: Dict[str, Species] = {sp.tag: sp for sp in ALL_SPECIES}

# 0 is reserved for an empty cell
SPECIES_CODE: Dict[str, int] = {sp.tag: i + 1 for i, sp in enumerate(ALL_SPECIES)}


def by_tag(tag: str) -> Species:
    return BY_TAG[tag]


def can_breed_in(species: Species, weather: Weather) -> bool:
    if species.breeding_weather is None:
        return True
    return weather in species.breeding_weather


def breeding_probability(species: Species, weather: Weather, rng: RNG) -> float:
    """
    Per-tick breeding chance. Species with a mist boost breed at a
    randomized, slightly elevated rate while it is misty.
    """
    if species.mist_boost is not None and weather is Weather.MIST:
        lo, hi = species.mist_boost
        return species.breeding_probability + rng.uniform(lo, hi)
    return species.breeding_probability
