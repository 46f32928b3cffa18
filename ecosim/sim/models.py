# ecosim/sim/models.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, FrozenSet, Optional, Tuple

from .weather import Weather

if TYPE_CHECKING:
    from .field import Field


@dataclass(frozen=True)
class Location:
    row: int
    col: int


class Kind(Enum):
    PLANT = "plant"
    PREY = "prey"
    PREDATOR = "predator"

    @property
    def is_animal(self) -> bool:
        return self is not Kind.PLANT


class Gender(Enum):
    MALE = "male"
    FEMALE = "female"


@dataclass(frozen=True)
class Species:
    """Static parameter table of one species; shared by all its members."""
    tag: str
    name: str
    kind: Kind
    breeding_age: int
    breeding_probability: float
    max_litter: int
    max_age: int
    food_value: int = 0                     # granted to whoever eats it
    max_food: int = 0                       # animals only
    bedtime: Optional[int] = None           # animals only
    waketime: Optional[int] = None          # animals only
    dies_of_age: bool = True
    breeding_weather: Optional[FrozenSet[Weather]] = None   # plants only; None = any
    mist_boost: Optional[Tuple[float, float]] = None        # added to base rate in mist

    @property
    def nocturnal(self) -> bool:
        return (self.bedtime is not None and self.waketime is not None
                and self.bedtime < self.waketime)


@dataclass(eq=False)
class Actor:
    """
    Flat entity record for every plant and animal on the field.

    The Field is the authority on occupancy; `location`/`field` mirror where
    the actor currently sits and are both None once it is dead.
    Animal-only fields keep their defaults on plants.
    """
    id: int
    species: Species
    location: Optional[Location] = None
    field: Optional["Field"] = None
    alive: bool = True
    age: int = 0

    # animal state
    gender: Optional[Gender] = None
    food_level: int = 0
    awake: bool = True
    infected: bool = False
    sick_days: int = 0
    age_ticks: int = 0   # ticks since the last age increment

    @property
    def kind(self) -> Kind:
        return self.species.kind

    @property
    def is_animal(self) -> bool:
        return self.species.kind.is_animal

    def is_alive(self) -> bool:
        return self.alive

    def set_alive(self, alive: bool) -> None:
        self.alive = alive

    def same_species(self, other: "Actor") -> bool:
        return self.species.tag == other.species.tag

    def __repr__(self) -> str:
        where = (self.location.row, self.location.col) if self.location else None
        state = "alive" if self.alive else "dead"
        return f"<{self.species.name} #{self.id} {state} age={self.age} at={where}>"
