# ecosim/sim/disease.py
from __future__ import annotations
from typing import Set

from .config import DISEASE
from .models import Actor
from .rng import RNG


class DiseaseRegistry:
    """
    Population-wide bookkeeping of infected animals.

    Membership mirrors each animal's own `infected` flag, which stays the
    authority; the registry only answers "how many are sick" in O(1).
    """

    def __init__(self, rng: RNG, probability: float = DISEASE.exposure_probability):
        self._rng = rng
        self.probability = probability
        self._infected: Set[Actor] = set()

    def mark_exposed(self, animal: Actor) -> bool:
        """Roll one exposure; on success the animal is registered as infected."""
        if self._rng.chance(self.probability):
            self._infected.add(animal)
            return True
        return False

    def force_infect(self, animal: Actor) -> bool:
        self._infected.add(animal)
        return True

    def recover(self, animal: Actor) -> None:
        self._infected.discard(animal)

    def count(self) -> int:
        return len(self._infected)

    def clear(self) -> None:
        self._infected.clear()

    def __contains__(self, animal: Actor) -> bool:
        return animal in self._infected
