# ecosim/sim/rng.py
import random
from typing import MutableSequence, Optional, Sequence, TypeVar

T = TypeVar("T")


class RNG:
    """Seedable random source handed to every behavior through the context."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def uniform(self, a: float, b: float) -> float:
        return self._rng.uniform(a, b)

    def randrange(self, n: int) -> int:
        """Uniform int in [0, n)."""
        return self._rng.randrange(n)

    def randint(self, a: int, b: int) -> int:
        return self._rng.randint(a, b)

    def chance(self, p: float) -> bool:
        return self._rng.random() <= p

    def coin(self) -> bool:
        return self._rng.random() < 0.5

    def choice(self, seq: Sequence[T]) -> T:
        return self._rng.choice(seq)

    def shuffle(self, seq: MutableSequence) -> None:
        self._rng.shuffle(seq)
