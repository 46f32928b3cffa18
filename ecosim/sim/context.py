# ecosim/sim/context.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

from .config import CLOCK, FIELD
from .disease import DiseaseRegistry
from .field import Field
from .rng import RNG
from .weather import Weather, WeatherCycle


@dataclass
class SimContext:
    """Everything a behavior may read or write during a tick; one per run."""
    rng: RNG
    field: Field
    disease: DiseaseRegistry
    weather: WeatherCycle
    tick: int = 0
    hour: int = 0
    _next_id: int = field(default=1, repr=False)

    def next_id(self) -> int:
        nid = self._next_id
        self._next_id += 1
        return nid

    def advance_clock(self) -> None:
        """One tick of the calendar: hour every 3rd tick, weather every 50th."""
        self.tick += 1
        if self.tick % CLOCK.ticks_per_hour == 0:
            self.hour += 1
        if self.tick % CLOCK.weather_interval == 0:
            self.weather.cycle()
        if self.hour >= CLOCK.hours_per_day:
            self.hour = 0


def make_context(depth: int = FIELD.depth, width: int = FIELD.width, seed: Optional[int] = None,
                 rng: Optional[RNG] = None, weather: Optional[Weather] = None,
                 shuffle_neighbors: bool = True) -> SimContext:
    rng = rng if rng is not None else RNG(seed)
    return SimContext(
        rng=rng,
        field=Field(depth, width, rng=rng if shuffle_neighbors else None),
        disease=DiseaseRegistry(rng),
        weather=WeatherCycle(rng, initial=weather),
    )
