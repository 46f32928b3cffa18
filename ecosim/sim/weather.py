# ecosim/sim/weather.py
from __future__ import annotations
from enum import Enum
from typing import Optional

from .rng import RNG


class Weather(Enum):
    RAIN = "rain"
    SUN = "sun"
    FOG = "fog"
    WIND = "wind"
    MIST = "mist"


ALL_WEATHER = (Weather.RAIN, Weather.SUN, Weather.FOG, Weather.WIND, Weather.MIST)


class WeatherCycle:
    """Current weather condition; re-rolled uniformly by the scheduler."""

    def __init__(self, rng: RNG, initial: Optional[Weather] = None):
        self._rng = rng
        self._current = initial if initial is not None else rng.choice(ALL_WEATHER)

    def cycle(self) -> Weather:
        self._current = ALL_WEATHER[self._rng.randrange(len(ALL_WEATHER))]
        return self._current

    def current(self) -> Weather:
        return self._current

    def force(self, weather: Weather) -> None:
        self._current = weather
