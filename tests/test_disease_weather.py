from __future__ import annotations

from collections import Counter

from ecosim.sim.disease import DiseaseRegistry
from ecosim.sim.models import Actor
from ecosim.sim.rng import RNG
from ecosim.sim.species import ZEBRA
from ecosim.sim.weather import ALL_WEATHER, Weather, WeatherCycle

from conftest import make_ctx


# ---------------------------------------------------------------------------
# Disease registry
# ---------------------------------------------------------------------------

def test_force_infect_and_recover():
    reg = DiseaseRegistry(RNG(0))
    a, b = Actor(id=1, species=ZEBRA), Actor(id=2, species=ZEBRA)
    assert reg.force_infect(a) is True
    reg.force_infect(b)
    reg.force_infect(b)
    assert reg.count() == 2
    assert a in reg
    reg.recover(a)
    reg.recover(a)
    assert reg.count() == 1
    reg.clear()
    assert reg.count() == 0


def test_mark_exposed_always_or_never():
    a = Actor(id=1, species=ZEBRA)
    assert DiseaseRegistry(RNG(0), probability=1.0).mark_exposed(a) is True
    reg = DiseaseRegistry(RNG(0), probability=-1.0)
    assert reg.mark_exposed(a) is False
    assert reg.count() == 0


def test_mark_exposed_rate_is_low():
    reg = DiseaseRegistry(RNG(11))
    a = Actor(id=1, species=ZEBRA)
    hits = sum(reg.mark_exposed(a) for _ in range(200_000))
    # 0.001 per encounter -> ~200 expected
    assert 130 < hits < 270
    assert reg.count() == 1


# ---------------------------------------------------------------------------
# Weather
# ---------------------------------------------------------------------------

def test_cycle_draws_uniformly_from_the_five_conditions():
    wc = WeatherCycle(RNG(5))
    seen = Counter(wc.cycle() for _ in range(5000))
    assert set(seen) == set(ALL_WEATHER)
    assert all(850 < n < 1150 for n in seen.values())
    assert wc.current() in ALL_WEATHER


def test_initial_weather_can_be_pinned():
    assert WeatherCycle(RNG(1), initial=Weather.FOG).current() is Weather.FOG


def test_weather_rerolled_only_every_fiftieth_tick():
    ctx = make_ctx(weather=Weather.SUN)
    rolled_at = []
    real_cycle = ctx.weather.cycle

    def spy():
        rolled_at.append(ctx.tick)
        return real_cycle()

    ctx.weather.cycle = spy
    for _ in range(49):
        ctx.advance_clock()
    assert rolled_at == []
    assert ctx.weather.current() is Weather.SUN
    ctx.advance_clock()
    assert rolled_at == [50]
    for _ in range(100):
        ctx.advance_clock()
    assert rolled_at == [50, 100, 150]
    assert ctx.weather.current() in ALL_WEATHER


def test_hour_advances_every_third_tick_and_wraps():
    ctx = make_ctx()
    ctx.advance_clock()
    ctx.advance_clock()
    assert ctx.hour == 0
    ctx.advance_clock()
    assert ctx.hour == 1
    for _ in range(68):
        ctx.advance_clock()
    assert (ctx.tick, ctx.hour) == (71, 23)
    ctx.advance_clock()
    assert (ctx.tick, ctx.hour) == (72, 0)


def test_force_pins_the_condition_until_next_cycle():
    ctx = make_ctx(weather=Weather.RAIN)
    ctx.weather.force(Weather.SUN)
    for _ in range(49):
        ctx.advance_clock()
    assert ctx.weather.current() is Weather.SUN
