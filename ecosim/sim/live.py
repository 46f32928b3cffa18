# ecosim/sim/live.py
from __future__ import annotations
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .config import FIELD, POPULATION, SIM
from .context import SimContext, make_context
from .engine import Snapshot, is_viable, living_species, populate, simulate_tick, take_snapshot
from .field import checked_dimensions
from .models import Actor
from .weather import Weather


class RunState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"
    EXHAUSTED = "exhausted"
    NON_VIABLE = "non-viable"


class Simulator:
    """
    Step-by-step driver for external loops (CLI, renderers, tests).

    Owns the live actor list and the per-run context; `reset()` builds a
    fresh context every time, so nothing leaks between runs. The core never
    sleeps: `delay_ms` is only advice for whoever calls `step()`.
    """

    def __init__(self, depth: int = FIELD.depth, width: int = FIELD.width, seed: Optional[int] = SIM.seed,
                 creation: Sequence[Tuple[str, float]] = POPULATION.creation,
                 shuffle_neighbors: bool = True):
        self.depth, self.width = checked_dimensions(depth, width)
        self.seed = seed
        self.creation = tuple(creation)
        self.shuffle_neighbors = shuffle_neighbors

        self.ctx: Optional[SimContext] = None
        self.actors: List[Actor] = []
        self.state = RunState.IDLE
        self.delay_ms: int = 0
        self._stop_requested = False
        self.last_snapshot: Optional[Snapshot] = None

        self.reset()

    # ---- lifecycle ----
    def reset(self, seed: Optional[int] = None, weather: Optional[Weather] = None) -> Snapshot:
        """Fresh context, freshly seeded field; clock back to tick 0."""
        if seed is not None:
            self.seed = seed
        self.ctx = make_context(self.depth, self.width, seed=self.seed, weather=weather,
                                shuffle_neighbors=self.shuffle_neighbors)
        self.actors = populate(self.ctx, self.creation)
        self.state = RunState.IDLE
        self._stop_requested = False
        self.last_snapshot = take_snapshot(self.ctx)
        return self.last_snapshot

    def reset_population(self, creation: Sequence[Tuple[str, float]]) -> Snapshot:
        self.creation = tuple(creation)
        return self.reset()

    # ---- stepping ----
    def step(self) -> Snapshot:
        assert self.ctx is not None, "simulator has not been reset"
        self.state = RunState.RUNNING
        self.actors = simulate_tick(self.ctx, self.actors)
        self.last_snapshot = take_snapshot(self.ctx)
        return self.last_snapshot

    def run(self, max_steps: int = SIM.steps,
            on_tick: Optional[Callable[[Snapshot], None]] = None) -> RunState:
        """
        Step until `max_steps` ticks ran, fewer than two species are left,
        or someone called `stop()`. Both checks happen between ticks only.
        `on_tick` sees every snapshot and is where a caller may pause.
        """
        if max_steps < 0:
            raise ValueError(f"max_steps must be >= 0, got {max_steps}")
        self.state = RunState.RUNNING
        for _ in range(max_steps):
            if self._stop_requested:
                self.state = RunState.STOPPED
                return self.state
            if not self.is_viable():
                self.state = RunState.NON_VIABLE
                return self.state
            snap = self.step()
            if on_tick is not None:
                on_tick(snap)
        if self._stop_requested:
            self.state = RunState.STOPPED
        elif not self.is_viable():
            self.state = RunState.NON_VIABLE
        else:
            self.state = RunState.EXHAUSTED
        return self.state

    # ---- control signals ----
    def stop(self) -> None:
        self._stop_requested = True

    def resume(self) -> None:
        self._stop_requested = False
        if self.state is RunState.STOPPED:
            self.state = RunState.IDLE

    @property
    def stop_requested(self) -> bool:
        return self._stop_requested

    def set_delay(self, ms: int) -> None:
        self.delay_ms = max(0, int(ms))

    # ---- read-only views ----
    def is_viable(self) -> bool:
        return is_viable(self.actors)

    def snapshot(self) -> Snapshot:
        assert self.ctx is not None, "simulator has not been reset"
        self.last_snapshot = take_snapshot(self.ctx)
        return self.last_snapshot

    @property
    def tick(self) -> int:
        return self.ctx.tick if self.ctx is not None else 0

    def population(self) -> Dict[str, int]:
        return living_species(self.actors)
