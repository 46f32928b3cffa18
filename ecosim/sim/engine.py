# ecosim/sim/engine.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .behaviors import act
from .config import POPULATION
from .context import SimContext
from .lifecycle import spawn
from .models import Actor, Location, Species
from .species import by_tag
from .weather import Weather


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of one tick for renderers, recorders and stats."""
    tick: int
    hour: int
    weather: Weather
    infected: int
    depth: int
    width: int
    cells: Dict[Location, str]   # location -> species tag; empty cells absent

    def species_at(self, row: int, col: int) -> Optional[str]:
        return self.cells.get(Location(row, col))

    def counts(self) -> Dict[str, int]:
        out: Dict[str, int] = {}
        for tag in self.cells.values():
            out[tag] = out.get(tag, 0) + 1
        return out


def _creation_table(creation: Iterable[Tuple[str, float]]) -> List[Tuple[Species, float]]:
    return [(by_tag(tag), float(p)) for tag, p in creation]


def populate(ctx: SimContext, creation: Sequence[Tuple[str, float]] = POPULATION.creation) -> List[Actor]:
    """
    Seed an empty field. Each cell rolls every species independently in
    table order; when several succeed, the last one gets the cell.
    """
    table = _creation_table(creation)
    field = ctx.field
    rng = ctx.rng
    field.clear_all()
    actors: List[Actor] = []
    for row in range(field.depth):
        for col in range(field.width):
            winner: Optional[Species] = None
            for species, p in table:
                if rng.chance(p):
                    winner = species
            if winner is not None:
                actors.append(spawn(ctx, winner, Location(row, col), random_age=True))
    return actors


def simulate_tick(ctx: SimContext, actors: List[Actor]) -> List[Actor]:
    """
    Advance the clock and let every actor alive at the start of the tick act
    once, in order. Returns the next live list: survivors, then newborns.
    Anything born this tick first acts next tick.
    """
    ctx.advance_clock()
    newborns: List[Actor] = []
    for actor in list(actors):
        # may have been eaten or killed earlier this tick
        if not actor.alive:
            continue
        act(ctx, actor, newborns)
    survivors = [a for a in actors if a.alive]
    survivors.extend(a for a in newborns if a.alive)
    return survivors


def living_species(actors: Iterable[Actor]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for a in actors:
        if a.alive:
            counts[a.species.tag] = counts.get(a.species.tag, 0) + 1
    return counts


def is_viable(actors: Iterable[Actor]) -> bool:
    """A run stays viable while at least two species have living members."""
    return len(living_species(actors)) > 1


def take_snapshot(ctx: SimContext) -> Snapshot:
    cells = {loc: actor.species.tag for loc, actor in ctx.field.occupants()}
    return Snapshot(
        tick=ctx.tick,
        hour=ctx.hour,
        weather=ctx.weather.current(),
        infected=ctx.disease.count(),
        depth=ctx.field.depth,
        width=ctx.field.width,
        cells=cells,
    )
