# ecosim/sim/metrics.py
from __future__ import annotations
from typing import Dict, Union
import os
import csv

from .engine import Snapshot
from .species import ALL_SPECIES

Row = Dict[str, Union[int, str]]


def summarize_snapshot(snap: Snapshot) -> Row:
    counts = snap.counts()
    row: Row = dict(
        tick=snap.tick, hour=snap.hour, weather=snap.weather.value, infected=snap.infected,
    )
    for sp in ALL_SPECIES:
        row[sp.tag] = counts.get(sp.tag, 0)
    return row


def format_row(row: Row) -> str:
    pops = " ".join(f"{sp.name}={row[sp.tag]}" for sp in ALL_SPECIES)
    return (f"Tick {row['tick']:5d} | hour {row['hour']:02d} | {row['weather']:<4} "
            f"| infected {row['infected']:3d} | {pops}")


def append_csv(path: str, row: Row) -> None:
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    write_header = not os.path.exists(path)
    with open(path, "a", newline="") as f:
        w = csv.DictWriter(f, fieldnames=list(row.keys()))
        if write_header:
            w.writeheader()
        w.writerow(row)
