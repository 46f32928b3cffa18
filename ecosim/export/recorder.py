# ecosim/export/recorder.py
from __future__ import annotations
import os, time
from typing import List, Optional
import numpy as np

from ..sim.engine import Snapshot
from ..sim.species import ALL_SPECIES, SPECIES_CODE
from ..sim.weather import ALL_WEATHER


class Recorder:
    """
    Capture every `stride_steps`-th snapshot for offline playback (NPZ).
    Stores: species-code grids (0 = empty), tick, hour, weather index, infected count.
    """
    def __init__(self, enabled=False, stride_steps=1):
        self.enabled = enabled
        self.stride_steps = max(1, int(stride_steps))
        self.grids: List[np.ndarray] = []
        self.ticks: List[int] = []
        self.hours: List[int] = []
        self.weather: List[int] = []
        self.infected: List[int] = []

    def __len__(self) -> int:
        return len(self.grids)

    @staticmethod
    def encode(snap: Snapshot) -> np.ndarray:
        grid = np.zeros((snap.depth, snap.width), np.int8)
        for loc, tag in snap.cells.items():
            grid[loc.row, loc.col] = SPECIES_CODE[tag]
        return grid

    def maybe_capture(self, snap: Snapshot) -> bool:
        if not self.enabled: return False
        if (snap.tick % self.stride_steps) != 0: return False

        self.grids.append(self.encode(snap))
        self.ticks.append(snap.tick)
        self.hours.append(snap.hour)
        self.weather.append(ALL_WEATHER.index(snap.weather))
        self.infected.append(snap.infected)
        return True

    def save_npz(self, out_path: Optional[str] = None):
        if not self.grids:
            print("[Recorder] nothing to save"); return None

        if out_path is None:
            os.makedirs("recordings", exist_ok=True)
            stamp = time.strftime("%Y%m%d_%H%M%S")
            out_path = os.path.join("recordings", f"ecosim_run_{stamp}.npz")
        else:
            folder = os.path.dirname(out_path)
            if folder:
                os.makedirs(folder, exist_ok=True)

        T = len(self.grids)
        np.savez_compressed(
            out_path,
            grids=np.stack(self.grids),
            tick=np.asarray(self.ticks, np.int32),
            hour=np.asarray(self.hours, np.int8),
            weather=np.asarray(self.weather, np.int8),
            infected=np.asarray(self.infected, np.int32),
            stride_steps=np.int32(self.stride_steps),
            species=np.asarray([sp.tag for sp in ALL_SPECIES]),
            weather_names=np.asarray([w.value for w in ALL_WEATHER]),
        )
        print(f"[Recorder] saved: {out_path} (T={T}, grid={self.grids[0].shape})")
        return out_path
