# ecosim/sim/config.py
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

# ------------------------------------------------------------
# FIELD / GRID SETTINGS
# ------------------------------------------------------------
@dataclass(frozen=False)  # mutable so a run can pick its own grid size
class FieldConfig:
    # substituted whenever a requested dimension is <= 0
    depth: int = 150
    width: int = 210

# ------------------------------------------------------------
# CLOCK / CALENDAR
# ------------------------------------------------------------
@dataclass(frozen=True)
class ClockConfig:
    ticks_per_hour: int = 3
    hours_per_day: int = 24
    weather_interval: int = 50   # weather re-rolled on multiples of this tick
    ticks_per_age: int = 3       # animals age one year per this many ticks

# ------------------------------------------------------------
# DISEASE
# ------------------------------------------------------------
@dataclass(frozen=True)
class DiseaseConfig:
    exposure_probability: float = 0.001
    recovery_days: int = 5
    age_penalty_min: int = 1
    age_penalty_max: int = 10

# ------------------------------------------------------------
# PREDATOR COMBAT
# ------------------------------------------------------------
@dataclass(frozen=True)
class CombatConfig:
    # acting species' chance to kill a predator of another species
    killing_instinct: Dict[str, float] = field(
        default_factory=lambda: {"lion": 0.05, "hyena": 0.03}
    )
    same_species_kill: float = 0.007

# ------------------------------------------------------------
# INITIAL POPULATION (per-cell creation probabilities)
# ------------------------------------------------------------
@dataclass(frozen=False)
class PopulationConfig:
    # rolled per cell in this order; a later success takes the cell
    creation: Tuple[Tuple[str, float], ...] = (
        ("lion",       0.03),
        ("zebra",      0.30),
        ("gazelle",    0.30),
        ("grass",      0.50),
        ("poison_ivy", 0.01),
        ("hyena",      0.03),
    )

# ------------------------------------------------------------
# HEADLESS SETTINGS
# ------------------------------------------------------------
@dataclass(frozen=False)
class SimConfig:
    seed: int = 42
    steps: int = 4000
    delay_ms: int = 120
    report_every: int = 50
    track_csv: Optional[str] = None
    record_npz: Optional[str] = None
    record_stride: int = 1

# ------------------------------------------------------------
# EXPORT SINGLETONS
# ------------------------------------------------------------
FIELD = FieldConfig()
CLOCK = ClockConfig()
DISEASE = DiseaseConfig()
COMBAT = CombatConfig()
POPULATION = PopulationConfig()
SIM = SimConfig()
