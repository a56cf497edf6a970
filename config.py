# config.py

"""
Global configuration for the golf-wind project.

This module centralizes:
  - the course / wind constants that must match the reference game,
  - filesystem paths,
  - default RNG settings,
  - difficulty presets.

The compatibility constants in the first section are load-bearing: changing
any of them changes every generated wind set. CALC_BEFORE_WIND is the
exception in that its reference value is not confirmed yet.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Tuple


# -------------------------------------------------------------------
# Course & wind constants (must match the reference game)
# -------------------------------------------------------------------

# Number of holes on the course. A wind set always has this many entries,
# no matter how many holes are actually played.
HOLE_SIZE: int = 9

# Number of wind directions. Also written as the direction of unplayed
# holes; consumers reduce it modulo MAX_WIND_DIR.
MAX_WIND_DIR: int = 8

# Number of wind speeds (speeds are 0..MAX_WIND_SPD-1, in 2 mph steps).
# Also written as the speed of unplayed holes.
MAX_WIND_SPD: int = 16

# Direction forced onto calm holes once the nonzero budget is used up.
SOUTH: int = 0

# At most this many played holes may have a nonzero wind speed.
MAX_NONZERO_WINDS: int = 8

# Random draws made by the game between the start of the turn and wind
# generation, discarded so the stream lines up with the reference.
# Provisional: the reference value has not been confirmed. make_wind_set
# accepts calc_before_wind= to override it.
CALC_BEFORE_WIND: int = 4


# -------------------------------------------------------------------
# Core paths
# -------------------------------------------------------------------

# Root of the project (directory containing main.py, config.py, etc.)
PROJECT_ROOT: Path = Path(__file__).resolve().parent

# Saved wind sets
STATE_DIR: Path = PROJECT_ROOT / "state" / "wind_sets"

# Directory for logs (if you want to write logs to disk)
LOGS_DIR: Path = PROJECT_ROOT / "logs"


# -------------------------------------------------------------------
# RNG settings
# -------------------------------------------------------------------

# Global RNG seed for reproducibility
RANDOM_SEED: int = 42

# Either "lcg" (reference-style 32-bit LCG) or "numpy".
RNG_KIND: str = "lcg"

# Use the float formula of the first game release.
LEGACY_MODE: bool = False


# -------------------------------------------------------------------
# Difficulty presets
# -------------------------------------------------------------------

# name -> (start_hole, end_hole, min_wind, max_wind), holes 0-based inclusive
DIFFICULTY_PRESETS: Dict[str, Tuple[int, int, int, int]] = {
    "beginner": (0, 2, 0, MAX_WIND_SPD - 1),
    "intermediate": (3, 5, 0, MAX_WIND_SPD - 1),
    "expert": (6, 8, 0, MAX_WIND_SPD - 1),
    "nine_holes": (0, HOLE_SIZE - 1, 0, MAX_WIND_SPD - 1),
}

DEFAULT_DIFFICULTY: str = "nine_holes"
