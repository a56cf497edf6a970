# state/wind_store.py

"""
Persistent storage for WindSets.

This module handles:
  - converting a WindSet to / from a pandas DataFrame,
  - saving a WindSet as JSON or CSV,
  - loading it back.

Typical usage in main.py:

    from state.wind_store import save_wind_set, load_wind_set

    wind = make_wind_set(difficulty, rng)
    save_wind_set(wind, Path("round.json"))
    assert load_wind_set(Path("round.json")) == wind

The file format is picked from the suffix. JSON stores a plain list of
{"speed", "direction"} objects, one per hole, so saved rounds stay easy to
diff against recordings from the game.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import pandas as pd

from config import HOLE_SIZE, STATE_DIR
from core_types import WindEntry, WindSet


WIND_SET_PATH: Path = STATE_DIR / "wind_set.json"

COLUMNS = ["hole", "speed", "direction"]


def wind_set_to_frame(wind: WindSet) -> pd.DataFrame:
    """
    One row per hole, with columns hole / speed / direction.
    """
    rows = [
        {"hole": hole, "speed": entry.speed, "direction": entry.direction}
        for hole, entry in enumerate(wind)
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


def wind_set_from_frame(df: pd.DataFrame) -> WindSet:
    missing = [c for c in ("speed", "direction") if c not in df.columns]
    if missing:
        raise ValueError(f"Wind set table is missing columns: {missing}")

    if "hole" in df.columns:
        df = df.sort_values("hole")

    if len(df) != HOLE_SIZE:
        raise ValueError(f"Expected {HOLE_SIZE} holes, got {len(df)}")

    entries = [
        WindEntry(speed=int(row.speed), direction=int(row.direction))
        for row in df.itertuples(index=False)
    ]
    return WindSet(entries=entries)


def save_wind_set(wind: WindSet, path: Optional[Path] = None) -> Path:
    """
    Save a WindSet to `path` (.json or .csv).

    Args:
        wind:
            The WindSet to save.
        path:
            Optional custom path; defaults to state/wind_sets/wind_set.json.

    Returns:
        The path written.
    """
    p = Path(path) if path is not None else WIND_SET_PATH
    p.parent.mkdir(parents=True, exist_ok=True)

    suffix = p.suffix.lower()
    if suffix == ".json":
        p.write_text(json.dumps(wind.to_list(), indent=2), encoding="utf-8")
    elif suffix == ".csv":
        wind_set_to_frame(wind).to_csv(p, index=False)
    else:
        raise ValueError(f"Unsupported wind set format: {p.suffix!r}")
    return p


def load_wind_set(path: Optional[Path] = None) -> WindSet:
    """
    Load a WindSet saved by `save_wind_set`.

    A missing file raises FileNotFoundError; there is no sensible default
    for a recorded round.
    """
    p = Path(path) if path is not None else WIND_SET_PATH

    suffix = p.suffix.lower()
    if suffix == ".json":
        raw = json.loads(p.read_text(encoding="utf-8"))
        return wind_set_from_frame(pd.DataFrame(raw))
    if suffix == ".csv":
        return wind_set_from_frame(pd.read_csv(p))
    raise ValueError(f"Unsupported wind set format: {p.suffix!r}")
