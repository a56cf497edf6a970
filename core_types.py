# core_types.py

"""
Shared type definitions and core dataclasses for the golf-wind project.

This module is intentionally small and only depends on config.py, so it can
be imported from anywhere (simulation/, state/, utils/, main.py) without risk
of circular imports.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List

from config import DIFFICULTY_PRESETS, HOLE_SIZE, MAX_WIND_DIR, MAX_WIND_SPD


# ---------- Basic aliases ----------

HoleIndex = int
WindSpeed = int
WindDirection = int

# A permutation of 0..N-1 in draw order
RandomSequence = List[int]


# ---------- Errors ----------


class InvalidDifficultyError(ValueError):
    """
    Raised when a Difficulty cannot produce a wind set: the played range
    falls outside the course, or the wind bounds leave too few speeds to
    cover every played hole.
    """


# ---------- Core dataclasses ----------


@dataclass(frozen=True)
class Difficulty:
    """
    Which holes are played this round and which wind speeds are allowed.

    Both ranges are inclusive and holes are 0-based:
        start_hole=0, end_hole=8 -> all nine holes.
    """

    start_hole: HoleIndex
    end_hole: HoleIndex
    min_wind: WindSpeed = 0
    max_wind: WindSpeed = MAX_WIND_SPD - 1

    @classmethod
    def from_preset(cls, name: str) -> "Difficulty":
        try:
            start, end, lo, hi = DIFFICULTY_PRESETS[name]
        except KeyError:
            raise ValueError(
                f"Unknown difficulty preset {name!r}; "
                f"expected one of {sorted(DIFFICULTY_PRESETS)}"
            ) from None
        return cls(start_hole=start, end_hole=end, min_wind=lo, max_wind=hi)

    @property
    def num_played(self) -> int:
        return self.end_hole - self.start_hole + 1

    def is_played(self, hole: HoleIndex) -> bool:
        return self.start_hole <= hole <= self.end_hole

    def allows(self, speed: WindSpeed) -> bool:
        return self.min_wind <= speed <= self.max_wind


@dataclass
class WindEntry:
    """Wind for a single hole. Direction is in [0, MAX_WIND_DIR]."""

    speed: WindSpeed = MAX_WIND_SPD
    direction: WindDirection = MAX_WIND_DIR

    def to_dict(self) -> Dict[str, int]:
        return {"speed": int(self.speed), "direction": int(self.direction)}


@dataclass
class WindSet:
    """
    Per-hole wind for one round.

    Always holds HOLE_SIZE entries. Holes outside the played range keep the
    sentinel values (speed MAX_WIND_SPD, direction MAX_WIND_DIR).
    """

    entries: List[WindEntry] = field(
        default_factory=lambda: [WindEntry() for _ in range(HOLE_SIZE)]
    )

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, hole: HoleIndex) -> WindEntry:
        return self.entries[hole]

    def __iter__(self) -> Iterator[WindEntry]:
        return iter(self.entries)

    def speeds(self) -> List[WindSpeed]:
        return [e.speed for e in self.entries]

    def directions(self) -> List[WindDirection]:
        return [e.direction for e in self.entries]

    def to_list(self) -> List[Dict[str, int]]:
        return [e.to_dict() for e in self.entries]
