# simulation/wind_set.py

"""
Per-hole wind generation for one round.

Given a Difficulty and a random source, `make_wind_set` produces a WindSet
that matches the reference game draw for draw:

    1. discard CALC_BEFORE_WIND draws (everything the game rolls earlier
       in the turn),
    2. draw a direction sequence (MAX_WIND_DIR) and a speed sequence
       (MAX_WIND_SPD) with `make_random_sequence`,
    3. walk all HOLE_SIZE holes once:
         - unplayed holes get the sentinels (MAX_WIND_SPD, MAX_WIND_DIR),
         - played holes take the next allowed speed from the speed sequence,
           and a direction from the direction sequence while fewer than
           MAX_NONZERO_WINDS holes are windy,
         - once the budget is used up, a calm hole points SOUTH, and a windy
           hole triggers a donation: one extra draw picks a played hole whose
           speed becomes 0, and the current hole inherits its direction.

The unplayed direction sentinel is MAX_WIND_DIR itself, not 0. Consumers
reduce directions modulo MAX_WIND_DIR, and saved rounds contain the raw 8.
"""

from __future__ import annotations

from typing import Tuple

from config import (
    CALC_BEFORE_WIND,
    HOLE_SIZE,
    MAX_NONZERO_WINDS,
    MAX_WIND_DIR,
    MAX_WIND_SPD,
    SOUTH,
)
from core_types import (
    Difficulty,
    InvalidDifficultyError,
    RandomSequence,
    WindSet,
    WindSpeed,
)
from utils.logging_utils import get_logger
from utils.rng import RandomSource

from .random_sequence import make_random_sequence, scale_draw


logger = get_logger(__name__)


def validate_difficulty(difficulty: Difficulty) -> None:
    """
    Fail fast on a Difficulty the generator cannot satisfy.

    Every played hole consumes at least one distinct allowed entry of the
    speed sequence, so the allowed speed count must cover the played holes.
    """
    start, end = difficulty.start_hole, difficulty.end_hole
    if not 0 <= start <= end < HOLE_SIZE:
        raise InvalidDifficultyError(
            f"Played range [{start}, {end}] must satisfy "
            f"0 <= start_hole <= end_hole < {HOLE_SIZE}"
        )

    allowed = sum(1 for s in range(MAX_WIND_SPD) if difficulty.allows(s))
    if allowed < difficulty.num_played:
        raise InvalidDifficultyError(
            f"Wind bounds [{difficulty.min_wind}, {difficulty.max_wind}] allow "
            f"{allowed} speed(s) but {difficulty.num_played} hole(s) are played"
        )


def _next_allowed_speed(
    speeds: RandomSequence,
    cursor: int,
    difficulty: Difficulty,
) -> Tuple[WindSpeed, int]:
    """
    Consume speed entries from `cursor` until one is within the wind bounds.

    Returns (speed, new_cursor).
    """
    while cursor < len(speeds):
        speed = speeds[cursor]
        cursor += 1
        if difficulty.allows(speed):
            return speed, cursor

    raise InvalidDifficultyError(
        f"Speed sequence exhausted: no remaining speed within "
        f"[{difficulty.min_wind}, {difficulty.max_wind}]"
    )


def make_wind_set(
    difficulty: Difficulty,
    rng: RandomSource,
    legacy: bool = False,
    calc_before_wind: int = CALC_BEFORE_WIND,
) -> WindSet:
    """
    Generate the wind for every hole of the course.

    Args:
        difficulty:
            Played hole range and allowed wind speeds.
        rng:
            Random source. It must not be used by anything else until this
            call returns.
        legacy:
            Float formula flag, passed to every draw of this call.
        calc_before_wind:
            Number of draws discarded before generation starts.

    Returns:
        WindSet with HOLE_SIZE entries.

    Raises:
        InvalidDifficultyError: before any draw, if `difficulty` cannot be
        satisfied.
    """
    validate_difficulty(difficulty)

    rng.discard(calc_before_wind)

    directions = make_random_sequence(MAX_WIND_DIR, rng, legacy)
    speeds = make_random_sequence(MAX_WIND_SPD, rng, legacy)

    start = difficulty.start_hole
    # Donor holes are drawn from [start, start + num_holes)
    num_holes = difficulty.end_hole - start

    wind = WindSet()
    num_nonzero = 0
    speed_idx = 0
    dir_idx = 0

    for hole in range(HOLE_SIZE):
        entry = wind[hole]

        if not difficulty.is_played(hole):
            entry.speed = MAX_WIND_SPD
            entry.direction = MAX_WIND_DIR
            continue

        speed, speed_idx = _next_allowed_speed(speeds, speed_idx, difficulty)
        entry.speed = speed

        if num_nonzero < MAX_NONZERO_WINDS:
            # The direction is only used up by a windy hole.
            entry.direction = directions[dir_idx]
            if speed > 0:
                num_nonzero += 1
                dir_idx += 1
        elif speed == 0:
            entry.direction = SOUTH
        else:
            donor = scale_draw(rng.get_f32(legacy), num_holes) + start
            wind[donor].speed = 0
            entry.direction = wind[donor].direction
            logger.debug(
                "Hole %d over budget: zeroed hole %d, took direction %d",
                hole, donor, entry.direction,
            )

    logger.debug(
        "Wind set for holes %d-%d: speeds=%s directions=%s",
        start, difficulty.end_hole, wind.speeds(), wind.directions(),
    )
    return wind
