# main.py

"""
Entry point for the golf-wind project.

Typical usage:

    # Wind for a full nine-hole round with the default seed
    python main.py

    # Beginner course, legacy float formula, specific seed
    python main.py --difficulty beginner --legacy --seed 0x1234ABCD

    # Explicit difficulty, saved for later comparison
    python main.py --start-hole 2 --end-hole 6 --min-wind 3 --max-wind 10 \
        --save state/wind_sets/round.json

This script wires together:
    - config (constants, seeds, presets),
    - utils.rng.make_rng (random source),
    - simulation.wind_set.make_wind_set (generation),
    - state.wind_store (optional saving).
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from config import (
    DEFAULT_DIFFICULTY,
    DIFFICULTY_PRESETS,
    LEGACY_MODE,
    MAX_WIND_DIR,
    RANDOM_SEED,
    RNG_KIND,
)
from core_types import Difficulty, InvalidDifficultyError, WindSet
from simulation.wind_set import make_wind_set
from state.wind_store import save_wind_set, wind_set_to_frame
from utils.logging_utils import configure_root_logger, get_logger
from utils.rng import make_rng


logger = get_logger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Golf per-hole wind generator")

    parser.add_argument(
        "--difficulty",
        choices=sorted(DIFFICULTY_PRESETS),
        default=DEFAULT_DIFFICULTY,
        help=f"Difficulty preset (default: {DEFAULT_DIFFICULTY!r}). "
             f"Explicit --start-hole/--end-hole/--min-wind/--max-wind override it.",
    )

    parser.add_argument("--start-hole", type=int, default=None,
                        help="First played hole (0-based, inclusive).")
    parser.add_argument("--end-hole", type=int, default=None,
                        help="Last played hole (0-based, inclusive).")
    parser.add_argument("--min-wind", type=int, default=None,
                        help="Lowest allowed wind speed.")
    parser.add_argument("--max-wind", type=int, default=None,
                        help="Highest allowed wind speed.")

    parser.add_argument(
        "--seed",
        type=lambda s: int(s, 0),
        default=RANDOM_SEED,
        help=f"Random seed, decimal or 0x-hex (default from config.py: {RANDOM_SEED})",
    )

    parser.add_argument(
        "--rng",
        choices=["lcg", "numpy"],
        default=RNG_KIND,
        help=f"Random source (default from config.py: {RNG_KIND!r})",
    )

    parser.add_argument(
        "--legacy",
        action="store_true",
        default=LEGACY_MODE,
        help="Use the float formula of the first game release.",
    )

    parser.add_argument(
        "--save",
        type=Path,
        default=None,
        help="Save the wind set to this .json or .csv file.",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log generation details.",
    )

    return parser.parse_args(argv)


def _resolve_difficulty(args: argparse.Namespace) -> Difficulty:
    """
    Start from the preset and override any field given on the command line.
    """
    base = Difficulty.from_preset(args.difficulty)
    return Difficulty(
        start_hole=base.start_hole if args.start_hole is None else args.start_hole,
        end_hole=base.end_hole if args.end_hole is None else args.end_hole,
        min_wind=base.min_wind if args.min_wind is None else args.min_wind,
        max_wind=base.max_wind if args.max_wind is None else args.max_wind,
    )


def _print_wind_set(wind: WindSet, difficulty: Difficulty) -> None:
    df = wind_set_to_frame(wind)
    df["hole"] = df["hole"] + 1
    df["played"] = [difficulty.is_played(h) for h in range(len(wind))]
    df["heading"] = df["direction"] % MAX_WIND_DIR
    print(df.to_string(index=False))


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)

    configure_root_logger(level=logging.DEBUG if args.verbose else logging.INFO)

    difficulty = _resolve_difficulty(args)

    print(f"Difficulty: holes {difficulty.start_hole + 1}-{difficulty.end_hole + 1}, "
          f"wind {difficulty.min_wind}-{difficulty.max_wind}")
    print(f"Random source: {args.rng} (seed {args.seed}, legacy={args.legacy})")

    rng = make_rng(args.seed, kind=args.rng)

    try:
        wind = make_wind_set(difficulty, rng, legacy=args.legacy)
    except InvalidDifficultyError as exc:
        raise SystemExit(f"Invalid difficulty: {exc}") from exc

    _print_wind_set(wind, difficulty)

    if args.save is not None:
        path = save_wind_set(wind, args.save)
        logger.info("Wind set saved to %s", path)


if __name__ == "__main__":
    main()
