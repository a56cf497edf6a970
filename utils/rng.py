# utils/rng.py

"""
Random number sources.

Wind generation never touches a global RNG. Instead, every function that
needs randomness takes an object implementing `RandomSource`:

    get_f32(legacy)  -> float in [0, 1), single precision
    discard(n)       -> advance the stream by n draws

Two implementations live here:

  - LcgRandomSource: the 32-bit linear congruential generator used by the
    reference game. Use this when you need to match recorded rounds.
  - NumpyRandomSource: a thin adapter over NumPy's Generator API, for
    reproducible but non-reference streams.

`legacy` selects the float formula of the first game release. Callers must
pass the same value for every draw of one generation.

Call `make_rng` in main.py and pass the result down.
"""

from __future__ import annotations

from typing import Optional, Protocol

import numpy as np


LCG_MULTIPLIER: int = 0x5D588B65
LCG_INCREMENT: int = 1
UINT32_MASK: int = 0xFFFFFFFF

# Mantissa widths of the two float formulas
STANDARD_BITS: int = 24
LEGACY_BITS: int = 23


def _truncate_unit(value: float, bits: int) -> float:
    """Truncate a float in [0, 1) to a multiple of 2**-bits (stays below 1)."""
    return int(value * (1 << bits)) / (1 << bits)


class RandomSource(Protocol):
    def get_f32(self, legacy: bool = False) -> float:
        ...

    def discard(self, n: int) -> None:
        ...


class LcgRandomSource:
    """
    32-bit LCG: state = state * 0x5D588B65 + 1 (mod 2**32).

    Standard floats take the top 24 bits of the new state, legacy floats the
    top 23 bits. Both are exactly representable in single precision and
    strictly below 1.0.
    """

    def __init__(self, seed: int = 0) -> None:
        self.state = int(seed) & UINT32_MASK

    def next_u32(self) -> int:
        self.state = (self.state * LCG_MULTIPLIER + LCG_INCREMENT) & UINT32_MASK
        return self.state

    def get_f32(self, legacy: bool = False) -> float:
        bits = LEGACY_BITS if legacy else STANDARD_BITS
        value = self.next_u32() >> (32 - bits)
        return float(np.float32(value / (1 << bits)))

    def discard(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"discard count must be non-negative, got {n}")
        for _ in range(n):
            self.next_u32()

    def __repr__(self) -> str:
        return f"LcgRandomSource(state=0x{self.state:08X})"


class NumpyRandomSource:
    """
    RandomSource backed by a NumPy Generator.

    Every draw consumes one float64 from the generator, truncated toward zero
    to 24 bits (standard) or 23 bits (legacy), so discard(n) lines up with n
    draws in either mode.
    """

    def __init__(self, generator: np.random.Generator) -> None:
        self.generator = generator

    def get_f32(self, legacy: bool = False) -> float:
        bits = LEGACY_BITS if legacy else STANDARD_BITS
        return float(np.float32(_truncate_unit(self.generator.random(), bits)))

    def discard(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"discard count must be non-negative, got {n}")
        if n:
            self.generator.random(n)


def make_rng(seed: Optional[int] = None, kind: str = "lcg") -> RandomSource:
    """
    Create a random source.

    Args:
        seed:
            Seed for the source. For "lcg" this is the initial 32-bit state
            (None -> 0). For "numpy", None means OS entropy.
        kind:
            "lcg" or "numpy".

    Returns:
        A RandomSource instance.
    """
    if kind == "lcg":
        return LcgRandomSource(0 if seed is None else int(seed))
    if kind == "numpy":
        if seed is None:
            return NumpyRandomSource(np.random.default_rng())
        return NumpyRandomSource(np.random.default_rng(int(seed)))
    raise ValueError(f"Unknown RNG kind: {kind!r} (expected 'lcg' or 'numpy')")
