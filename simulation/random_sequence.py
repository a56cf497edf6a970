# simulation/random_sequence.py

"""
No-duplicate random sequences, drawn the way the reference game draws them.

This is NOT a Fisher-Yates shuffle and must not be replaced by one. The
reference fills one output slot per draw:

    r = (int)(f32 draw * remaining)
    walk the slot array from the start, counting down r on every slot that
    is still unfilled; the slot where r goes negative is taken, and its
    position in the array is appended to the output.

Other code shares the same random stream, so both the number of draws and
the order they are consumed in have to match exactly.

The reference marks unfilled slots with negative values inside the output
array itself. Here the unfilled slots are an explicit ascending list of
positions: counting down r over unfilled slots in array order lands on
`unfilled[r]`.
"""

from __future__ import annotations

import numpy as np

from core_types import RandomSequence
from utils.rng import RandomSource


def scale_draw(draw: float, n: int) -> int:
    """
    Truncate `draw * n`, computed in single precision like the reference.

    A draw of exactly 1.0, which a source outside the [0, 1) contract could
    return, scales to `n`; callers must not assume the result is below `n`.
    """
    return int(np.float32(draw) * np.float32(n))


def make_random_sequence(
    max_value: int,
    rng: RandomSource,
    legacy: bool = False,
) -> RandomSequence:
    """
    Return a permutation of 0..max_value-1 in draw order.

    One draw is consumed per output value for any source honouring [0, 1).
    If a draw scales to `remaining` (see `scale_draw`), the reference scan
    finds no slot and draws again; that extra draw is reproduced here.

    Args:
        max_value:
            Length of the sequence. 0 returns [] without drawing.
        rng:
            Random source shared with the caller.
        legacy:
            Float formula flag, passed through to every draw.
    """
    if max_value < 0:
        raise ValueError(f"max_value must be non-negative, got {max_value}")

    unfilled = list(range(max_value))
    sequence: RandomSequence = []

    while unfilled:
        remaining = len(unfilled)
        r = scale_draw(rng.get_f32(legacy), remaining)
        if r >= remaining:
            continue
        sequence.append(unfilled.pop(r))

    return sequence
