from typing import List, Sequence

import pytest


class ScriptedRandomSource:
    """RandomSource that replays a fixed list of draws and records usage."""

    def __init__(self, draws: Sequence[float]):
        self._draws = list(draws)
        self.draw_count = 0
        self.discarded = 0
        self.legacy_flags: List[bool] = []

    def get_f32(self, legacy: bool = False) -> float:
        if self.draw_count >= len(self._draws):
            raise AssertionError(f"script exhausted after {self.draw_count} draws")
        value = self._draws[self.draw_count]
        self.draw_count += 1
        self.legacy_flags.append(legacy)
        return value

    def discard(self, n: int) -> None:
        self.discarded += n

    @property
    def remaining(self) -> int:
        return len(self._draws) - self.draw_count


def draws_for_sequence(values: Sequence[int]) -> List[float]:
    """Draws that make make_random_sequence return exactly `values`."""
    unfilled = sorted(values)
    draws = []
    for v in values:
        rank = unfilled.index(v)
        draws.append((rank + 0.5) / len(unfilled))
        unfilled.pop(rank)
    return draws


@pytest.fixture
def scripted_rng():
    return ScriptedRandomSource


@pytest.fixture
def sequence_draws():
    return draws_for_sequence
