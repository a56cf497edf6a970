import numpy as np
import pytest

from utils.rng import (
    LCG_MULTIPLIER,
    LcgRandomSource,
    NumpyRandomSource,
    UINT32_MASK,
    make_rng,
)
from simulation.random_sequence import make_random_sequence


def _source_about_to_return(value):
    """LcgRandomSource whose next state will be `value`."""
    inverse = pow(LCG_MULTIPLIER, -1, 1 << 32)
    return LcgRandomSource(((value - 1) * inverse) & UINT32_MASK)


def test_lcg_step():
    src = LcgRandomSource(0)
    assert src.next_u32() == 1
    assert src.next_u32() == (LCG_MULTIPLIER + 1) & UINT32_MASK


def test_lcg_seed_is_masked_to_32_bits():
    assert LcgRandomSource(1 << 32).state == 0


def test_standard_float_uses_top_24_bits():
    src = _source_about_to_return(0x80000000)
    assert src.get_f32() == 0.5


@pytest.mark.parametrize("legacy", [False, True])
def test_floats_in_unit_interval(legacy):
    src = LcgRandomSource(2024)
    values = [src.get_f32(legacy) for _ in range(2000)]
    assert all(0.0 <= v < 1.0 for v in values)


@pytest.mark.parametrize("value", [UINT32_MASK, 0xFFFFFFFA, 0xFFFFFF80])
@pytest.mark.parametrize("legacy", [False, True])
def test_highest_states_stay_below_one(value, legacy):
    assert _source_about_to_return(value).get_f32(legacy=legacy) < 1.0


def test_legacy_float_uses_top_23_bits():
    src = _source_about_to_return(UINT32_MASK)
    assert src.get_f32(legacy=True) == 1.0 - 2.0 ** -23


def test_sequence_from_high_states_uses_one_draw_per_value():
    src = _source_about_to_return(0xFFFFFFFA)
    expected = _source_about_to_return(0xFFFFFFFA)
    expected.discard(8)
    seq = make_random_sequence(8, src, legacy=True)
    assert sorted(seq) == list(range(8))
    assert src.state == expected.state


def test_legacy_and_standard_formulas_differ():
    value = 0x12345778
    standard = _source_about_to_return(value).get_f32(legacy=False)
    legacy = _source_about_to_return(value).get_f32(legacy=True)
    assert standard != legacy
    assert standard == pytest.approx(legacy, abs=1e-6)


def test_discard_matches_draws():
    a = LcgRandomSource(77)
    b = LcgRandomSource(77)
    a.discard(5)
    for _ in range(5):
        b.get_f32()
    assert a.state == b.state


def test_discard_rejects_negative():
    with pytest.raises(ValueError):
        LcgRandomSource(0).discard(-1)
    with pytest.raises(ValueError):
        NumpyRandomSource(np.random.default_rng(0)).discard(-1)


@pytest.mark.parametrize("legacy", [False, True])
def test_numpy_source_is_reproducible(legacy):
    a = make_rng(9, kind="numpy")
    b = make_rng(9, kind="numpy")
    a.discard(3)
    b.discard(3)
    assert [a.get_f32(legacy) for _ in range(10)] == [b.get_f32(legacy) for _ in range(10)]


def test_make_rng_kinds():
    assert isinstance(make_rng(1), LcgRandomSource)
    assert isinstance(make_rng(None, kind="numpy"), NumpyRandomSource)
    assert make_rng(None).state == 0
    with pytest.raises(ValueError):
        make_rng(1, kind="mersenne")


@pytest.mark.parametrize("legacy", [False, True])
def test_numpy_discard_matches_draws(legacy):
    a = make_rng(1, kind="numpy")
    b = make_rng(1, kind="numpy")
    a.discard(4)
    for _ in range(4):
        b.get_f32(legacy)
    assert a.get_f32(legacy) == b.get_f32(legacy)


@pytest.mark.parametrize("legacy", [False, True])
def test_numpy_floats_in_unit_interval(legacy):
    src = make_rng(11, kind="numpy")
    assert all(0.0 <= src.get_f32(legacy) < 1.0 for _ in range(2000))
