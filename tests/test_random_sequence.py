import pytest

from simulation.random_sequence import make_random_sequence, scale_draw
from utils.rng import LcgRandomSource


@pytest.mark.parametrize("max_value", [0, 1, 8, 9, 16])
@pytest.mark.parametrize("seed", [0, 1, 0xDEADBEEF])
def test_sequence_is_permutation(max_value, seed):
    seq = make_random_sequence(max_value, LcgRandomSource(seed))
    assert sorted(seq) == list(range(max_value))


@pytest.mark.parametrize("legacy", [False, True])
def test_sequence_is_permutation_in_legacy_mode(legacy):
    seq = make_random_sequence(16, LcgRandomSource(1234), legacy=legacy)
    assert sorted(seq) == list(range(16))


def test_zero_length_makes_no_draws(scripted_rng):
    rng = scripted_rng([])
    assert make_random_sequence(0, rng) == []
    assert rng.draw_count == 0


def test_one_draw_per_value(scripted_rng):
    rng = scripted_rng([0.0] * 9)
    make_random_sequence(9, rng)
    assert rng.draw_count == 9
    assert rng.remaining == 0


def test_zero_draws_pick_first_unfilled_slot(scripted_rng):
    assert make_random_sequence(8, scripted_rng([0.0] * 8)) == list(range(8))


def test_high_draws_pick_last_unfilled_slot(scripted_rng):
    assert make_random_sequence(8, scripted_rng([0.999] * 8)) == list(range(7, -1, -1))


def test_selection_follows_unfilled_rank(scripted_rng):
    # 0.5*4 -> 2nd of [0,1,2,3]; 0.0 -> 0; 0.9*2 -> 1 of [1,3]; last is 1
    rng = scripted_rng([0.5, 0.0, 0.9, 0.0])
    assert make_random_sequence(4, rng) == [2, 0, 3, 1]


def test_draw_of_one_is_redrawn(scripted_rng):
    rng = scripted_rng([1.0, 0.0, 0.0])
    assert make_random_sequence(2, rng) == [0, 1]
    assert rng.draw_count == 3


def test_legacy_flag_reaches_every_draw(scripted_rng):
    rng = scripted_rng([0.25] * 8)
    make_random_sequence(8, rng, legacy=True)
    assert rng.legacy_flags == [True] * 8


def test_sequence_draws_helper_round_trips(scripted_rng, sequence_draws):
    wanted = [3, 0, 7, 1, 6, 2, 5, 4]
    assert make_random_sequence(8, scripted_rng(sequence_draws(wanted))) == wanted


def test_scale_draw_truncates_single_precision_product():
    assert scale_draw(0.0, 16) == 0
    assert scale_draw(0.5, 16) == 8
    assert scale_draw(0.99999994, 16) == 15
    assert scale_draw(1.0, 9) == 9


def test_negative_length_rejected():
    with pytest.raises(ValueError):
        make_random_sequence(-1, LcgRandomSource(0))
