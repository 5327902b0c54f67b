"""Tests for the scoring engine."""

from luckyjet.data.balance import BALANCE
from luckyjet.engine.scoring import compute_score, is_success


def test_score_without_survival_bonus():
    assert compute_score(5.0, 8.0) == 50


def test_score_with_survival_bonus():
    assert compute_score(9.0, 8.0) == 190


def test_score_monotonic_in_flight_time():
    assert compute_score(5.0, 8.0) < compute_score(9.0, 8.0)


def test_bonus_requires_strictly_passing_threshold():
    assert compute_score(8.0) == 80
    assert compute_score(8.1) == 81 + BALANCE.scoring.survival_bonus


def test_default_threshold_is_eight_seconds():
    assert compute_score(9.0) == compute_score(9.0, 8.0)


def test_zero_flight_scores_zero():
    assert compute_score(0.0) == 0


def test_negative_flight_never_scores_negative():
    assert compute_score(-3.0) == 0


def test_float_error_does_not_lose_a_point():
    # 2.3 * 10 == 22.999999999999996 in binary floating point
    assert compute_score(2.3) == 23
    assert compute_score(0.7) == 7


def test_partial_tenths_are_floored():
    assert compute_score(4.56) == 45


def test_is_success_before_explosion():
    assert is_success(6.0, 9.0)
    assert not is_success(9.0, 9.0)
    assert not is_success(9.5, 9.0)
