import math

import pytest

from fireresistance.analysis.interpolation import evaluate, inverse_threshold
from fireresistance.errors import DomainError
from fireresistance.model.curves import Curve


@pytest.fixture
def falling_curve() -> Curve:
    return Curve("falling", [0.0, 10.0, 20.0, 30.0], [1.0, 1.0, 0.5, 0.1])


@pytest.mark.parametrize("x", [-100.0, 0.0])
def test_evaluate_clamps_low(falling_curve: Curve, x: float) -> None:
    assert evaluate(falling_curve, x) == 1.0


@pytest.mark.parametrize("x", [30.0, 1.0e6])
def test_evaluate_clamps_high(falling_curve: Curve, x: float) -> None:
    assert evaluate(falling_curve, x) == pytest.approx(0.1)


def test_evaluate_returns_knot_values(falling_curve: Curve) -> None:
    for x, y in falling_curve:
        assert evaluate(falling_curve, x) == pytest.approx(y)


def test_evaluate_midpoint_is_average(falling_curve: Curve) -> None:
    assert evaluate(falling_curve, 15.0) == pytest.approx(0.75)
    assert evaluate(falling_curve, 25.0) == pytest.approx(0.3)


def test_evaluate_single_knot_curve() -> None:
    curve = Curve("point", [5.0], [0.4])

    assert evaluate(curve, -1.0) == 0.4
    assert evaluate(curve, 5.0) == 0.4
    assert evaluate(curve, 9.0) == 0.4


def test_inverse_threshold_interpolates_crossing(falling_curve: Curve) -> None:
    assert inverse_threshold(falling_curve, 0.75) == pytest.approx(15.0)
    assert inverse_threshold(falling_curve, 0.5) == pytest.approx(20.0)


def test_inverse_threshold_returns_first_knot_when_curve_starts_below(falling_curve: Curve) -> None:
    assert inverse_threshold(falling_curve, 1.0) == 0.0


def test_inverse_threshold_equal_to_last_knot(falling_curve: Curve) -> None:
    assert inverse_threshold(falling_curve, 0.1) == pytest.approx(30.0)


def test_inverse_threshold_never_reached(falling_curve: Curve) -> None:
    assert inverse_threshold(falling_curve, 0.05) == math.inf
    assert inverse_threshold(falling_curve, 0.0) == math.inf


@pytest.mark.parametrize("threshold", [-0.01, 1.01, 5.0])
def test_inverse_threshold_rejects_threshold_outside_unit_interval(
    falling_curve: Curve, threshold: float
) -> None:
    with pytest.raises(DomainError):
        inverse_threshold(falling_curve, threshold)


@pytest.mark.parametrize("threshold", [0.95, 0.6, 0.3, 0.15])
def test_inverse_then_evaluate_recovers_threshold(falling_curve: Curve, threshold: float) -> None:
    x = inverse_threshold(falling_curve, threshold)
    assert evaluate(falling_curve, x) == pytest.approx(threshold)


def test_evaluate_rejects_nan(falling_curve: Curve) -> None:
    with pytest.raises(DomainError):
        evaluate(falling_curve, math.nan)


def test_evaluate_clamps_infinite_x(falling_curve: Curve) -> None:
    assert evaluate(falling_curve, math.inf) == pytest.approx(0.1)
    assert evaluate(falling_curve, -math.inf) == 1.0
