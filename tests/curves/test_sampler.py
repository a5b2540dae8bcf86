import math

import pytest

from easing_gradients import (
    EasingCurve,
    InvalidPrecisionError,
    SamplerConvergenceError,
    UnsupportedCurveError,
)
from easing_gradients.curves import SCRIM_COORDINATES, SamplerSettings, get_coordinates, is_far_enough
from easing_gradients.curves.easing import sample_curve
from easing_gradients.curves.sampler import _walk

import numpy as np

FUNCTIONAL_CURVES = [curve for curve in EasingCurve if curve is not EasingCurve.SCRIM]
PRECISIONS = [0.05, 0.1, 0.2, 0.5]


def _points(coordinates):
    return [(x, float(position[:-1]) / 100) for x, position in coordinates.items()]


def test_is_far_enough():
    assert is_far_enough(0.3, 0.4, 0.0, 0.0, 0.49)
    assert not is_far_enough(0.3, 0.4, 0.0, 0.0, 0.5)
    assert is_far_enough(1, 1, 0, 0, 1.4)

@pytest.mark.parametrize("curve", FUNCTIONAL_CURVES)
@pytest.mark.parametrize("precision", PRECISIONS)
def test_first_coordinate_is_zero(curve, precision):
    coordinates = get_coordinates(curve, precision)
    assert list(coordinates.items())[0] == (0.0, "0%")

@pytest.mark.parametrize("curve", FUNCTIONAL_CURVES)
@pytest.mark.parametrize("precision", PRECISIONS)
def test_positions_increase_and_stop_short_of_the_end(curve, precision):
    points = _points(get_coordinates(curve, precision))
    ys = [y for _, y in points]
    assert ys == sorted(ys)
    assert len(set(ys)) == len(ys)
    assert ys[-1] < 1.0
    x_last, y_last = points[-1]
    assert math.hypot(1 - x_last, 1 - y_last) > 0

@pytest.mark.parametrize("curve", FUNCTIONAL_CURVES)
@pytest.mark.parametrize("delta", [0.03, 0.1, 0.25])
def test_walk_spacing_exceeds_delta(curve, delta):
    ys = np.linspace(0.0, 1.0, num=1000, endpoint=False)
    xs = sample_curve(curve, ys)
    coordinates, last = _walk(xs, ys, delta)
    points = _points(coordinates)
    for (x1, y1), (x2, y2) in zip(points, points[1:]):
        assert math.hypot(x2 - x1, y2 - y1) > delta - 1e-9
    assert last == pytest.approx(points[-1])

@pytest.mark.parametrize("curve", FUNCTIONAL_CURVES)
def test_smaller_precision_gives_more_coordinates(curve):
    fine = get_coordinates(curve, 0.05)
    coarse = get_coordinates(curve, 0.3)
    assert len(fine) >= len(coarse)
    assert len(fine) > 2

def test_sampling_is_deterministic():
    assert get_coordinates("ease-in-out-sine-gradient", 0.1) == get_coordinates("ease-in-out-sine-gradient", 0.1)

@pytest.mark.parametrize("precision", [0.01, 0.1, 0.5, 3])
def test_scrim_ignores_precision(precision):
    coordinates = get_coordinates("scrim-gradient", precision)
    assert coordinates == dict(SCRIM_COORDINATES)
    assert len(coordinates) == 13

def test_returned_coordinates_are_a_fresh_copy():
    coordinates = get_coordinates("scrim-gradient", 0.1)
    coordinates[0.5] = "50%"
    assert 0.5 not in get_coordinates("scrim-gradient", 0.1)

def test_very_coarse_precision_keeps_only_the_start():
    assert get_coordinates("ease-in-quad-gradient", 2.0) == {0.0: "0%"}

@pytest.mark.parametrize("precision", [0, -0.1, float("nan"), float("inf"), "0.1", True, None])
def test_invalid_precision(precision):
    with pytest.raises(InvalidPrecisionError):
        get_coordinates("ease-in-sine-gradient", precision)

def test_unsupported_curve():
    with pytest.raises(UnsupportedCurveError):
        get_coordinates("linear-gradient", 0.1)

def test_iteration_bound_raises():
    with pytest.raises(SamplerConvergenceError):
        get_coordinates("ease-in-sine-gradient", 2.0, SamplerSettings(max_iterations=1))

def test_settings_validation():
    with pytest.raises(ValueError):
        SamplerSettings(y_step=0)
    with pytest.raises(ValueError):
        SamplerSettings(max_iterations=0)

def test_iteration_bound_from_precision():
    settings = SamplerSettings()
    assert settings.iteration_bound(0.1) == math.ceil((0.1 + 0.01) / 0.001) + 2
    assert SamplerSettings(max_iterations=7).iteration_bound(0.1) == 7
