"""Easing curves backed by easing-functions, plus the hand-tuned scrim table."""

from __future__ import annotations
from types import MappingProxyType
from typing import Any, Callable, Mapping

import numpy as np
from easing_functions import (
    QuadEaseIn,
    QuadEaseInOut,
    QuadEaseOut,
    SineEaseIn,
    SineEaseInOut,
    SineEaseOut,
)

from ..errors import UnsupportedCurveError
from ..types.curve_types import EasingCurve

EasingFunction = Callable[[float], float]

SCRIM_COORDINATES: Mapping[float, str] = MappingProxyType({
    0.00: "0%",
    0.14: "8.52%",
    0.28: "17.53%",
    0.42: "27.19%",
    0.54: "36.28%",
    0.64: "44.56%",
    0.72: "51.97%",
    0.79: "59.18%",
    0.85: "66.33%",
    0.90: "73.39%",
    0.94: "80.36%",
    0.97: "87.18%",
    0.99: "93.73%",
})

# scrim has no closed form; it is sampled from SCRIM_COORDINATES instead
EASING_CLASSES: Mapping[EasingCurve, type[Any]] = MappingProxyType({
    EasingCurve.EASE_IN_SINE: SineEaseIn,
    EasingCurve.EASE_OUT_SINE: SineEaseOut,
    EasingCurve.EASE_IN_OUT_SINE: SineEaseInOut,
    EasingCurve.EASE_IN_QUAD: QuadEaseIn,
    EasingCurve.EASE_OUT_QUAD: QuadEaseOut,
    EasingCurve.EASE_IN_OUT_QUAD: QuadEaseInOut,
})

_EASING_DEFAULTS: dict[str, float] = {
    "start": 0.0,
    "end": 1.0,
    "duration": 1.0,
}


def get_easing_function(curve: EasingCurve | str) -> EasingFunction:
    """
    Build the unit easing function for a curve.

    Raises:
        UnsupportedCurveError: For unknown names, and for scrim which is a table.
    """
    curve = EasingCurve.from_name(curve)
    easing_cls = EASING_CLASSES.get(curve)
    if easing_cls is None:
        raise UnsupportedCurveError(curve.value)
    easing = easing_cls(**_EASING_DEFAULTS)
    return easing.ease


def ease(t: float, curve: EasingCurve | str) -> float:
    """Evaluate a curve at ``t`` in [0, 1]."""
    return float(get_easing_function(curve)(t))


def sample_curve(curve: EasingCurve | str, t_values: np.ndarray) -> np.ndarray:
    """Evaluate a curve over an array of inputs."""
    fn = get_easing_function(curve)
    return np.fromiter((fn(float(t)) for t in t_values), dtype=np.float64, count=len(t_values))
