"""
Adaptive curve sampling.

Walks an easing curve in small input steps and keeps only the points that
are at least ``delta`` apart (Euclidean, in the unit square). When the last
kept point ends up too close to the curve's end ``(1, 1)`` the walk is
redone with a slightly smaller ``delta``, so the final stop the caller
appends at 100% never sits right next to an eased stop.
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from ..errors import InvalidPrecisionError, SamplerConvergenceError
from ..types.curve_types import CoordinateSet, EasingCurve
from ..utils.num_utils import get_percentage
from .easing import SCRIM_COORDINATES, sample_curve

logger = logging.getLogger(__name__)

# no two points of the unit square are further apart than this
MAX_UNIT_DISTANCE = math.sqrt(2)


@dataclass(frozen=True)
class SamplerSettings:
    """
    Tunables of the adaptive sampler.

    Attributes:
        y_step: Input step of the walk along the curve.
        delta_tolerance: Slack subtracted from ``delta`` for the tail check.
        delta_adjust: Amount ``delta`` shrinks by on each retry.
        max_iterations: Retry bound; ``None`` derives it from the precision.
    """
    y_step: float = 0.001
    delta_tolerance: float = 0.01
    delta_adjust: float = 0.001
    max_iterations: Optional[int] = None

    def __post_init__(self) -> None:
        for name in ("y_step", "delta_tolerance", "delta_adjust"):
            value = getattr(self, name)
            if not 0 < value < 1:
                raise ValueError(f"{name} must be in (0, 1), got {value}")
        if self.max_iterations is not None and self.max_iterations < 1:
            raise ValueError(f"max_iterations must be >= 1, got {self.max_iterations}")

    def iteration_bound(self, precision: float) -> int:
        """Retries needed for ``delta - delta_tolerance`` to drop below zero, plus slack."""
        if self.max_iterations is not None:
            return self.max_iterations
        return math.ceil((precision + self.delta_tolerance) / self.delta_adjust) + 2


DEFAULT_SAMPLER_SETTINGS = SamplerSettings()


def is_far_enough(x: float, y: float, x_old: float, y_old: float, delta: float) -> bool:
    """Test if ``(x, y)`` is strictly more than ``delta`` away from ``(x_old, y_old)``."""
    return math.hypot(x - x_old, y - y_old) > delta


def validate_precision(precision: float) -> float:
    """Return ``precision`` as a float, or raise InvalidPrecisionError unless it is a finite number > 0."""
    if isinstance(precision, bool) or not isinstance(precision, (int, float, np.floating, np.integer)):
        raise InvalidPrecisionError(f"precision must be a number, got {precision!r}")
    precision = float(precision)
    if not math.isfinite(precision) or precision <= 0:
        raise InvalidPrecisionError(f"precision must be a finite number > 0, got {precision}")
    return precision


def _walk(xs: np.ndarray, ys: np.ndarray, delta: float) -> Tuple[CoordinateSet, Tuple[float, float]]:
    """Greedy pass over the samples; returns the kept coordinates and the last kept point."""
    coordinates: CoordinateSet = {0.0: "0%"}
    x_old = y_old = 0.0
    for x, y in zip(xs.tolist(), ys.tolist()):
        if is_far_enough(x, y, x_old, y_old, delta):
            coordinates[x] = get_percentage(y)
            x_old, y_old = x, y
    return coordinates, (x_old, y_old)


def get_coordinates(
    curve: EasingCurve | str,
    precision: float,
    settings: SamplerSettings = DEFAULT_SAMPLER_SETTINGS,
) -> CoordinateSet:
    """
    Sample an easing curve into gradient coordinates.

    Args:
        curve: Curve or gradient name, e.g. ``"ease-in-sine-gradient"``.
        precision: Minimum distance between kept samples; smaller values give
            more color stops.
        settings: Sampler tunables.

    Returns:
        Ordered mapping of curve output (mix ratio) to position percentage.
        The first entry is always ``{0.0: "0%"}``. For scrim the fixed
        13-entry table is returned and ``precision`` is only validated.

    Raises:
        UnsupportedCurveError: If ``curve`` is not a supported gradient.
        InvalidPrecisionError: If ``precision`` is not a finite number > 0.
        SamplerConvergenceError: If the retry bound is exhausted.
    """
    curve = EasingCurve.from_name(curve)
    precision = validate_precision(precision)

    if curve is EasingCurve.SCRIM:
        return dict(SCRIM_COORDINATES)

    # inputs 0, step, 2*step, ... stopping short of 1; (1, 1) is the caller's 100% stop
    steps = int(round(1 / settings.y_step))
    ys = np.linspace(0.0, 1.0, num=steps, endpoint=False)
    xs = sample_curve(curve, ys)

    delta = precision
    tolerance = settings.delta_tolerance
    max_iterations = settings.iteration_bound(precision)

    for iteration in range(max_iterations):
        if delta - tolerance >= MAX_UNIT_DISTANCE:
            # the tail check cannot pass yet, skip the walk
            delta -= settings.delta_adjust
            continue
        coordinates, (x_old, y_old) = _walk(xs, ys, delta)
        if is_far_enough(1.0, 1.0, x_old, y_old, delta - tolerance):
            logger.debug(
                "Sampled %s: precision=%s final delta=%.4f retries=%d stops=%d",
                curve.value, precision, delta, iteration, len(coordinates),
            )
            return coordinates
        delta -= settings.delta_adjust

    raise SamplerConvergenceError(
        f"{curve.value} did not converge within {max_iterations} iterations "
        f"(precision={precision}, last delta={delta})"
    )
