"""Turn an easing curve and two colors into a ``linear-gradient`` stop list."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence

from ..colors import CssColor
from ..curves.sampler import DEFAULT_SAMPLER_SETTINGS, SamplerSettings, get_coordinates, validate_precision
from ..errors import InvalidPrecisionError
from ..types.curve_types import EasingCurve
from ..utils.color_utils import round_hsl_alpha, transparent_fix


def validate_alpha_decimals(alpha_decimals: int) -> int:
    """Return ``alpha_decimals``, or raise InvalidPrecisionError unless it is an integer >= 0."""
    if isinstance(alpha_decimals, bool) or not isinstance(alpha_decimals, int) or alpha_decimals < 0:
        raise InvalidPrecisionError(f"alpha_decimals must be an integer >= 0, got {alpha_decimals!r}")
    return alpha_decimals


@dataclass(frozen=True)
class GradientOptions:
    """
    Options shared by every generated gradient.

    Attributes:
        precision: Minimum distance between sampled curve points. Lower
            values produce more color stops.
        alpha_decimals: Decimals kept for the bare numbers (hue, alpha) of
            each generated ``hsla()`` color.
    """
    precision: float = 0.1
    alpha_decimals: int = 3

    def __post_init__(self) -> None:
        validate_precision(self.precision)
        validate_alpha_decimals(self.alpha_decimals)


DEFAULT_OPTIONS = GradientOptions()


def get_color_stops(
    colors: Sequence[str],
    easing_type: EasingCurve | str,
    precision: float,
    alpha_decimals: int,
    settings: SamplerSettings = DEFAULT_SAMPLER_SETTINGS,
) -> str:
    """
    Calculate the color stops for an eased two-color gradient.

    Args:
        colors: ``[start_color, end_color]`` as CSS color strings.
        easing_type: Curve or gradient name, e.g. ``"ease-in-out-sine-gradient"``.
        precision: Minimum distance between sampled curve points.
        alpha_decimals: Decimals kept when rounding hue and alpha.
        settings: Sampler tunables.

    Returns:
        Comma separated stop list, e.g.
        ``"hsl(0, 100%, 50%) 0%, ..., blue 100%"``, ready to follow the
        direction argument of a ``linear-gradient()``.

    Raises:
        UnsupportedCurveError: If ``easing_type`` is not a supported gradient.
        InvalidPrecisionError: On a bad ``precision`` or ``alpha_decimals``.
        ValueError: If a color cannot be parsed.
    """
    if len(colors) != 2:
        raise ValueError(f"Expected exactly two colors, got {len(colors)}")
    validate_alpha_decimals(alpha_decimals)

    start, end = (CssColor(color) for color in transparent_fix(colors))
    coordinates = get_coordinates(easing_type, precision, settings)

    color_stops = []
    for amount, position in coordinates.items():
        color = start.mix(end, amount).to_hsl_string()
        color_stops.append(f"{round_hsl_alpha(color, alpha_decimals)} {position}")
    color_stops.append(f"{colors[1]} 100%")
    return ", ".join(color_stops)
