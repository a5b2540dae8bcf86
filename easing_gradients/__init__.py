"""easing_gradients: eased two-color CSS gradients as linear-gradient stop lists."""

from .errors import (
    EasingGradientError,
    UnsupportedCurveError,
    InvalidPrecisionError,
    SamplerConvergenceError,
    GradientSyntaxError,
)
from .types.curve_types import EasingCurve, CoordinateSet, SUPPORTED_GRADIENTS, is_easing_gradient
from .colors import CssColor
from .curves import SCRIM_COORDINATES, SamplerSettings, get_coordinates, ease
from .utils.color_utils import transparent_fix, round_hsl_alpha, is_same_color
from .gradients import GradientOptions, get_color_stops
from .css import rewrite_value, rewrite_stylesheet

__all__ = [
    # errors
    "EasingGradientError",
    "UnsupportedCurveError",
    "InvalidPrecisionError",
    "SamplerConvergenceError",
    "GradientSyntaxError",
    # curves
    "EasingCurve",
    "CoordinateSet",
    "SUPPORTED_GRADIENTS",
    "is_easing_gradient",
    "SCRIM_COORDINATES",
    "SamplerSettings",
    "get_coordinates",
    "ease",
    # colors
    "CssColor",
    "transparent_fix",
    "round_hsl_alpha",
    "is_same_color",
    # gradients
    "GradientOptions",
    "get_color_stops",
    "rewrite_value",
    "rewrite_stylesheet",
]
