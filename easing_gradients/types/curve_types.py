from __future__ import annotations
import logging
import re
from enum import StrEnum
from typing import Dict

from ..errors import UnsupportedCurveError

logger = logging.getLogger(__name__)

# curve output (mix ratio) -> gradient position, e.g. {0.25: "31.4%"}
CoordinateSet = Dict[float, str]


class EasingCurve(StrEnum):
    EASE_IN_SINE = "ease-in-sine-gradient"
    EASE_OUT_SINE = "ease-out-sine-gradient"
    EASE_IN_OUT_SINE = "ease-in-out-sine-gradient"
    EASE_IN_QUAD = "ease-in-quad-gradient"
    EASE_OUT_QUAD = "ease-out-quad-gradient"
    EASE_IN_OUT_QUAD = "ease-in-out-quad-gradient"
    SCRIM = "scrim-gradient"

    @classmethod
    def from_name(cls, name: str | EasingCurve) -> EasingCurve:
        """
        Resolve a gradient function name to its curve.

        Args:
            name: Exact gradient name, e.g. ``"ease-in-sine-gradient"``.

        Returns:
            The matching EasingCurve member.

        Raises:
            UnsupportedCurveError: If the name is not one of the supported gradients.
        """
        if isinstance(name, cls):
            return name
        try:
            return cls(name.lower())
        except (ValueError, AttributeError):
            logger.warning("Sorry, easing gradient does not support %s.", name)
            raise UnsupportedCurveError(name) from None


SUPPORTED_GRADIENTS: tuple[str, ...] = tuple(curve.value for curve in EasingCurve)

_SUPPORTED_PATTERN = re.compile("|".join(re.escape(name) for name in SUPPORTED_GRADIENTS), re.IGNORECASE)


def is_easing_gradient(name: str) -> bool:
    """Check if a string contains one of the supported gradient names (unanchored, ASCII case-insensitive like CSS)."""
    return _SUPPORTED_PATTERN.search(name) is not None
