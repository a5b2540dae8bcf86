from .curve_types import EasingCurve, CoordinateSet, SUPPORTED_GRADIENTS, is_easing_gradient

__all__ = ["EasingCurve", "CoordinateSet", "SUPPORTED_GRADIENTS", "is_easing_gradient"]
