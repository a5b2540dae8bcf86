"""
Color space conversions
=======================

Scalar RGB -> HSL conversion following the CSS Color 4 algorithm.
RGB channels are unit floats; hue comes back in degrees ``[0, 360)``.

>>> from easing_gradients.conversions import css_rgb_to_hsl
>>> css_rgb_to_hsl(0.0, 0.0, 1.0)
(240.0, UnitFloat(1.0), UnitFloat(0.5))
"""

from .css_to_hsl import normalize_hue, css_rgb_to_hsl

__all__ = ["normalize_hue", "css_rgb_to_hsl"]
