"""
Color values
============

``CssColor`` is an immutable sRGB color with alpha, built from any CSS color
notation. It knows just enough to drive gradient generation: mixing two
colors, overriding alpha and serialising to ``hsl()``/``hsla()``.

>>> from easing_gradients.colors import CssColor
>>> CssColor("blue").to_hsl_string()
'hsl(240, 100%, 50%)'
>>> CssColor("blue").with_alpha(0).to_hsl_string()
'hsla(240, 100%, 50%, 0)'
>>> CssColor("red").mix(CssColor("blue"), 0.5).to_hsl_string()
'hsl(300, 100%, 25%)'
"""

from .color import CssColor, ColorInput

__all__ = ["CssColor", "ColorInput"]
