"""
CSS rewriting
=============

Replaces easing gradient functions in CSS with plain ``linear-gradient()``
calls whose stops follow the easing curve.

>>> from easing_gradients.css import rewrite_value
>>> rewrite_value("scrim-gradient(to top, black, transparent)")  # doctest: +ELLIPSIS
'linear-gradient(to top, hsl(0, 0%, 0%) 0%, hsla(0, 0%, 0%, 0.86) 8.52%, ..., transparent 100%)'
"""

from .transform import ANGLE_UNITS, parse_gradient_arguments, rewrite_value, rewrite_stylesheet

__all__ = ["ANGLE_UNITS", "parse_gradient_arguments", "rewrite_value", "rewrite_stylesheet"]
