"""Utility functions for preparing colors for gradient stop generation."""

from typing import List, Sequence

from ..colors import CssColor, ColorInput
from .num_utils import format_number, round_to

TRANSPARENT = "transparent"


def transparent_fix(colors: Sequence[str]) -> List[str]:
    """
    Replace a ``transparent`` endpoint with a fully transparent copy of its sibling.

    ``transparent`` is transparent black, so interpolating towards it passes
    through dark grays. Using the sibling's hue, saturation and lightness at
    alpha 0 keeps the gradient on the sibling's hue.

    Args:
        colors: Exactly two CSS color strings.

    Returns:
        New list of two color strings.
    """
    if len(colors) != 2:
        raise ValueError(f"transparent_fix expects exactly two colors, got {len(colors)}")
    return [
        CssColor(colors[1 - i]).with_alpha(0).to_hsl_string()
        if color.strip().lower() == TRANSPARENT
        else color
        for i, color in enumerate(colors)
    ]


def round_hsl_alpha(color: str, alpha_decimals: int) -> str:
    """
    Round the bare numbers of an ``hsl()``/``hsla()`` string to ``alpha_decimals``.

    Percentage components are left untouched. Hue is a bare number too, so it
    is rounded along with alpha.

    >>> round_hsl_alpha("hsla(240, 100%, 50%, 0.123456)", 3)
    'hsla(240, 100%, 50%, 0.123)'
    """
    open_index = color.index("(")
    close_index = color.index(")", open_index)
    prefix = color[:open_index]
    values = [
        part.strip() if "%" in part else format_number(round_to(float(part), alpha_decimals))
        for part in color[open_index + 1:close_index].split(",")
    ]
    return f"{prefix}({', '.join(values)})"


def is_same_color(color_a: ColorInput, color_b: ColorInput) -> bool:
    """Check if two colors serialise to the same ``hsl()`` string, whatever their notation."""
    return CssColor(color_a).to_hsl_string() == CssColor(color_b).to_hsl_string()
