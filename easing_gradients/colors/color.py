from __future__ import annotations
import math
from typing import Tuple, Union

from boundednumbers import UnitFloat
from coloraide import Color

from ..conversions import css_rgb_to_hsl
from ..utils.num_utils import format_number, round_to

ColorInput = Union[str, "CssColor", Tuple[float, float, float], Tuple[float, float, float, float]]

SRGB_CHANNELS = ("r", "g", "b", "alpha")


def _parse_css(text: str) -> Tuple[float, float, float, float]:
    """Parse any CSS color notation into unit sRGB channels plus alpha."""
    parsed = Color(text.strip()).convert("srgb")
    # coloraide reports powerless/missing channels as NaN
    return tuple(0.0 if math.isnan(v) else float(v) for v in (parsed[c] for c in SRGB_CHANNELS))  # type: ignore[return-value]


class CssColor:
    __slots__ = ('_red', '_green', '_blue', '_alpha', '_is_frozen')

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ColorInput) -> None:
        if isinstance(value, CssColor):
            channels = value.rgba
        elif isinstance(value, str):
            channels = _parse_css(value)
        else:
            if len(value) not in (3, 4):
                raise ValueError(f"CssColor expects an (r, g, b) or (r, g, b, a) tuple, got {value!r}")
            channels = tuple(value) if len(value) == 4 else tuple(value) + (1.0,)

        red, green, blue, alpha = (UnitFloat(float(v)) for v in channels)
        self._red = red
        self._green = green
        self._blue = blue
        self._alpha = alpha

        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def rgb(self) -> Tuple[UnitFloat, UnitFloat, UnitFloat]:
        return self._red, self._green, self._blue

    @property
    def rgba(self) -> Tuple[UnitFloat, UnitFloat, UnitFloat, UnitFloat]:
        return self._red, self._green, self._blue, self._alpha

    @property
    def alpha(self) -> UnitFloat:
        return self._alpha

    @property
    def has_alpha(self) -> bool:
        """True when the color is not fully opaque."""
        return self._alpha < 1

    def with_alpha(self, alpha: float) -> CssColor:
        """Return a copy with the alpha channel replaced (clamped to [0, 1])."""
        return CssColor(self.rgb + (alpha,))

    def mix(self, other: CssColor, weight: float = 0.5) -> CssColor:
        """
        Mix ``other`` into this color.

        Uses the Sass weighted mix: RGB channels are blended with weights
        corrected for the alpha difference, alpha itself is blended linearly.

        Args:
            other: Color to mix in.
            weight: Share of ``other`` in the result; ``0`` returns this color,
                ``1`` returns ``other``.

        Returns:
            New CssColor with the mixed channels.
        """
        p = UnitFloat(weight)
        w = 2 * p - 1
        a = other.alpha - self.alpha

        if w * a == -1:
            w1 = (w + 1) / 2
        else:
            w1 = ((w + a) / (1 + w * a) + 1) / 2
        w2 = 1 - w1

        channels = tuple(w1 * c1 + w2 * c2 for c1, c2 in zip(other.rgb, self.rgb))
        alpha = other.alpha * p + self.alpha * (1 - p)
        return CssColor(channels + (alpha,))

    def hsl(self) -> Tuple[float, UnitFloat, UnitFloat]:
        """Hue in degrees, saturation and lightness as unit floats."""
        return css_rgb_to_hsl(*self.rgb)

    def to_hsl_string(self) -> str:
        """
        Serialise as ``hsl(h, s%, l%)``, or ``hsla(h, s%, l%, a)`` when not opaque.

        Hue, saturation and lightness are rounded to one decimal. Alpha is
        written at full precision.
        """
        h, s, l = self.hsl()
        values = [
            format_number(round_to(h, 1)),
            f"{format_number(round_to(s * 100, 1))}%",
            f"{format_number(round_to(l * 100, 1))}%",
        ]
        if self.has_alpha:
            values.append(format_number(self._alpha))
            return f"hsla({', '.join(values)})"
        return f"hsl({', '.join(values)})"

    def __repr__(self) -> str:
        return f"CssColor({self.to_hsl_string()!r})"
