from boundednumbers import UnitFloat
from boundednumbers.functions import cyclic_wrap_float


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    return cyclic_wrap_float(h, 0.0, 360.0)


def css_rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, UnitFloat, UnitFloat]:
    """
    Convert RGB to HSL using CSS Color 4 / Culori algorithm.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, UnitFloat, UnitFloat]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    chroma = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    # achromatic: hue is powerless, report 0 like the CSS serialisers do
    if chroma == 0:
        return 0.0, UnitFloat(0.0), UnitFloat(lightness)

    saturation = chroma / (1 - abs(2 * lightness - 1))

    if max_c == r:
        hue = 60 * ((g - b) / chroma)
    elif max_c == g:
        hue = 60 * ((b - r) / chroma) + 120
    else:
        hue = 60 * ((r - g) / chroma) + 240

    return normalize_hue(hue), UnitFloat(saturation), UnitFloat(lightness)
