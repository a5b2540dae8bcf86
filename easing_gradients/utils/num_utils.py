from __future__ import annotations
import math
from decimal import Decimal, ROUND_HALF_UP, localcontext

from boundednumbers import RealNumber


def is_close_to_int(value: float, tol: float = 1e-9) -> bool:
    """Check if a float is close to an integer within a tolerance."""
    return abs(value - round(value)) <= tol


def round_to(value: RealNumber, places: int) -> float:
    """
    Round half up to a number of decimal places.

    Rounding happens on the shortest decimal representation of ``value`` so
    ``1.005`` rounds to ``1.01`` rather than to the binary neighbour ``1.0``.

    Args:
        value: Number to round.
        places: Decimal places to keep. Negative values round to the left of
            the decimal point (``round_to(1234, -2) == 1200``).

    Returns:
        The rounded value as a float. NaN and infinities pass through.
    """
    value = float(value)
    if not math.isfinite(value):
        return value
    exact = Decimal(repr(value))
    # already has no more than `places` decimals
    if -exact.as_tuple().exponent <= places:
        return value
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, exact.adjusted() + places + 2)
        return float(exact.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP))


def format_number(value: RealNumber) -> str:
    """Format a number the way CSS expects it: ``30`` not ``30.0``, ``0`` not ``-0``."""
    value = float(value)
    if value == 0:
        return "0"
    if is_close_to_int(value, 0.0) and abs(value) < 1e16:
        return str(int(value))
    text = repr(value)
    if "e" in text:
        text = f"{value:.16f}".rstrip("0").rstrip(".")
    return text


def get_percentage(number: RealNumber) -> str:
    """Convert a unit value to a percentage string with one decimal, e.g. ``0.1234 -> '12.3%'``."""
    return f"{format_number(round_to(float(number) * 100, 1))}%"
