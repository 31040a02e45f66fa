"""
Display formatting for engine outputs.

Sentinel values render as distinct literal tokens so that the presentation
layer never shows a numeric approximation of an undefined or infinite
quantity.
"""

import math
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

INFINITY_TOKEN: str = "∞"
NEGATIVE_INFINITY_TOKEN: str = "-∞"
UNDEFINED_TOKEN: str = "undefined"

# Magnitudes below this switch to exponential notation
EXPONENTIAL_THRESHOLD: float = 1e-3

_EXPONENT_PADDING = re.compile(r"e([+-])0*(\d)")


def _strip_exponent_padding(text: str) -> str:
    """'1.23e-04' → '1.23e-4'; a bare trailing point is dropped."""
    text = _EXPONENT_PADDING.sub(r"e\1\2", text)
    return text.replace(".e", "e").rstrip(".")


def _round_half_up(value: float, precision: int) -> float:
    """Round to precision significant digits, exact ties away from zero."""
    exact = Decimal(value)
    quantum = Decimal(1).scaleb(exact.adjusted() - precision + 1)
    return float(exact.quantize(quantum, rounding=ROUND_HALF_UP))


def format_number(value: Optional[float], precision: int = 3) -> str:
    """
    Format a number for display.

    - None / NaN → "undefined", +inf → "∞", −inf → "-∞"
    - 0 < |value| < 1e-3 → exponential, precision − 1 fraction digits
    - otherwise precision significant digits, trailing zeros kept

    Exact ties round away from zero (1.125 → "1.13"), not half-to-even.
    """
    if value is None or math.isnan(value):
        return UNDEFINED_TOKEN
    if math.isinf(value):
        return INFINITY_TOKEN if value > 0 else NEGATIVE_INFINITY_TOKEN
    if value == 0:
        value = 0.0  # no "-0.00"
    elif abs(value) < EXPONENTIAL_THRESHOLD:
        rounded = _round_half_up(value, precision)
        return _strip_exponent_padding(f"{rounded:.{precision - 1}e}")
    else:
        value = _round_half_up(value, precision)
    return _strip_exponent_padding(f"{value:#.{precision}g}")


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))
