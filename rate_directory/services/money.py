"""Money / rounding helpers.

Centralized so conversion and any future endpoints use identical parsing and
rounding semantics. Formatting is fixed at two decimals regardless of the
currency's natural subunit, rounding the shortest decimal form of the float
half-up (1.005 -> "1.01", 2.675 -> "2.68").
"""

from __future__ import annotations
from decimal import Decimal, ROUND_HALF_UP, localcontext
import math

from rate_directory.core.errors import InvalidAmount

TWO_PLACES = Decimal("0.01")
# Enough digits to quantize any finite float (max ~1.8e308) to cents.
_QUANTIZE_PRECISION = 400


def parse_amount(raw: str) -> float:
    """Parse a path-supplied amount, rejecting anything that is not a finite number."""
    try:
        value = float(raw.strip())
    except (AttributeError, ValueError):
        raise InvalidAmount(raw) from None
    if not math.isfinite(value):
        raise InvalidAmount(raw)
    return value


def format_2dp(value: float) -> str:
    if not math.isfinite(value):
        raise InvalidAmount(value)
    with localcontext() as ctx:
        ctx.prec = _QUANTIZE_PRECISION
        quantized = Decimal(str(value)).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
    # Anything that rounds to zero prints unsigned ("0.00", never "-0.00").
    return str(quantized.copy_abs() if quantized.is_zero() else quantized)
