"""Numeric rounding helpers."""
from __future__ import annotations

import math
from decimal import Decimal, ROUND_HALF_UP

# Scaled values are clamped to this many decimals before the final rounding
# step so that e.g. 1.005 * 100 == 100.49999999999999 rounds as 100.5.
CLAMP_DECIMALS = 11


def round_to(n: float, digits: int = 0):
    """Round ``n`` to ``digits`` decimal places, halves away from zero.

    Returns an ``int`` when ``digits`` is 0 and a ``float`` otherwise.
    NaN and infinities are returned unchanged.

    >>> round_to(1.005, 2)
    1.01
    >>> round_to(-5.678)
    -6
    """
    if digits < 0:
        raise ValueError('digits must be a non-negative integer')
    if not math.isfinite(n):
        return n

    negative = n < 0
    multiplicator = 10 ** digits
    scaled = Decimal(repr(round(abs(n) * multiplicator, CLAMP_DECIMALS)))
    rounded = scaled.to_integral_value(rounding=ROUND_HALF_UP)
    if negative:
        rounded = -rounded

    if digits == 0:
        return int(rounded)
    return float(rounded / multiplicator)
