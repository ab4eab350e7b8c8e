"""Half-up rounding for quantities and percentages.

Python's round() rounds half to even on the binary float, so 0.25 -> 0.2;
menu quantities round halves away from zero (0.25 -> 0.3).
"""
from decimal import Decimal, ROUND_HALF_UP


def round_half_up(value, digits: int = 0):
    """Round value to `digits` decimals, halves up. Returns int when digits == 0."""
    quantum = Decimal(1).scaleb(-digits)
    rounded = Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)
    if digits == 0:
        return int(rounded)
    return float(rounded)


__all__ = ["round_half_up"]
