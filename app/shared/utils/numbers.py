"""Numeric helpers shared by progress calculations."""

from decimal import ROUND_HALF_UP, Decimal


def percentage(part: int, whole: int) -> int:
    """Integer percentage of part/whole, rounding halves up (2/3 -> 67, 1/8 -> 13).

    Python's round() uses banker's rounding; progress values round half up.
    Returns 0 when whole is 0.
    """
    if whole <= 0:
        return 0
    value = Decimal(100 * part) / Decimal(whole)
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
