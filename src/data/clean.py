"""Three-decimal truncation and rounding for reported rates and growth."""

from decimal import Decimal, ROUND_DOWN, ROUND_HALF_UP

THREE_PLACES = Decimal("0.001")


def three_truncate(value) -> float:
    """Drop everything past the third decimal (0.12399 -> 0.123, -1.2349 -> -1.234)."""
    # repr-based Decimal avoids float noise such as 0.577 * 1000 == 576.999...
    return float(Decimal(repr(float(value))).quantize(THREE_PLACES, rounding=ROUND_DOWN))


def three_round(value) -> float:
    """Round half away from zero to three decimals (0.1235 -> 0.124)."""
    return float(Decimal(repr(float(value))).quantize(THREE_PLACES, rounding=ROUND_HALF_UP))
