"""Currency rounding helpers.

Amounts are carried as integer cents. Fractional intermediate values
(cents * rate) are Decimal and rounded back to whole cents with
ROUND_HALF_UP, so every calculator rounds the same way.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

Numeric = Union[int, float, str, Decimal]

TWO_PLACES = Decimal("0.01")
CENTS_PER_DOLLAR = 100


def to_decimal(value: Numeric) -> Decimal:
    """Convert to Decimal; floats go through str() to keep their printed value"""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def round_cents(value: Numeric) -> int:
    """Round a fractional cent amount to whole cents (half away from zero)"""
    return int(to_decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def round2(value: Numeric) -> Decimal:
    """Round to 2 decimal places, used for percentages and ratios"""
    return to_decimal(value).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def format_dollars(cents: int) -> str:
    """
    Render cents as a dollar label for human-readable descriptions.

    Example:
        1000000 -> "$10,000"
        1000100 -> "$10,001"
        1234567 -> "$12,345.67"
    """
    dollars, remainder = divmod(cents, CENTS_PER_DOLLAR)
    if remainder:
        return f"${dollars:,}.{remainder:02d}"
    return f"${dollars:,}"
