"""Progressive bracket allocation - splits a quantity across rate brackets"""

from decimal import Decimal
from typing import List, Optional, Sequence

from toolhub.domain.exceptions import InvalidArgumentError
from toolhub.domain.models import AllocationLineItem, AllocationResult, Bracket
from toolhub.domain.money import CENTS_PER_DOLLAR, format_dollars, round2, round_cents

# Simplified progressive income tax table (amounts in cents)
DEFAULT_INCOME_TAX_BRACKETS: tuple[Bracket, ...] = (
    Bracket(upper_threshold_cents=1_000_000, rate=Decimal("0.10")),  # up to $10,000
    Bracket(upper_threshold_cents=5_000_000, rate=Decimal("0.15")),  # $10,001 - $50,000
    Bracket(upper_threshold_cents=None, rate=Decimal("0.25")),  # over $50,000
)


def validate_brackets(brackets: Sequence[Bracket]) -> None:
    """
    Check that a bracket table is usable by the allocator.

    Rules:
    - At least one bracket
    - Every rate is a fraction in [0, 1]
    - Bounded thresholds are positive and strictly increasing
    - Only the last bracket is unbounded, and it must be

    Raises:
        InvalidArgumentError: On the first rule that is broken
    """
    if not brackets:
        raise InvalidArgumentError("At least one bracket is required")

    previous: Optional[int] = None
    last_index = len(brackets) - 1
    for index, bracket in enumerate(brackets):
        if not Decimal("0") <= bracket.rate <= Decimal("1"):
            raise InvalidArgumentError(f"Bracket {index + 1} rate must be between 0 and 1")

        if bracket.unbounded:
            if index != last_index:
                raise InvalidArgumentError("Only the last bracket may be unbounded")
            continue

        if index == last_index:
            raise InvalidArgumentError("The last bracket must be unbounded")
        if bracket.upper_threshold_cents <= 0:
            raise InvalidArgumentError(f"Bracket {index + 1} threshold must be positive")
        if previous is not None and bracket.upper_threshold_cents <= previous:
            raise InvalidArgumentError("Bracket thresholds must be strictly increasing")
        previous = bracket.upper_threshold_cents


def describe_bracket(lower_bound_cents: int, upper_threshold_cents: Optional[int]) -> str:
    """Human-readable span of a bracket, e.g. "$10,001 - $50,000" """
    if upper_threshold_cents is None:
        return f"Over {format_dollars(lower_bound_cents)}"
    if lower_bound_cents == 0:
        return f"Up to {format_dollars(upper_threshold_cents)}"
    return f"{format_dollars(lower_bound_cents + CENTS_PER_DOLLAR)} - {format_dollars(upper_threshold_cents)}"


def allocate(quantity_cents: int, brackets: Sequence[Bracket]) -> AllocationResult:
    """
    Allocate a quantity across ascending brackets and compute the amount owed.

    Each bracket takes min(remaining, bracket width); the unbounded bracket
    absorbs whatever is left. Per-bracket amounts are rounded to cents, and
    iteration stops as soon as nothing remains, so brackets above the
    quantity produce no line items.

    Example:
        $60,000 with 10% to $10k, 15% to $50k, 25% above
        → 1,000 + 6,000 + 2,500 = $9,500, effective rate 15.83%

    Raises:
        InvalidArgumentError: Negative quantity or malformed bracket table
    """
    if quantity_cents < 0:
        raise InvalidArgumentError("Quantity cannot be negative")
    validate_brackets(brackets)

    remaining = quantity_cents
    lower_bound = 0
    total = 0
    line_items: List[AllocationLineItem] = []

    for bracket in brackets:
        if remaining <= 0:
            break

        if bracket.unbounded:
            width = remaining
        else:
            width = bracket.upper_threshold_cents - lower_bound

        taxable = min(remaining, width)
        amount = round_cents(taxable * bracket.rate)

        line_items.append(
            AllocationLineItem(
                description=describe_bracket(lower_bound, bracket.upper_threshold_cents),
                taxable_cents=taxable,
                amount_cents=amount,
                rate=bracket.rate,
            )
        )

        total += amount
        remaining -= taxable
        if not bracket.unbounded:
            lower_bound = bracket.upper_threshold_cents

    effective_rate = round2(Decimal(100 * total) / quantity_cents) if quantity_cents > 0 else Decimal("0")

    return AllocationResult(
        quantity_cents=quantity_cents,
        line_items=line_items,
        total_amount_cents=total,
        effective_rate=effective_rate,
    )


def calculate_income_tax(
    income_cents: int,
    brackets: Sequence[Bracket] = DEFAULT_INCOME_TAX_BRACKETS,
) -> AllocationResult:
    """Income tax on the default progressive table unless another is supplied"""
    return allocate(income_cents, brackets)
