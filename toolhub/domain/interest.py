"""Closed-form money calculators: sales tax, simple and compound interest"""

from decimal import Decimal
from enum import Enum
from typing import List

from toolhub.domain.amortization import MAX_TERM_YEARS
from toolhub.domain.exceptions import InvalidArgumentError
from toolhub.domain.models import (
    CompoundInterestResult,
    CompoundInterestYear,
    SalesTaxResult,
    SimpleInterestResult,
)
from toolhub.domain.money import Numeric, round_cents, to_decimal

MAX_RATE_PERCENT = Decimal("100")


class CompoundingFrequency(str, Enum):
    ANNUALLY = "annually"
    SEMI_ANNUALLY = "semi_annually"
    QUARTERLY = "quarterly"
    MONTHLY = "monthly"
    DAILY = "daily"

    @property
    def periods_per_year(self) -> int:
        return _PERIODS_PER_YEAR[self]


_PERIODS_PER_YEAR = {
    CompoundingFrequency.ANNUALLY: 1,
    CompoundingFrequency.SEMI_ANNUALLY: 2,
    CompoundingFrequency.QUARTERLY: 4,
    CompoundingFrequency.MONTHLY: 12,
    CompoundingFrequency.DAILY: 365,
}


def _check_rate(rate: Decimal, label: str) -> None:
    if rate < 0:
        raise InvalidArgumentError(f"{label} cannot be negative")
    if rate > MAX_RATE_PERCENT:
        raise InvalidArgumentError(f"{label} seems too high (max 100%)")


def calculate_sales_tax(amount_cents: int, tax_rate_percent: Numeric) -> SalesTaxResult:
    """Sales tax on a pre-tax amount; tax is rounded to cents before totalling"""
    rate = to_decimal(tax_rate_percent)
    if amount_cents <= 0:
        raise InvalidArgumentError("Amount must be a positive number")
    _check_rate(rate, "Tax rate")

    tax = round_cents(amount_cents * rate / 100)
    return SalesTaxResult(
        amount_cents=amount_cents,
        tax_rate_percent=rate,
        tax_cents=tax,
        total_cents=amount_cents + tax,
    )


def calculate_simple_interest(
    principal_cents: int,
    rate_percent: Numeric,
    time_years: Numeric,
) -> SimpleInterestResult:
    """Interest = principal * rate * time / 100 (time may be fractional)"""
    rate = to_decimal(rate_percent)
    years = to_decimal(time_years)
    if principal_cents <= 0:
        raise InvalidArgumentError("Principal must be a positive number")
    _check_rate(rate, "Interest rate")
    if years <= 0:
        raise InvalidArgumentError("Time must be a positive number of years")

    interest = round_cents(principal_cents * rate * years / 100)
    return SimpleInterestResult(
        principal_cents=principal_cents,
        rate_percent=rate,
        time_years=years,
        interest_cents=interest,
        total_cents=principal_cents + interest,
    )


def calculate_compound_interest(
    principal_cents: int,
    annual_rate_percent: Numeric,
    term_years: int,
    frequency: CompoundingFrequency,
    annual_contribution_cents: int = 0,
) -> CompoundInterestResult:
    """
    Grow an investment year by year with periodic compounding.

    Requirements:
    - Interest compounds n times per year on the running balance
    - The annual contribution is added at the end of each year
    - The running balance keeps full precision; only reported values are
      rounded to cents

    Raises:
        InvalidArgumentError: Non-positive principal, rate outside 0-100,
            term outside 1-100 years, negative contribution
    """
    rate = to_decimal(annual_rate_percent)
    if principal_cents <= 0:
        raise InvalidArgumentError("Principal amount must be a positive number")
    _check_rate(rate, "Annual interest rate")
    if isinstance(term_years, bool) or not isinstance(term_years, int) or term_years <= 0:
        raise InvalidArgumentError("Investment term must be a positive number of years")
    if term_years > MAX_TERM_YEARS:
        raise InvalidArgumentError(f"Term seems too long (max {MAX_TERM_YEARS} years)")
    if annual_contribution_cents < 0:
        raise InvalidArgumentError("Annual contribution cannot be negative")

    frequency = CompoundingFrequency(frequency)
    periods = frequency.periods_per_year
    period_rate = rate / 100 / periods

    balance = Decimal(principal_cents)
    total_invested = principal_cents
    breakdown: List[CompoundInterestYear] = []

    for year in range(1, term_years + 1):
        starting_balance = balance
        interest_this_year = Decimal("0")
        for _ in range(periods):
            interest = balance * period_rate
            balance += interest
            interest_this_year += interest

        balance += annual_contribution_cents
        total_invested += annual_contribution_cents

        breakdown.append(
            CompoundInterestYear(
                year=year,
                starting_balance_cents=round_cents(starting_balance),
                interest_cents=round_cents(interest_this_year),
                contribution_cents=annual_contribution_cents,
                ending_balance_cents=round_cents(balance),
            )
        )

    future_value = round_cents(balance)
    return CompoundInterestResult(
        future_value_cents=future_value,
        total_invested_cents=total_invested,
        total_interest_cents=future_value - total_invested,
        annual_breakdown=breakdown,
    )
