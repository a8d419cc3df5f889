"""Fixed-payment loan amortization schedule generation"""

from decimal import Decimal, localcontext
from typing import List, Tuple

from toolhub.domain.exceptions import InvalidArgumentError
from toolhub.domain.models import AmortizationEntry, AmortizationSchedule
from toolhub.domain.money import Numeric, round_cents, to_decimal

MONTHS_PER_YEAR = 12
MAX_TERM_YEARS = 100

# Significant digits kept beyond the rate's own magnitude when compounding
GUARD_DIGITS = 28


def monthly_payment(principal_cents: int, monthly_rate: Decimal, number_of_payments: int) -> int:
    """
    Nominal monthly payment, rounded to cents.

    Zero rate: straight-line principal / n.
    Otherwise the annuity formula P * r(1+r)^n / ((1+r)^n - 1).

    The context precision grows with how small r is, so 1 + r keeps r's
    digits; if (1+r)^n still comes out as 1 the straight line is used.
    """
    if monthly_rate == 0:
        return round_cents(Decimal(principal_cents) / number_of_payments)

    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, GUARD_DIGITS - monthly_rate.adjusted()) + GUARD_DIGITS
        growth = (1 + monthly_rate) ** number_of_payments
        if growth == 1:
            return round_cents(Decimal(principal_cents) / number_of_payments)
        payment = principal_cents * monthly_rate * growth / (growth - 1)
    return round_cents(payment)


def _validate(principal_cents: int, annual_rate: Decimal, term_years: int) -> None:
    if principal_cents <= 0:
        raise InvalidArgumentError("Loan amount must be positive")
    if annual_rate < 0:
        raise InvalidArgumentError("Annual interest rate cannot be negative")
    if isinstance(term_years, bool) or not isinstance(term_years, int) or term_years <= 0:
        raise InvalidArgumentError("Loan term must be a positive whole number of years")
    if term_years > MAX_TERM_YEARS:
        raise InvalidArgumentError(f"Loan term seems too long (max {MAX_TERM_YEARS} years)")


def _final_period(period: int, balance_cents: int, monthly_rate: Decimal) -> AmortizationEntry:
    """
    Last scheduled period: pay off whatever balance is left.

    Rounding each period's interest to cents lets the balance drift away
    from what the nominal payment would clear, so the last principal
    component is forced to the remaining balance and the payment for this
    period becomes balance + interest instead of the nominal payment.
    """
    interest = round_cents(balance_cents * monthly_rate)
    return AmortizationEntry(
        period=period,
        principal_cents=balance_cents,
        interest_cents=interest,
        remaining_balance_cents=0,
    )


def _totals(entries: List[AmortizationEntry], principal_cents: int) -> Tuple[int, int]:
    total_payment = sum(entry.payment_cents for entry in entries)
    return total_payment, total_payment - principal_cents


def amortize(principal_cents: int, annual_rate_percent: Numeric, term_years: int) -> AmortizationSchedule:
    """
    Build a monthly amortization schedule for a fixed-payment loan.

    Requirements:
    - numberOfPayments = term_years * 12, monthly rate = annual% / 100 / 12
    - Interest per period rounded to cents on the running balance
    - Final period clears the balance exactly (see _final_period)
    - Stops early if a payment would clear the balance before the last period
    - Totals are summed from the entries, not payment * numberOfPayments

    Example:
        $200,000 at 6% for 30 years → 360 payments of $1,199.10,
        final entry balance $0

    Raises:
        InvalidArgumentError: Non-positive principal or term, negative rate
    """
    annual_rate = to_decimal(annual_rate_percent)
    _validate(principal_cents, annual_rate, term_years)

    monthly_rate = annual_rate / 100 / MONTHS_PER_YEAR
    number_of_payments = term_years * MONTHS_PER_YEAR
    payment = monthly_payment(principal_cents, monthly_rate, number_of_payments)

    entries: List[AmortizationEntry] = []
    balance = principal_cents

    for period in range(1, number_of_payments):
        interest = round_cents(balance * monthly_rate)
        # Early payoff guard: never take more principal than is owed
        principal = min(payment - interest, balance)
        balance -= principal

        entries.append(
            AmortizationEntry(
                period=period,
                principal_cents=principal,
                interest_cents=interest,
                remaining_balance_cents=balance,
            )
        )
        if balance <= 0:
            break
    else:
        entries.append(_final_period(number_of_payments, balance, monthly_rate))

    total_payment, total_interest = _totals(entries, principal_cents)

    return AmortizationSchedule(
        principal_cents=principal_cents,
        annual_rate_percent=annual_rate,
        term_years=term_years,
        payment_cents=payment,
        entries=entries,
        total_payment_cents=total_payment,
        total_interest_cents=total_interest,
    )
