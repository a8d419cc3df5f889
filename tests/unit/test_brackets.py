"""Unit tests for progressive bracket allocation"""

import pytest
from decimal import Decimal
from toolhub.domain.brackets import (
    DEFAULT_INCOME_TAX_BRACKETS,
    allocate,
    calculate_income_tax,
    describe_bracket,
    validate_brackets,
)
from toolhub.domain.exceptions import InvalidArgumentError
from toolhub.domain.models import Bracket


def test_allocate_worked_example():
    """$60,000 across 10% / 15% / 25% brackets"""
    result = allocate(6_000_000, DEFAULT_INCOME_TAX_BRACKETS)

    assert [item.taxable_cents for item in result.line_items] == [1_000_000, 4_000_000, 1_000_000]
    assert [item.amount_cents for item in result.line_items] == [100_000, 600_000, 250_000]
    assert result.total_amount_cents == 950_000  # $9,500
    assert result.effective_rate == Decimal("15.83")


def test_allocate_descriptions():
    result = allocate(6_000_000, DEFAULT_INCOME_TAX_BRACKETS)

    assert [item.description for item in result.line_items] == [
        "Up to $10,000",
        "$10,001 - $50,000",
        "Over $50,000",
    ]


def test_allocate_zero_quantity():
    result = calculate_income_tax(0)

    assert all(item.taxable_cents == 0 for item in result.line_items)
    assert result.total_amount_cents == 0
    assert result.effective_rate == Decimal("0")


def test_allocate_stops_when_quantity_exhausted():
    """Income inside the first bracket produces a single line item"""
    result = allocate(500_000, DEFAULT_INCOME_TAX_BRACKETS)

    assert len(result.line_items) == 1
    assert result.line_items[0].taxable_cents == 500_000
    assert result.total_amount_cents == 50_000
    assert result.effective_rate == Decimal("10.00")


def test_allocate_quantity_on_threshold():
    """Exactly filling a bracket does not emit a zero line for the next one"""
    result = allocate(1_000_000, DEFAULT_INCOME_TAX_BRACKETS)

    assert len(result.line_items) == 1
    assert result.total_amount_cents == 100_000


@pytest.mark.parametrize("quantity", [1, 99, 1_000_000, 1_000_001, 4_999_999, 5_000_000, 12_345_678, 987_654_321])
def test_allocate_is_exhaustive(quantity: int):
    result = allocate(quantity, DEFAULT_INCOME_TAX_BRACKETS)

    assert sum(item.taxable_cents for item in result.line_items) == quantity
    assert result.total_amount_cents == sum(item.amount_cents for item in result.line_items)


def test_allocate_total_is_monotonic():
    totals = [allocate(q, DEFAULT_INCOME_TAX_BRACKETS).total_amount_cents for q in range(0, 8_000_000, 37_519)]

    assert totals == sorted(totals)


def test_allocate_rounds_half_up():
    """4 cents at 12.5% = 0.5 cent, rounds to 1"""
    result = allocate(4, [Bracket(upper_threshold_cents=None, rate=Decimal("0.125"))])

    assert result.total_amount_cents == 1
    assert result.line_items[0].description == "Over $0"


def test_allocate_custom_table():
    brackets = [
        Bracket(upper_threshold_cents=2_000_050, rate=Decimal("0")),
        Bracket(upper_threshold_cents=None, rate=Decimal("0.5")),
    ]
    result = allocate(3_000_050, brackets)

    assert result.line_items[0].description == "Up to $20,000.50"
    assert result.line_items[1].description == "Over $20,000.50"
    assert result.total_amount_cents == 500_000


def test_allocate_negative_quantity():
    with pytest.raises(InvalidArgumentError):
        allocate(-1, DEFAULT_INCOME_TAX_BRACKETS)


@pytest.mark.parametrize(
    "brackets",
    [
        [],
        [Bracket(5_000_000, Decimal("0.1")), Bracket(1_000_000, Decimal("0.2")), Bracket(None, Decimal("0.3"))],
        [Bracket(1_000_000, Decimal("0.1")), Bracket(1_000_000, Decimal("0.2")), Bracket(None, Decimal("0.3"))],
        [Bracket(None, Decimal("0.1")), Bracket(None, Decimal("0.2"))],
        [Bracket(1_000_000, Decimal("0.1"))],
        [Bracket(0, Decimal("0.1")), Bracket(None, Decimal("0.2"))],
        [Bracket(None, Decimal("1.5"))],
        [Bracket(None, Decimal("-0.1"))],
    ],
)
def test_validate_brackets_rejects_malformed_tables(brackets):
    with pytest.raises(InvalidArgumentError):
        validate_brackets(brackets)


def test_validate_brackets_rejects_before_allocating():
    with pytest.raises(InvalidArgumentError, match="strictly increasing"):
        allocate(100, [Bracket(500, Decimal("0.1")), Bracket(400, Decimal("0.2")), Bracket(None, Decimal("0.3"))])


def test_describe_bracket():
    assert describe_bracket(0, 1_000_000) == "Up to $10,000"
    assert describe_bracket(1_000_000, 5_000_000) == "$10,001 - $50,000"
    assert describe_bracket(5_000_000, None) == "Over $50,000"
