"""Unit tests for BMI and age calculators and their date helpers"""

import pytest
from datetime import date
from decimal import Decimal
from toolhub.domain.age import calculate_age, summarize_age
from toolhub.domain.bmi import calculate_bmi, classify_bmi
from toolhub.domain.exceptions import InvalidArgumentError
from toolhub.utils.date_utils import add_months, calendar_difference, format_long_date


@pytest.mark.parametrize(
    "weight, height, bmi, category",
    [
        (50, 175, Decimal("16.33"), "Underweight"),
        (70, 175, Decimal("22.86"), "Normal weight"),
        (85, 175, Decimal("27.76"), "Overweight"),
        (100, 175, Decimal("32.65"), "Obese"),
    ],
)
def test_calculate_bmi(weight, height, bmi, category):
    result = calculate_bmi(weight, height)

    assert result.bmi == bmi
    assert result.category == category


def test_classify_bmi_gaps_fall_into_higher_band():
    assert classify_bmi(Decimal("18.5")) == "Normal weight"
    assert classify_bmi(Decimal("24.95")) == "Overweight"
    assert classify_bmi(Decimal("29.95")) == "Obese"


@pytest.mark.parametrize("weight, height", [(0, 170), (70, 0), (-5, 170)])
def test_calculate_bmi_invalid(weight, height):
    with pytest.raises(InvalidArgumentError):
        calculate_bmi(weight, height)


def test_calculate_age():
    result = calculate_age(date(1990, 3, 5), today=date(2020, 8, 15))

    assert (result.years, result.months, result.days) == (30, 5, 10)
    assert result.summary == "30 years, 5 months, 10 days"
    assert result.birth_date_formatted == "March 5, 1990"
    assert result.today_formatted == "August 15, 2020"


def test_calculate_age_on_birth_date():
    result = calculate_age(date(2024, 2, 29), today=date(2024, 2, 29))

    assert result.summary == "Today is the birth date!"


def test_calculate_age_future_birth_date():
    with pytest.raises(InvalidArgumentError):
        calculate_age(date(2031, 1, 1), today=date(2030, 12, 31))


def test_summarize_age_singular():
    assert summarize_age(1, 1, 1) == "1 year, 1 month, 1 day"
    assert summarize_age(0, 2, 0) == "2 months"


def test_calendar_difference_month_end():
    """Jan 31 → Mar 1 is one whole month (to Feb 28) and a day"""
    assert calendar_difference(date(2021, 1, 31), date(2021, 3, 1)) == (0, 1, 1)
    assert calendar_difference(date(2000, 2, 29), date(2001, 2, 28)) == (1, 0, 0)


def test_add_months_clamps_day():
    assert add_months(date(2021, 1, 31), 1) == date(2021, 2, 28)
    assert add_months(date(2020, 11, 15), 3) == date(2021, 2, 15)


def test_format_long_date():
    assert format_long_date(date(2024, 12, 1)) == "December 1, 2024"
