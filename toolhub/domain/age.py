"""Age calculator - years, months and days since a birth date"""

from datetime import date
from typing import List, Optional

from toolhub.domain.exceptions import InvalidArgumentError
from toolhub.domain.models import AgeResult
from toolhub.utils.date_utils import calendar_difference, format_long_date


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'s' if count > 1 else ''}"


def summarize_age(years: int, months: int, days: int) -> str:
    parts: List[str] = []
    if years > 0:
        parts.append(_plural(years, "year"))
    if months > 0:
        parts.append(_plural(months, "month"))
    if days > 0:
        parts.append(_plural(days, "day"))
    return ", ".join(parts) or "Today is the birth date!"


def calculate_age(birth_date: date, today: Optional[date] = None) -> AgeResult:
    """
    Age as of today (or the given date).

    Raises:
        InvalidArgumentError: Birth date is in the future
    """
    if today is None:
        today = date.today()
    if birth_date > today:
        raise InvalidArgumentError("Birth date cannot be in the future")

    years, months, days = calendar_difference(birth_date, today)

    return AgeResult(
        years=years,
        months=months,
        days=days,
        summary=summarize_age(years, months, days),
        birth_date=birth_date,
        today=today,
        birth_date_formatted=format_long_date(birth_date),
        today_formatted=format_long_date(today),
    )
