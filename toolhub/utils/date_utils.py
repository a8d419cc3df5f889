"""Date manipulation utilities"""

import calendar
from datetime import date
from typing import Tuple


def add_months(from_date: date, months: int) -> date:
    """Shift a date by whole months, clamping the day to the target month's length"""
    month_index = from_date.year * 12 + (from_date.month - 1) + months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(from_date.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def calendar_difference(start: date, end: date) -> Tuple[int, int, int]:
    """
    Whole (years, months, days) elapsed from start to end (start <= end).

    Counts the largest number of whole months that fits, then the leftover
    days. Jan 31 -> Mar 1 is 1 month (to Feb 28/29) plus the remaining days.
    """
    total_months = (end.year - start.year) * 12 + (end.month - start.month)
    if add_months(start, total_months) > end:
        total_months -= 1

    days = (end - add_months(start, total_months)).days
    years, months = divmod(total_months, 12)
    return years, months, days


def format_long_date(value: date) -> str:
    """e.g. date(1990, 3, 5) -> "March 5, 1990" """
    return f"{calendar.month_name[value.month]} {value.day}, {value.year}"
