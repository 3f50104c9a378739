"""
Calendar grids and date arithmetic - requires numpy.

Months are 1-based (January == 1) like the datetime module. Weekday
indices used here are 0 == Sunday through 6 == Saturday.
"""

__all__ = [
    "generate_calendar",
    "add_days",
    "add_months",
    "add_years",
    "is_leap_year",
    "days_in_month",
    "is_weekend",
    "get_week_number",
    "start_of_week",
]

import calendar
from datetime import date, timedelta
from typing import List, Optional, TypeVar

from utilstoolkit.numeric.arithmetic import clamp

D = TypeVar("D", bound=date)


def _sunday_index(value: date) -> int:
    return (value.weekday() + 1) % 7


def generate_calendar(
    year: Optional[int] = None,
    month: Optional[int] = None,
) -> List[List[Optional[int]]]:
    """
    Month grid of 6 weeks x 7 days (Sunday first).

    Cells hold the day number or None. Defaults to the current month;
    months outside 1-12 are clamped.

    Example:
        >>> generate_calendar(2023, 1)[0]
        [1, 2, 3, 4, 5, 6, 7]
    """
    today = date.today()
    year = today.year if year is None else year
    month = today.month if month is None else clamp(month, 1, 12)

    offset = _sunday_index(date(year, month, 1))
    length = days_in_month(year, month)

    grid: List[List[Optional[int]]] = [[None] * 7 for _ in range(6)]
    for day in range(1, length + 1):
        cell = offset + day - 1
        grid[cell // 7][cell % 7] = day
    return grid


def add_days(value: D, days: int) -> D:
    """Shift a date or datetime by a number of days."""
    return value + timedelta(days=days)


def add_months(value: D, months: int) -> D:
    """
    Shift by whole months, clamping the day to the target month's length.

    Example:
        >>> add_months(date(2023, 1, 31), 1)
        datetime.date(2023, 2, 28)
    """
    index = value.year * 12 + (value.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    day = min(value.day, days_in_month(year, month))
    return value.replace(year=year, month=month, day=day)


def add_years(value: D, years: int) -> D:
    """Shift by whole years; Feb 29 becomes Feb 28 in common years."""
    return add_months(value, years * 12)


def is_leap_year(year: int) -> bool:
    """Gregorian leap year rule."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Number of days in a month (1-12)."""
    return calendar.monthrange(year, month)[1]


def is_weekend(value: date) -> bool:
    """Saturday or Sunday."""
    return value.weekday() >= 5


def get_week_number(value: date) -> int:
    """
    ISO 8601 week number.

    Example:
        >>> get_week_number(date(2021, 1, 3))
        53
    """
    return value.isocalendar()[1]


def start_of_week(value: D, start_day: int = 0) -> D:
    """
    Most recent start_day (0 == Sunday) on or before value.

    The time of day of a datetime is kept.

    Example:
        >>> start_of_week(date(2023, 1, 18))
        datetime.date(2023, 1, 15)
        >>> start_of_week(date(2023, 1, 18), start_day=1)
        datetime.date(2023, 1, 16)
    """
    back = (_sunday_index(value) - start_day) % 7
    return value - timedelta(days=back)
