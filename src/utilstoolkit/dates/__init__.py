"""
Date utilities subpackage - requires loguru and numpy.

Formatting, differences, calendar grids and date arithmetic on the
standard datetime types.
"""

from utilstoolkit.dates.format import (
    DIFF_UNITS_SECONDS,
    format_date,
    date_diff,
)

from utilstoolkit.dates.periods import (
    generate_calendar,
    add_days,
    add_months,
    add_years,
    is_leap_year,
    days_in_month,
    is_weekend,
    get_week_number,
    start_of_week,
)

__all__ = [
    # format
    "DIFF_UNITS_SECONDS",
    "format_date",
    "date_diff",
    # periods
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
