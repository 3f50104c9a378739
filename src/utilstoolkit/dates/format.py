"""
Date formatting and differences - requires loguru.

Non-date input yields "" (format_date) or None (date_diff).
"""

__all__ = [
    "DIFF_UNITS_SECONDS",
    "format_date",
    "date_diff",
]

import math
import re
from datetime import date, datetime, time
from typing import Any, Dict, Optional

from loguru import logger

# Unit lengths in seconds; years and months are average lengths
DIFF_UNITS_SECONDS: Dict[str, float] = {
    "years": 60 * 60 * 24 * 365.25,
    "months": 60 * 60 * 24 * 30.44,
    "days": 60 * 60 * 24,
    "hours": 60 * 60,
    "minutes": 60,
    "seconds": 1,
}

# Longest alternatives first so "YYYY" wins over "YY"
_TOKENS = re.compile(r"YYYY|YY|MM|M|DD|D|HH|H|mm|m|ss|s")


def format_date(value: Any, fmt: str = "YYYY-MM-DD") -> str:
    """
    Format a date or datetime with a token pattern.

    Tokens: YYYY, YY, MM/M (month), DD/D (day), HH/H (hour), mm/m (minute),
    ss/s (second). Doubled tokens are zero-padded. A plain date formats
    its time as midnight.

    Args:
        value: date or datetime
        fmt: Pattern string

    Returns:
        Formatted string, or "" if value is not a date

    Example:
        >>> format_date(datetime(2023, 1, 5, 9, 5, 9), "M/D/YYYY H:m:s")
        '1/5/2023 9:5:9'
    """
    if not isinstance(value, date):
        logger.debug(f"format_date: not a date: {value!r}")
        return ""

    hour = getattr(value, "hour", 0)
    minute = getattr(value, "minute", 0)
    second = getattr(value, "second", 0)
    fields = {
        "YYYY": str(value.year),
        "YY": str(value.year)[-2:],
        "MM": f"{value.month:02d}",
        "M": str(value.month),
        "DD": f"{value.day:02d}",
        "D": str(value.day),
        "HH": f"{hour:02d}",
        "H": str(hour),
        "mm": f"{minute:02d}",
        "m": str(minute),
        "ss": f"{second:02d}",
        "s": str(second),
    }
    return _TOKENS.sub(lambda m: fields[m.group(0)], fmt)


def _as_datetime(value: date) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time())


def date_diff(first: Any, second: Any, unit: str = "days") -> Optional[int]:
    """
    Absolute difference between two dates, floored to whole units.

    Args:
        first: date or datetime
        second: date or datetime
        unit: years, months, days, hours, minutes or seconds;
              unknown units fall back to days

    Returns:
        Whole number of units, or None for non-date input

    Example:
        >>> date_diff(date(2023, 1, 1), date(2023, 1, 11))
        10
    """
    if not isinstance(first, date) or not isinstance(second, date):
        logger.debug(f"date_diff: not dates: {first!r}, {second!r}")
        return None

    unit_seconds = DIFF_UNITS_SECONDS.get(unit)
    if unit_seconds is None:
        logger.debug(f"date_diff: unknown unit {unit!r}, using days")
        unit_seconds = DIFF_UNITS_SECONDS["days"]

    try:
        delta = _as_datetime(second) - _as_datetime(first)
    except TypeError:
        # naive and aware datetimes cannot be compared
        logger.debug("date_diff: mixed naive and aware datetimes")
        return None
    return math.floor(abs(delta.total_seconds()) / unit_seconds)
