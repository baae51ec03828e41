"""Whole-day date utilities for holiday calendar rendering.

All calendar arithmetic used by the state machine, the holiday matcher and the
renderers goes through this module so that the whole-day granularity and the
inclusive-range semantics live in a single, tested place.
"""

import calendar
import logging
from datetime import date, datetime
from typing import Any, Optional

from dateutil import parser as dateutil_parser

logger = logging.getLogger(__name__)

INVALID_DATE_LABEL = "Invalid Date"

# Weekday header, Sunday first
WEEKDAY_HEADERS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_MONTH_ABBREVIATIONS = tuple(name[:3] for name in MONTH_NAMES)

# Fills fields missing from partial dates, so "2024-12" is 2024-12-01
_PARSE_DEFAULT = datetime(2000, 1, 1)


def parse_date(value: Any) -> Optional[date]:
    """Parse an upstream date value to a whole calendar date.

    Accepts ``date`` and ``datetime`` instances (the time of day is dropped) and
    strings such as ``"2024-12-25"`` or ``"2024-12-25T09:30:00Z"``. Anything else
    parses to ``None`` instead of raising, so malformed holiday data behaves as
    "no match".

    Args:
        value: Raw value from a holiday record

    Returns:
        Parsed date, or None if the value is missing or unparseable

    Examples:
        >>> parse_date("2024-12-25")
        datetime.date(2024, 12, 25)
        >>> parse_date("2024-12-25T23:59:00+05:30")
        datetime.date(2024, 12, 25)
        >>> parse_date("not a date") is None
        True
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None

    try:
        return dateutil_parser.parse(value.strip(), default=_PARSE_DEFAULT).date()
    except (ValueError, OverflowError) as e:
        logger.debug(f"Unparseable date value {value!r}: {e}")
        return None


def days_in_month(year: int, month: int) -> int:
    """Return the number of days (28-31) in the given month."""
    return calendar.monthrange(year, month)[1]


def sunday_weekday_index(d: date) -> int:
    """Return the weekday index of a date with 0=Sunday .. 6=Saturday."""
    return (d.weekday() + 1) % 7


def first_weekday(year: int, month: int) -> int:
    """Return the Sunday-based weekday index of the 1st of the month."""
    return sunday_weekday_index(date(year, month, 1))


def _clamp_year(year: int) -> int:
    return max(date.min.year, min(date.max.year, year))


def add_months(d: date, months: int) -> date:
    """Shift a date by whole months, rolling over year boundaries.

    The day of month is clamped to the last day of the target month, so
    January 31 plus one month is the last day of February.

    Args:
        d: Date to shift
        months: Number of months to move, negative to move backward

    Returns:
        Shifted date
    """
    month_index = d.year * 12 + (d.month - 1) + months
    year, month_zero = divmod(month_index, 12)
    if year > date.max.year:
        return date.max
    if year < date.min.year:
        return date.min
    month = month_zero + 1
    day = min(d.day, days_in_month(year, month))
    return date(year, month, day)


def replace_year(d: date, year: int) -> date:
    """Replace the year of a date, keeping month and day where valid.

    If the day does not exist in the target year (February 29 in a common year)
    it is clamped to the last valid day of that month. Years outside the range
    supported by ``datetime.date`` are clamped into it.

    Args:
        d: Date to change
        year: Target year

    Returns:
        Date in the target year
    """
    year = _clamp_year(int(year))
    day = min(d.day, days_in_month(year, d.month))
    return date(year, d.month, day)


def is_within(target: date, start: Optional[date], end: Optional[date]) -> bool:
    """Check whole-day inclusive containment of ``target`` in ``[start, end]``.

    A missing bound never contains anything.
    """
    if start is None or end is None:
        return False
    return start <= target <= end


def month_name(month: int) -> str:
    """Return the English name of a month (1-12)."""
    return MONTH_NAMES[month - 1]


def format_display_date(value: Any) -> str:
    """Format an upstream date value as ``DD Mon YYYY``.

    Args:
        value: Raw date value (string, date or datetime)

    Returns:
        Formatted date such as ``"05 Jan 2025"``, or ``"Invalid Date"``
    """
    parsed = parse_date(value)
    if parsed is None:
        return INVALID_DATE_LABEL
    return f"{parsed.day:02d} {_MONTH_ABBREVIATIONS[parsed.month - 1]} {parsed.year:04d}"
