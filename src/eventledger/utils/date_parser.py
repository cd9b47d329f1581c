"""Date parsing utilities for CLI input and report periods."""

from datetime import date, datetime, timedelta
from typing import Callable

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

PERIODS = ("this-month", "this-year", "this-week", "last-month", "last-year", "last-week")


def _week_start(day: date) -> date:
    return day - timedelta(days=day.weekday())


def _month_start(day: date) -> date:
    return day.replace(day=1)


def _year_start(day: date) -> date:
    return day.replace(month=1, day=1)


# "<offset> <unit>" resolves to the first day of that week/month/year
_UNIT_START: dict[str, Callable[[date], date]] = {
    "week": _week_start,
    "month": _month_start,
    "year": _year_start,
}
_UNIT_STEP = {
    "week": relativedelta(weeks=1),
    "month": relativedelta(months=1),
    "year": relativedelta(years=1),
}
_OFFSETS = {"last": -1, "this": 0, "next": 1}


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Besides anything dateutil understands ("2024-01-15", "January 15, 2024")
    this accepts "today", "yesterday", "tomorrow" and "last|this|next
    week|month|year", the latter resolving to the first day of the period.

    Args:
        date_str: Date string

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    text = date_str.strip().lower()
    today = date.today()

    shifts = {"today": 0, "yesterday": -1, "tomorrow": 1}
    if text in shifts:
        return today + timedelta(days=shifts[text])

    words = text.split()
    if len(words) == 2 and words[0] in _OFFSETS and words[1] in _UNIT_START:
        offset, unit = _OFFSETS[words[0]], words[1]
        return _UNIT_START[unit](today + _UNIT_STEP[unit] * offset)

    try:
        return date_parser.parse(text).date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_datetime(value: str) -> datetime:
    """Parse an event date and time, e.g. "2024-06-01 18:30".

    Relative dates are accepted and resolve to midnight. The result is naive.

    Raises:
        ValueError: If the string cannot be parsed
    """
    value = value.strip()
    try:
        parsed = date_parser.parse(value)
    except (ValueError, TypeError, OverflowError):
        return datetime.combine(parse_date(value), datetime.min.time())
    return parsed.replace(tzinfo=None)


def get_date_range(period: str) -> tuple[date, date]:
    """Get inclusive start and end dates for a named period.

    Every period covers a whole week (Monday to Sunday), month or year, so
    "this-*" ranges include days still ahead of today.

    Args:
        period: One of PERIODS

    Returns:
        Tuple of (start_date, end_date)

    Raises:
        ValueError: If period string is not recognized
    """
    key = period.strip().lower()
    if key not in PERIODS:
        raise ValueError(f"Unknown period: '{period}'. Supported periods: {', '.join(PERIODS)}")

    which, unit = key.split("-")
    current_start = _UNIT_START[unit](date.today())
    if which == "last":
        current_start -= _UNIT_STEP[unit]
    return current_start, current_start + _UNIT_STEP[unit] - timedelta(days=1)
