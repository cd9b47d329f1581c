"""Tests for date parsing utilities."""

import pytest
from datetime import date, datetime, timedelta
from dateutil.relativedelta import relativedelta

from eventledger.utils.date_parser import get_date_range, parse_date, parse_datetime


def test_parse_absolute_date():
    assert parse_date("2024-01-15") == date(2024, 1, 15)
    assert parse_date("January 15, 2024") == date(2024, 1, 15)


@pytest.mark.parametrize("text,shift", [("today", 0), ("Yesterday", -1), (" tomorrow ", 1)])
def test_parse_day_shifts(text, shift):
    assert parse_date(text) == date.today() + timedelta(days=shift)


def test_parse_last_month():
    """'last month' is the first day of the previous month."""
    expected = (date.today() - relativedelta(months=1)).replace(day=1)
    assert parse_date("last month") == expected


def test_parse_this_week_is_monday():
    result = parse_date("this week")
    assert result.weekday() == 0
    assert date.today() - timedelta(days=6) <= result <= date.today()


def test_parse_next_year():
    assert parse_date("next year") == date(date.today().year + 1, 1, 1)


def test_parse_invalid():
    with pytest.raises(ValueError, match="Could not parse date"):
        parse_date("last fortnight")


def test_parse_datetime_with_time():
    assert parse_datetime("2024-06-01 18:30") == datetime(2024, 6, 1, 18, 30)


def test_parse_datetime_drops_timezone():
    result = parse_datetime("2024-06-01T18:30:00+02:00")
    assert result.tzinfo is None
    assert result.hour == 18


def test_parse_datetime_relative_is_midnight():
    assert parse_datetime("tomorrow") == datetime.combine(
        date.today() + timedelta(days=1), datetime.min.time()
    )


def test_get_date_range_this_month_runs_to_month_end():
    start, end = get_date_range("this-month")
    assert start == date.today().replace(day=1)
    assert end == start + relativedelta(months=1) - timedelta(days=1)
    assert end >= date.today()


def test_get_date_range_this_year_covers_whole_year():
    year = date.today().year
    assert get_date_range("this-year") == (date(year, 1, 1), date(year, 12, 31))


def test_get_date_range_this_week_is_monday_to_sunday():
    start, end = get_date_range("this-week")
    assert start.weekday() == 0
    assert end - start == timedelta(days=6)
    assert start <= date.today() <= end


def test_get_date_range_last_month():
    start, end = get_date_range("last-month")
    first_of_this_month = date.today().replace(day=1)
    assert start == (first_of_this_month - relativedelta(months=1))
    assert end == first_of_this_month - timedelta(days=1)


def test_get_date_range_last_year():
    start, end = get_date_range("last-year")
    year = date.today().year - 1
    assert (start, end) == (date(year, 1, 1), date(year, 12, 31))


def test_get_date_range_last_week_is_monday_to_sunday():
    start, end = get_date_range("last-week")
    assert start.weekday() == 0
    assert end - start == timedelta(days=6)
    assert end < date.today()


def test_get_date_range_invalid_period():
    with pytest.raises(ValueError, match="Unknown period"):
        get_date_range("next-month")
