"""Tests for CLI date filter helper."""

import click
import pytest

from eventledger.cli.date_filters import period_flags_from, resolve_cli_date_range
from eventledger.utils.date_parser import get_date_range, parse_date


def _ctx() -> click.Context:
    return click.Context(click.Command("test"))


def test_resolve_cli_date_range_rejects_multiple_periods(capsys):
    period_flags = {"this-month": True, "last-month": True}

    with pytest.raises(click.exceptions.Exit) as excinfo:
        resolve_cli_date_range(
            _ctx(),
            start_date=None,
            end_date=None,
            period_flags=period_flags,
        )

    assert excinfo.value.exit_code == 1
    assert "Only one period option" in capsys.readouterr().err


def test_resolve_cli_date_range_rejects_period_with_start_end(capsys):
    with pytest.raises(click.exceptions.Exit) as excinfo:
        resolve_cli_date_range(
            _ctx(),
            start_date="2024-01-01",
            end_date=None,
            period_flags={"this-month": True},
        )

    assert excinfo.value.exit_code == 1
    assert "cannot be combined" in capsys.readouterr().err


def test_resolve_cli_date_range_returns_period_range():
    start, end = resolve_cli_date_range(
        _ctx(),
        start_date=None,
        end_date=None,
        period_flags={"this-month": False, "last-year": True},
    )

    assert (start, end) == get_date_range("last-year")


def test_resolve_cli_date_range_parses_explicit_dates():
    start, end = resolve_cli_date_range(
        _ctx(),
        start_date="2024-01-02",
        end_date=None,
        period_flags={},
    )

    assert start == parse_date("2024-01-02")
    assert end is None


def test_resolve_cli_date_range_invalid_end_date(capsys):
    with pytest.raises(click.exceptions.Exit) as excinfo:
        resolve_cli_date_range(
            _ctx(),
            start_date=None,
            end_date="not-a-date",
            period_flags={},
        )

    assert excinfo.value.exit_code == 1
    assert "Invalid end date" in capsys.readouterr().err


def test_period_flags_from_pops_flags():
    kwargs = {"this_month": True, "last_week": False, "status": None}

    flags = period_flags_from(kwargs)

    assert flags["this-month"] is True
    assert flags["last-week"] is False
    assert flags["last-year"] is False
    assert kwargs == {"status": None}
