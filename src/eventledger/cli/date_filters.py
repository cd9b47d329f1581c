"""CLI options and helpers for filtering by date range."""

from datetime import date

import click

from eventledger.utils.date_parser import PERIODS, get_date_range, parse_date


def period_options(command):
    """Add one --<period> flag per named period to a click command.

    The flags arrive in the command as ``this_month``, ``last_week`` and so
    on; collect them with ``period_flags_from(kwargs)``.
    """
    for period in reversed(PERIODS):
        which, unit = period.split("-")
        label = "current" if which == "this" else "previous"
        command = click.option(f"--{period}", is_flag=True, help=f"Filter to {label} {unit}")(command)
    return command


def period_flags_from(kwargs: dict) -> dict[str, bool]:
    """Pop the period flags out of a command's keyword arguments."""
    return {period: bool(kwargs.pop(period.replace("-", "_"), False)) for period in PERIODS}


def resolve_cli_date_range(
    ctx,
    *,
    start_date: str | None,
    end_date: str | None,
    period_flags: dict[str, bool],
) -> tuple[date | None, date | None]:
    """Turn period flags or --start-date/--end-date into a date range.

    Exits with status 1 when more than one period is set, when a period is
    mixed with explicit dates, or when a date cannot be parsed.
    """
    chosen = [period for period, is_set in period_flags.items() if is_set]

    if len(chosen) > 1:
        flags = ", ".join(f"--{period}" for period in PERIODS)
        click.echo(f"Error: Only one period option ({flags}) can be specified at a time.", err=True)
        ctx.exit(1)

    if chosen and (start_date or end_date):
        click.echo(
            "Error: Period options (--this-month, --last-year, ...) cannot be combined "
            "with --start-date or --end-date.",
            err=True,
        )
        ctx.exit(1)

    if chosen:
        return get_date_range(chosen[0])

    bounds = []
    for label, value in (("start", start_date), ("end", end_date)):
        if not value:
            bounds.append(None)
            continue
        try:
            bounds.append(parse_date(value))
        except ValueError as e:
            click.echo(f"Error: Invalid {label} date: {e}", err=True)
            ctx.exit(1)
    return bounds[0], bounds[1]
