"""CLI error handling helpers."""

from decimal import Decimal
from typing import Optional

import click

from eventledger.domain.errors import DomainError
from eventledger.utils.amount_parser import parse_amount
from eventledger.utils.date_parser import parse_datetime


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def parse_amount_or_exit(ctx: click.Context, value: Optional[str], label: str) -> Optional[Decimal]:
    """Parse a money/rate option, or exit with a CLI error.

    Returns None when the option was not given.
    """
    if value is None:
        return None
    try:
        return parse_amount(value)
    except ValueError as exc:
        click.echo(f"Error: Invalid {label}: {exc}", err=True)
        ctx.exit(1)


def parse_datetime_or_exit(ctx: click.Context, value: Optional[str], label: str):
    """Parse a date/time option, or exit with a CLI error."""
    if value is None:
        return None
    try:
        return parse_datetime(value)
    except ValueError as exc:
        click.echo(f"Error: Invalid {label}: {exc}", err=True)
        ctx.exit(1)
