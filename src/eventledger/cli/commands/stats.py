"""Dashboard statistics command."""

import click
from eventledger.cli.date_filters import period_flags_from, period_options, resolve_cli_date_range
from eventledger.domain.entities import EventStatus
from eventledger.domain.stats import StatsService
from eventledger.utils.amount_parser import format_amount


@click.command("stats")
@click.option("--status", type=click.Choice([s.value for s in EventStatus]), help="Only events with this status")
@click.option("--start-date", help="Start date (e.g., 2024-01-01 or 'last month')")
@click.option("--end-date", help="End date (e.g., 2024-01-31 or 'today')")
@click.option("--by-month", is_flag=True, help="Break revenue and costs down by month")
@period_options
@click.pass_context
def stats(ctx, status, start_date, end_date, by_month, **periods):
    """Show revenue, profit, average margin and pending events.

    Without a date range every active event is counted.

    Examples:
        eventledger stats --this-month
        eventledger stats --last-year --by-month
        eventledger stats --status CONFIRMED --start-date 2024-01-01
    """
    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags=period_flags_from(periods),
    )
    service = StatsService(ctx.obj["db"])
    event_status = EventStatus(status) if status else None

    result = service.get_stats(start_date=start, end_date=end, status=event_status)
    click.echo(f"Revenue:         {format_amount(result.monthly_revenue):>12}")
    click.echo(f"Profit:          {format_amount(result.monthly_profit):>12}")
    click.echo(f"Average margin:  {format_amount(result.avg_margin):>11}%")
    click.echo(f"Pending events:  {result.pending_events:>12}")

    if by_month:
        series = service.get_monthly_series(start_date=start, end_date=end, status=event_status)
        if not series:
            click.echo("\nNo events in range.")
            return
        click.echo(f"\n{'Month':<8} {'Events':>7} {'Revenue':>12} {'Costs':>12}")
        click.echo("-" * 42)
        for row in series:
            click.echo(
                f"{row.month:<8} {row.event_count:>7} {format_amount(row.revenue):>12} {format_amount(row.costs):>12}"
            )


def register_commands(cli):
    """Register stats command with main CLI."""
    cli.add_command(stats)
