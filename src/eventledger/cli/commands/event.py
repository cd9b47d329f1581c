"""Event commands: booking, items, team and financials."""

import click
from eventledger.cli.date_filters import period_flags_from, period_options, resolve_cli_date_range
from eventledger.cli.error_handling import (
    handle_domain_error,
    parse_amount_or_exit,
    parse_datetime_or_exit,
)
from eventledger.domain.entities import EventStatus, FinancialStatus, TransportType
from eventledger.domain.errors import DomainError
from eventledger.domain.event import EventService
from eventledger.utils.amount_parser import format_amount

TRANSPORT_TYPES = [t.value for t in TransportType]
EVENT_STATUSES = [s.value for s in EventStatus]
FINANCIAL_STATUSES = [s.value for s in FinancialStatus]


@click.group()
def event_group():
    """Book events and follow their financials."""
    pass


@event_group.command("create")
@click.option("--client", "client_name", help="Client name (defaults to the customer's name)")
@click.option("--address", required=True, help="Venue address")
@click.option("--date", "event_date", required=True, help="Event date and time (e.g., 2024-06-01 15:00)")
@click.option("--distance", default="0", show_default=True, help="Round-trip distance in km")
@click.option("--transport", type=click.Choice(TRANSPORT_TYPES), default="NO_TRANSPORT", show_default=True)
@click.option("--vehicle", "vehicle_id", type=int, help="Vehicle ID (fleet transport only)")
@click.option("--phone", help="Client phone")
@click.option("--email", help="Client email")
@click.option("--client-address", help="Client address")
@click.option("--adults", type=int, default=0, show_default=True, help="Adult guests")
@click.option("--kids", type=int, default=0, show_default=True, help="Child guests")
@click.option("--status", type=click.Choice(EVENT_STATUSES), default="PENDING", show_default=True)
@click.option(
    "--financial-status", type=click.Choice(FINANCIAL_STATUSES), default="UNPAID", show_default=True
)
@click.option("--notes", help="Notes")
@click.option("--extra-expenses", default="0", show_default=True, help="Extra expenses for the event")
@click.option("--customer", "customer_id", type=int, help="Customer ID")
@click.pass_context
def create_event(
    ctx,
    client_name,
    address,
    event_date,
    distance,
    transport,
    vehicle_id,
    phone,
    email,
    client_address,
    adults,
    kids,
    status,
    financial_status,
    notes,
    extra_expenses,
    customer_id,
):
    """Book a new event.

    Examples:
        eventledger event create --client "Maria" --address "1 Main St" --date 2024-06-01
        eventledger event create --customer 3 --address "Park" --date "2024-06-01 15:00" \\
            --transport FLEET_VEHICLE --vehicle 1 --distance 25
    """
    service = EventService(ctx.obj["db"])
    when = parse_datetime_or_exit(ctx, event_date, "date")
    distance_km = parse_amount_or_exit(ctx, distance, "distance")
    extra = parse_amount_or_exit(ctx, extra_expenses, "extra expenses")
    try:
        event_id = service.create_event(
            address=address,
            event_date=when,
            client_name=client_name,
            distance_km=distance_km,
            transport_type=TransportType(transport),
            vehicle_id=vehicle_id,
            client_phone=phone,
            client_email=email,
            client_address=client_address,
            guest_adults=adults,
            guest_kids=kids,
            status=EventStatus(status),
            financial_status=FinancialStatus(financial_status),
            notes=notes,
            extra_expenses=extra,
            customer_id=customer_id,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created event {event_id}")


@event_group.command("list")
@click.option("--status", type=click.Choice(EVENT_STATUSES), help="Only events with this status")
@click.option("--customer", "customer_id", type=int, help="Only events of this customer")
@click.option("--start-date", help="Start date (e.g., 2024-01-01 or 'last month')")
@click.option("--end-date", help="End date (e.g., 2024-01-31 or 'today')")
@period_options
@click.pass_context
def list_events(ctx, status, customer_id, start_date, end_date, **periods):
    """List events, newest first."""
    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags=period_flags_from(periods),
    )
    events = EventService(ctx.obj["db"]).list_events(
        status=EventStatus(status) if status else None,
        start_date=start,
        end_date=end,
        customer_id=customer_id,
    )
    if not events:
        click.echo("No events found.")
        return

    click.echo(
        f"\n{'ID':<6} {'Date':<16} {'Client':<20} {'Status':<10} {'Revenue':>12} {'Profit':>12} {'Margin':>8}"
    )
    click.echo("-" * 90)
    for ev in events:
        click.echo(
            f"{ev.id:<6} {ev.event_date:%Y-%m-%d %H:%M} {ev.client_name[:20]:<20} {ev.status.value:<10} "
            f"{format_amount(ev.financials.total_revenue):>12} {format_amount(ev.financials.net_profit):>12} "
            f"{format_amount(ev.financials.profit_margin):>7}%"
        )


@event_group.command("show")
@click.argument("event_id", type=int)
@click.pass_context
def show_event(ctx, event_id):
    """Show an event with its items, team and financials."""
    try:
        ev = EventService(ctx.obj["db"]).get_event(event_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    if ev is None:
        click.echo(f"Error: Event {event_id} not found", err=True)
        ctx.exit(1)

    click.echo(f"\nEvent {ev.id}: {ev.client_name}")
    click.echo(f"  Date:       {ev.event_date:%Y-%m-%d %H:%M}")
    click.echo(f"  Venue:      {ev.address}")
    if ev.client_phone:
        click.echo(f"  Phone:      {ev.client_phone}")
    if ev.client_email:
        click.echo(f"  Email:      {ev.client_email}")
    click.echo(f"  Guests:     {ev.guest_adults} adults, {ev.guest_kids} kids")
    click.echo(f"  Status:     {ev.status.value} / {ev.financial_status.value}")
    transport = ev.transport_type.value
    if ev.vehicle is not None:
        transport += f" ({ev.vehicle.name}, {ev.vehicle.license_plate})"
    click.echo(f"  Transport:  {transport}, {format_amount(ev.distance_km)} km")
    if ev.notes:
        click.echo(f"  Notes:      {ev.notes}")

    click.echo("\nItems:")
    if not ev.items:
        click.echo("  (none)")
    for item in ev.items:
        click.echo(
            f"  [{item.id}] catalog item {item.catalog_item_id} x{item.quantity} "
            f"@ {format_amount(item.unit_price_snapshot)} (cost {format_amount(item.unit_cost_snapshot)})"
        )

    click.echo("\nTeam:")
    if not ev.team:
        click.echo("  (none)")
    for member in ev.team:
        click.echo(
            f"  [{member.id}] employee {member.employee_id}: payment {format_amount(member.payment_snapshot)}, "
            f"transport {format_amount(member.transport_cost_snapshot)}"
        )

    fin = ev.financials
    click.echo("\nFinancials:")
    click.echo(f"  Revenue:          {format_amount(fin.total_revenue):>12}")
    click.echo(f"  Items cost:       {format_amount(fin.total_cost_items):>12}")
    click.echo(f"  Labor cost:       {format_amount(fin.total_cost_labor):>12}")
    click.echo(f"  Transport cost:   {format_amount(fin.total_cost_transport):>12}")
    click.echo(f"  Extra expenses:   {format_amount(ev.extra_expenses):>12}")
    click.echo(f"  Net profit:       {format_amount(fin.net_profit):>12}")
    click.echo(f"  Margin:           {format_amount(fin.profit_margin):>11}%")


@event_group.command("update")
@click.argument("event_id", type=int)
@click.option("--client", "client_name", help="New client name")
@click.option("--address", help="New venue address")
@click.option("--date", "event_date", help="New date and time")
@click.option("--distance", help="New round-trip distance in km")
@click.option("--transport", type=click.Choice(TRANSPORT_TYPES))
@click.option("--vehicle", "vehicle_id", type=int, help="New vehicle ID")
@click.option("--phone", help="New client phone")
@click.option("--email", help="New client email")
@click.option("--client-address", help="New client address")
@click.option("--adults", type=int, help="Adult guests")
@click.option("--kids", type=int, help="Child guests")
@click.option("--status", type=click.Choice(EVENT_STATUSES))
@click.option("--financial-status", type=click.Choice(FINANCIAL_STATUSES))
@click.option("--notes", help="New notes")
@click.option("--extra-expenses", help="New extra expenses")
@click.option("--customer", "customer_id", type=int, help="Link to this customer")
@click.pass_context
def update_event(
    ctx,
    event_id,
    client_name,
    address,
    event_date,
    distance,
    transport,
    vehicle_id,
    phone,
    email,
    client_address,
    adults,
    kids,
    status,
    financial_status,
    notes,
    extra_expenses,
    customer_id,
):
    """Update an event. Financials are recalculated afterwards."""
    fields = {
        "client_name": client_name,
        "address": address,
        "event_date": parse_datetime_or_exit(ctx, event_date, "date"),
        "distance_km": parse_amount_or_exit(ctx, distance, "distance"),
        "transport_type": transport,
        "vehicle_id": vehicle_id,
        "client_phone": phone,
        "client_email": email,
        "client_address": client_address,
        "guest_adults": adults,
        "guest_kids": kids,
        "status": status,
        "financial_status": financial_status,
        "notes": notes,
        "extra_expenses": parse_amount_or_exit(ctx, extra_expenses, "extra expenses"),
        "customer_id": customer_id,
    }
    fields = {key: value for key, value in fields.items() if value is not None}
    if not fields:
        click.echo("Nothing to update.")
        return
    try:
        ev = EventService(ctx.obj["db"]).update_event(event_id, **fields)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(
        f"Updated event {event_id} (revenue {format_amount(ev.financials.total_revenue)}, "
        f"profit {format_amount(ev.financials.net_profit)})"
    )


@event_group.command("delete")
@click.argument("event_id", type=int)
@click.option("--yes", is_flag=True, help="Don't ask for confirmation")
@click.pass_context
def delete_event(ctx, event_id, yes):
    """Delete (deactivate) an event."""
    if not yes and not click.confirm(f"Delete event {event_id}?"):
        click.echo("Aborted.")
        return
    try:
        EventService(ctx.obj["db"]).delete_event(event_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted event {event_id}")


@event_group.command("add-item")
@click.argument("event_id", type=int)
@click.argument("catalog_item_id", type=int)
@click.option("--quantity", type=int, default=1, show_default=True, help="Quantity")
@click.pass_context
def add_item(ctx, event_id, catalog_item_id, quantity):
    """Attach a catalog item to an event at its current price."""
    try:
        item = EventService(ctx.obj["db"]).attach_item(event_id, catalog_item_id, quantity)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(
        f"Added catalog item {catalog_item_id} x{item.quantity} to event {event_id} "
        f"at {format_amount(item.unit_price_snapshot)} (event item ID: {item.id})"
    )


@event_group.command("remove-item")
@click.argument("event_id", type=int)
@click.argument("item_id", type=int)
@click.pass_context
def remove_item(ctx, event_id, item_id):
    """Remove an event item (by event item ID)."""
    try:
        removed = EventService(ctx.obj["db"]).detach_item(event_id, item_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    if removed:
        click.echo(f"Removed item {item_id} from event {event_id}")
    else:
        click.echo(f"Item {item_id} is not on event {event_id}")


@event_group.command("add-member")
@click.argument("event_id", type=int)
@click.argument("employee_id", type=int)
@click.pass_context
def add_member(ctx, event_id, employee_id):
    """Add an employee to the event team at their current rates."""
    try:
        member = EventService(ctx.obj["db"]).attach_team_member(event_id, employee_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(
        f"Added employee {employee_id} to event {event_id} "
        f"(payment {format_amount(member.payment_snapshot)}, team member ID: {member.id})"
    )


@event_group.command("remove-member")
@click.argument("event_id", type=int)
@click.argument("team_id", type=int)
@click.pass_context
def remove_member(ctx, event_id, team_id):
    """Remove a team member (by team member ID)."""
    try:
        removed = EventService(ctx.obj["db"]).detach_team_member(event_id, team_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    if removed:
        click.echo(f"Removed team member {team_id} from event {event_id}")
    else:
        click.echo(f"Team member {team_id} is not on event {event_id}")


@event_group.command("recalc")
@click.argument("event_id", type=int)
@click.pass_context
def recalc_event(ctx, event_id):
    """Recalculate an event's financials, e.g. after a vehicle changed."""
    try:
        financials = EventService(ctx.obj["db"]).recalculate(event_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    for name, value in financials.as_strings().items():
        click.echo(f"{name}: {value}")


def register_commands(cli):
    """Register event commands with main CLI."""
    cli.add_command(event_group, name="event")
