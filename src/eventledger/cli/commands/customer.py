"""Customer management commands."""

import click
from eventledger.cli.error_handling import handle_domain_error
from eventledger.domain.customer import CustomerService
from eventledger.domain.errors import DomainError
from eventledger.utils.amount_parser import format_amount


@click.group()
def customer_group():
    """Manage clients."""
    pass


@customer_group.command("add")
@click.argument("name")
@click.option("--phone", help="Phone number")
@click.option("--email", help="Email address")
@click.option("--address", help="Postal address")
@click.option("--notes", help="Notes")
@click.pass_context
def add_customer(ctx, name, phone, email, address, notes):
    """Add a customer."""
    try:
        customer_id = CustomerService(ctx.obj["db"]).create_customer(
            name=name, phone=phone, email=email, address=address, notes=notes
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created customer '{name}' (ID: {customer_id})")


@customer_group.command("list")
@click.option("--search", help="Only customers whose name or phone contains this text")
@click.pass_context
def list_customers(ctx, search):
    """List customers."""
    service = CustomerService(ctx.obj["db"])
    customers = service.search(search) if search else service.list_customers()
    if not customers:
        click.echo("No customers found.")
        return

    click.echo(f"\n{'ID':<6} {'Name':<25} {'Phone':<15} {'Email':<30}")
    click.echo("-" * 78)
    for c in customers:
        click.echo(f"{c.id:<6} {c.name[:25]:<25} {(c.phone or ''):<15} {(c.email or ''):<30}")


@customer_group.command("history")
@click.argument("customer_id", type=int)
@click.pass_context
def customer_history(ctx, customer_id):
    """Show a customer's events."""
    try:
        events = CustomerService(ctx.obj["db"]).get_history(customer_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    if not events:
        click.echo("No events found.")
        return
    for ev in events:
        click.echo(
            f"{ev.id:<6} {ev.event_date:%Y-%m-%d %H:%M}  {ev.status.value:<10} "
            f"{format_amount(ev.financials.total_revenue):>12}  {ev.address}"
        )


@customer_group.command("update")
@click.argument("customer_id", type=int)
@click.option("--name", help="New name")
@click.option("--phone", help="New phone number")
@click.option("--email", help="New email address")
@click.option("--address", help="New postal address")
@click.option("--notes", help="New notes")
@click.pass_context
def update_customer(ctx, customer_id, name, phone, email, address, notes):
    """Update a customer."""
    fields = {"name": name, "phone": phone, "email": email, "address": address, "notes": notes}
    fields = {key: value for key, value in fields.items() if value is not None}
    if not fields:
        click.echo("Nothing to update.")
        return
    try:
        CustomerService(ctx.obj["db"]).update_customer(customer_id, **fields)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated customer {customer_id}")


@customer_group.command("delete")
@click.argument("customer_id", type=int)
@click.pass_context
def delete_customer(ctx, customer_id):
    """Delete (deactivate) a customer."""
    try:
        CustomerService(ctx.obj["db"]).delete_customer(customer_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted customer {customer_id}")


def register_commands(cli):
    """Register customer commands with main CLI."""
    cli.add_command(customer_group, name="customer")
