"""Catalog item commands."""

import click
from eventledger.cli.error_handling import handle_domain_error, parse_amount_or_exit
from eventledger.domain.catalog import CatalogService
from eventledger.domain.entities import CatalogItemType
from eventledger.domain.errors import DomainError
from eventledger.utils.amount_parser import format_amount

ITEM_TYPES = [t.value for t in CatalogItemType]


@click.group()
def catalog_group():
    """Manage the product and service catalog."""
    pass


@catalog_group.command("add")
@click.argument("name")
@click.option("--price", required=True, help="Price charged to the client (e.g., 500.00)")
@click.option("--cost", required=True, help="Internal cost (e.g., 100.00)")
@click.option("--type", "item_type", type=click.Choice(ITEM_TYPES), default="PRODUCT", show_default=True)
@click.option("--category", "category_id", type=int, help="Category ID")
@click.option("--description", help="Description")
@click.option("--stock", type=int, default=0, show_default=True, help="Units in stock")
@click.pass_context
def add_item(ctx, name, price, cost, item_type, category_id, description, stock):
    """Add a catalog item.

    Examples:
        eventledger catalog add "Magic Show" --type SERVICE --price 500 --cost 100
        eventledger catalog add "Bouncy Castle" --price 350 --cost 40 --category 1 --stock 2
    """
    service = CatalogService(ctx.obj["db"])
    price_client = parse_amount_or_exit(ctx, price, "price")
    internal_cost = parse_amount_or_exit(ctx, cost, "cost")
    try:
        item_id = service.create_item(
            name=name,
            type=CatalogItemType(item_type),
            price_client=price_client,
            internal_cost=internal_cost,
            category_id=category_id,
            description=description,
            stock_quantity=stock,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created catalog item '{name}' (ID: {item_id})")


@catalog_group.command("list")
@click.option("--category", "category_id", type=int, help="Only items in this category")
@click.pass_context
def list_items(ctx, category_id):
    """List catalog items."""
    service = CatalogService(ctx.obj["db"])
    items = service.list_items(category_id=category_id)
    if not items:
        click.echo("No catalog items found.")
        return

    click.echo(f"\n{'ID':<6} {'Name':<30} {'Type':<8} {'Price':>12} {'Cost':>12} {'Stock':>6}")
    click.echo("-" * 80)
    for item in items:
        click.echo(
            f"{item.id:<6} {item.name[:30]:<30} {item.type.value:<8} "
            f"{format_amount(item.price_client):>12} {format_amount(item.internal_cost):>12} "
            f"{item.stock_quantity:>6}"
        )


@catalog_group.command("update")
@click.argument("item_id", type=int)
@click.option("--name", help="New name")
@click.option("--price", help="New client price")
@click.option("--cost", help="New internal cost")
@click.option("--type", "item_type", type=click.Choice(ITEM_TYPES))
@click.option("--category", "category_id", type=int, help="New category ID")
@click.option("--description", help="New description")
@click.option("--stock", type=int, help="New stock quantity")
@click.pass_context
def update_item(ctx, item_id, name, price, cost, item_type, category_id, description, stock):
    """Update a catalog item.

    Events that already hold the item keep the price they were booked at.
    """
    service = CatalogService(ctx.obj["db"])
    fields = {
        "name": name,
        "price_client": parse_amount_or_exit(ctx, price, "price"),
        "internal_cost": parse_amount_or_exit(ctx, cost, "cost"),
        "type": item_type,
        "category_id": category_id,
        "description": description,
        "stock_quantity": stock,
    }
    fields = {key: value for key, value in fields.items() if value is not None}
    if not fields:
        click.echo("Nothing to update.")
        return
    try:
        service.update_item(item_id, **fields)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated catalog item {item_id}")


@catalog_group.command("delete")
@click.argument("item_id", type=int)
@click.pass_context
def delete_item(ctx, item_id):
    """Delete (deactivate) a catalog item."""
    service = CatalogService(ctx.obj["db"])
    try:
        service.delete_item(item_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted catalog item {item_id}")


def register_commands(cli):
    """Register catalog commands with main CLI."""
    cli.add_command(catalog_group, name="catalog")
