"""Category management commands."""

import click
from eventledger.cli.error_handling import handle_domain_error
from eventledger.domain.catalog import CatalogService
from eventledger.domain.errors import DomainError


@click.group()
def category_group():
    """Manage catalog categories."""
    pass


@category_group.command("create")
@click.argument("name", metavar="NAME")
@click.pass_context
def create_category(ctx, name: str):
    """Create a new category.

    Examples:
        eventledger category create "Entertainment"
    """
    service = CatalogService(ctx.obj["db"])
    try:
        category_id = service.create_category(name)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created category '{name}' (ID: {category_id})")


@category_group.command("list")
@click.pass_context
def list_categories(ctx):
    """List all categories."""
    service = CatalogService(ctx.obj["db"])
    categories = service.list_categories()
    if not categories:
        click.echo("No categories found.")
        return

    click.echo("\nCategories:")
    click.echo("-" * 40)
    for cat in categories:
        click.echo(f"ID: {cat.id:3d} | {cat.name}")


@category_group.command("rename")
@click.argument("category_id", type=int)
@click.argument("new_name")
@click.pass_context
def rename_category(ctx, category_id: int, new_name: str):
    """Rename a category."""
    service = CatalogService(ctx.obj["db"])
    try:
        service.rename_category(category_id, new_name)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Renamed category {category_id} to '{new_name}'")


@category_group.command("delete")
@click.argument("category_id", type=int)
@click.pass_context
def delete_category(ctx, category_id: int):
    """Delete (deactivate) a category."""
    service = CatalogService(ctx.obj["db"])
    try:
        service.delete_category(category_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted category {category_id}")


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
