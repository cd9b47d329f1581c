"""Vehicle management commands."""

import click
from eventledger.cli.error_handling import handle_domain_error, parse_amount_or_exit
from eventledger.domain.errors import DomainError
from eventledger.domain.vehicle import VehicleService
from eventledger.utils.amount_parser import format_amount


@click.group()
def vehicle_group():
    """Manage the fleet."""
    pass


@vehicle_group.command("add")
@click.argument("name")
@click.option("--plate", required=True, help="License plate")
@click.option("--km-per-liter", required=True, help="Fuel consumption in km per liter")
@click.option("--fuel-price", required=True, help="Average fuel price per liter")
@click.option("--maintenance", default="0", show_default=True, help="Maintenance cost per km")
@click.pass_context
def add_vehicle(ctx, name, plate, km_per_liter, fuel_price, maintenance):
    """Add a vehicle.

    Examples:
        eventledger vehicle add "Van" --plate ABC-1234 --km-per-liter 8.5 --fuel-price 5.90 --maintenance 0.50
    """
    km = parse_amount_or_exit(ctx, km_per_liter, "km per liter")
    fuel = parse_amount_or_exit(ctx, fuel_price, "fuel price")
    upkeep = parse_amount_or_exit(ctx, maintenance, "maintenance cost")
    try:
        vehicle_id = VehicleService(ctx.obj["db"]).create_vehicle(
            name=name,
            license_plate=plate,
            km_per_liter=km,
            avg_fuel_price=fuel,
            maintenance_cost_per_km=upkeep,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created vehicle '{name}' (ID: {vehicle_id})")


@vehicle_group.command("list")
@click.pass_context
def list_vehicles(ctx):
    """List vehicles."""
    vehicles = VehicleService(ctx.obj["db"]).list_vehicles()
    if not vehicles:
        click.echo("No vehicles found.")
        return

    click.echo(f"\n{'ID':<6} {'Name':<20} {'Plate':<10} {'Km/L':>8} {'Fuel':>8} {'Maint/km':>9}")
    click.echo("-" * 66)
    for v in vehicles:
        click.echo(
            f"{v.id:<6} {v.name[:20]:<20} {v.license_plate:<10} {format_amount(v.km_per_liter):>8} "
            f"{format_amount(v.avg_fuel_price):>8} {format_amount(v.maintenance_cost_per_km):>9}"
        )


@vehicle_group.command("update")
@click.argument("vehicle_id", type=int)
@click.option("--name", help="New name")
@click.option("--plate", help="New license plate")
@click.option("--km-per-liter", help="New fuel consumption")
@click.option("--fuel-price", help="New average fuel price")
@click.option("--maintenance", help="New maintenance cost per km")
@click.pass_context
def update_vehicle(ctx, vehicle_id, name, plate, km_per_liter, fuel_price, maintenance):
    """Update a vehicle.

    Fleet events using the vehicle pick up the new figures the next time
    they are recalculated (see 'event recalc').
    """
    fields = {
        "name": name,
        "license_plate": plate,
        "km_per_liter": parse_amount_or_exit(ctx, km_per_liter, "km per liter"),
        "avg_fuel_price": parse_amount_or_exit(ctx, fuel_price, "fuel price"),
        "maintenance_cost_per_km": parse_amount_or_exit(ctx, maintenance, "maintenance cost"),
    }
    fields = {key: value for key, value in fields.items() if value is not None}
    if not fields:
        click.echo("Nothing to update.")
        return
    try:
        VehicleService(ctx.obj["db"]).update_vehicle(vehicle_id, **fields)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated vehicle {vehicle_id}")


@vehicle_group.command("delete")
@click.argument("vehicle_id", type=int)
@click.pass_context
def delete_vehicle(ctx, vehicle_id):
    """Delete (deactivate) a vehicle."""
    try:
        VehicleService(ctx.obj["db"]).delete_vehicle(vehicle_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted vehicle {vehicle_id}")


def register_commands(cli):
    """Register vehicle commands with main CLI."""
    cli.add_command(vehicle_group, name="vehicle")
