"""Load demo data."""

from datetime import datetime
from decimal import Decimal

import click
from eventledger.cli.error_handling import handle_domain_error
from eventledger.domain.catalog import CatalogService
from eventledger.domain.employee import EmployeeService
from eventledger.domain.entities import (
    CatalogItemType,
    EventStatus,
    FinancialStatus,
    TransportType,
)
from eventledger.domain.errors import DomainError
from eventledger.domain.event import EventService
from eventledger.domain.vehicle import VehicleService
from eventledger.utils.amount_parser import format_amount


@click.command("seed")
@click.pass_context
def seed(ctx):
    """Create a demo vehicle, employee, catalog item and event.

    Does nothing if any vehicle already exists.
    """
    db = ctx.obj["db"]
    vehicles = VehicleService(db)
    if vehicles.list_vehicles():
        click.echo("Data already exists, skipping seed.")
        return

    try:
        vehicle_id = vehicles.create_vehicle(
            name="Van Sprinter",
            license_plate="ABC-1234",
            km_per_liter=Decimal("8.5"),
            avg_fuel_price=Decimal("5.90"),
            maintenance_cost_per_km=Decimal("0.50"),
        )
        EmployeeService(db).create_employee(
            name="João Motorista",
            role="Motorista",
            base_payment=Decimal("150.00"),
            individual_transport_cost=Decimal("30.00"),
        )

        catalog = CatalogService(db)
        category_id = catalog.create_category("Animação")
        item_id = catalog.create_item(
            name="Show de Mágica",
            type=CatalogItemType.SERVICE,
            price_client=Decimal("500.00"),
            internal_cost=Decimal("100.00"),
            category_id=category_id,
            stock_quantity=1,
        )

        events = EventService(db)
        event_id = events.create_event(
            client_name="Maria Silva",
            client_phone="11999999999",
            address="Rua das Flores, 123",
            event_date=datetime.now().replace(second=0, microsecond=0),
            distance_km=Decimal("25.00"),
            guest_adults=50,
            guest_kids=20,
            transport_type=TransportType.FLEET_VEHICLE,
            vehicle_id=vehicle_id,
            status=EventStatus.CONFIRMED,
            financial_status=FinancialStatus.PARTIAL,
            notes="Festa de aniversário de 5 anos",
        )
        events.attach_item(event_id, item_id, 1)
    except DomainError as e:
        handle_domain_error(ctx, e)

    event = events.get_event(event_id)
    click.echo(
        f"Seed data created. Event {event_id} net profit: {format_amount(event.financials.net_profit)}"
    )


def register_commands(cli):
    """Register seed command with main CLI."""
    cli.add_command(seed)
