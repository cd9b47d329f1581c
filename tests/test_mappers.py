"""Tests for database mappers."""

import pytest
from datetime import datetime, UTC
from decimal import Decimal

from eventledger.database.models import (
    CatalogItem as ORMCatalogItem,
    Event as ORMEvent,
    EventItem as ORMEventItem,
    EventTeamMember as ORMEventTeamMember,
    Vehicle as ORMVehicle,
)
from eventledger.database.mappers import (
    catalog_item_to_domain,
    event_to_domain,
    vehicle_to_domain,
)
from eventledger.domain.entities import (
    CatalogItem,
    CatalogItemType,
    Event,
    EventStatus,
    FinancialStatus,
    TransportType,
)


@pytest.fixture
def orm_event():
    vehicle = ORMVehicle(
        id=3,
        name="Van",
        license_plate="ABC-1234",
        km_per_liter=Decimal("8.50"),
        avg_fuel_price=Decimal("5.90"),
        maintenance_cost_per_km=Decimal("0.50"),
        active=True,
    )
    event = ORMEvent(
        id=1,
        client_name="Maria Silva",
        client_phone="11999999999",
        client_email=None,
        client_address=None,
        address="1 Flower Street",
        event_date=datetime(2024, 6, 1, 15, 0),
        distance_km=Decimal("25.00"),
        guest_adults=50,
        guest_kids=20,
        transport_type="FLEET_VEHICLE",
        vehicle_id=3,
        status="CONFIRMED",
        financial_status="PARTIAL",
        notes=None,
        extra_expenses=Decimal("0.00"),
        customer_id=None,
        total_revenue=Decimal("500.00"),
        total_cost_items=Decimal("100.00"),
        total_cost_labor=Decimal("0.00"),
        total_cost_transport=Decimal("29.85"),
        net_profit=Decimal("370.15"),
        profit_margin=Decimal("74.03"),
        created_at=datetime.now(UTC),
        active=True,
    )
    event.vehicle = vehicle
    event.items.append(
        ORMEventItem(
            id=10,
            event_id=1,
            catalog_item_id=5,
            quantity=1,
            unit_price_snapshot=Decimal("500.00"),
            unit_cost_snapshot=Decimal("100.00"),
        )
    )
    event.team.append(
        ORMEventTeamMember(
            id=20,
            event_id=1,
            employee_id=7,
            payment_snapshot=Decimal("150.00"),
            transport_cost_snapshot=Decimal("30.00"),
        )
    )
    return event


class TestEventMapper:
    """Tests for Event mapper."""

    def test_event_to_domain(self, orm_event):
        """Test converting ORM Event to domain Event."""
        event = event_to_domain(orm_event)

        assert isinstance(event, Event)
        assert event.id == 1
        assert event.transport_type == TransportType.FLEET_VEHICLE
        assert event.status == EventStatus.CONFIRMED
        assert event.financial_status == FinancialStatus.PARTIAL
        assert event.distance_km == Decimal("25.00")
        assert event.financials.net_profit == Decimal("370.15")
        assert event.financials.total_cost == Decimal("129.85")
        # Associations are only mapped on request
        assert event.items == ()
        assert event.team == ()
        assert event.vehicle is None

    def test_event_to_domain_with_associations(self, orm_event):
        event = event_to_domain(orm_event, with_associations=True)

        assert len(event.items) == 1
        assert event.items[0].unit_price_snapshot == Decimal("500.00")
        assert len(event.team) == 1
        assert event.team[0].transport_cost_snapshot == Decimal("30.00")
        assert event.vehicle.km_per_liter == Decimal("8.50")


class TestCatalogItemMapper:
    """Tests for CatalogItem mapper."""

    def test_catalog_item_to_domain(self):
        orm_item = ORMCatalogItem(
            id=1,
            category_id=None,
            name="Magic Show",
            description=None,
            type="SERVICE",
            price_client=Decimal("500.00"),
            internal_cost=Decimal("100.00"),
            stock_quantity=None,
            active=True,
        )
        item = catalog_item_to_domain(orm_item)

        assert isinstance(item, CatalogItem)
        assert item.type == CatalogItemType.SERVICE
        assert item.stock_quantity == 0
        assert item.active is True


class TestVehicleMapper:
    """Tests for Vehicle mapper."""

    def test_vehicle_to_domain_converts_numbers(self):
        orm_vehicle = ORMVehicle(
            id=1,
            name="Van",
            license_plate="ABC-1234",
            km_per_liter=8.5,
            avg_fuel_price=Decimal("5.90"),
            maintenance_cost_per_km=None,
            active=False,
        )
        vehicle = vehicle_to_domain(orm_vehicle)

        assert vehicle.km_per_liter == Decimal("8.5")
        assert vehicle.maintenance_cost_per_km == Decimal("0")
        assert vehicle.active is False
