"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so column renames or type changes
stay out of the services and the financial engine.
"""

from decimal import Decimal
from typing import Optional

from eventledger.domain import entities as domain
from eventledger.database.models import (
    Category as ORMCategory,
    CatalogItem as ORMCatalogItem,
    Customer as ORMCustomer,
    Employee as ORMEmployee,
    Event as ORMEvent,
    EventItem as ORMEventItem,
    EventTeamMember as ORMEventTeamMember,
    Vehicle as ORMVehicle,
)


def _decimal(value: Optional[Decimal]) -> Decimal:
    """Return a Decimal for a nullable numeric column."""
    if value is None:
        return Decimal("0")
    return Decimal(value)


def category_to_domain(orm_category: ORMCategory) -> domain.Category:
    """Convert SQLAlchemy Category model to domain Category entity."""
    return domain.Category(
        id=orm_category.id,
        name=orm_category.name,
        active=bool(orm_category.active),
    )


def catalog_item_to_domain(orm_item: ORMCatalogItem) -> domain.CatalogItem:
    """Convert SQLAlchemy CatalogItem model to domain CatalogItem entity."""
    return domain.CatalogItem(
        id=orm_item.id,
        category_id=orm_item.category_id,
        name=orm_item.name,
        description=orm_item.description,
        type=domain.CatalogItemType(orm_item.type),
        price_client=_decimal(orm_item.price_client),
        internal_cost=_decimal(orm_item.internal_cost),
        stock_quantity=orm_item.stock_quantity or 0,
        active=bool(orm_item.active),
    )


def employee_to_domain(orm_employee: ORMEmployee) -> domain.Employee:
    """Convert SQLAlchemy Employee model to domain Employee entity."""
    return domain.Employee(
        id=orm_employee.id,
        name=orm_employee.name,
        phone=orm_employee.phone,
        role=orm_employee.role,
        base_payment=_decimal(orm_employee.base_payment),
        individual_transport_cost=_decimal(orm_employee.individual_transport_cost),
        active=bool(orm_employee.active),
    )


def vehicle_to_domain(orm_vehicle: ORMVehicle) -> domain.Vehicle:
    """Convert SQLAlchemy Vehicle model to domain Vehicle entity."""
    return domain.Vehicle(
        id=orm_vehicle.id,
        name=orm_vehicle.name,
        license_plate=orm_vehicle.license_plate,
        km_per_liter=_decimal(orm_vehicle.km_per_liter),
        avg_fuel_price=_decimal(orm_vehicle.avg_fuel_price),
        maintenance_cost_per_km=_decimal(orm_vehicle.maintenance_cost_per_km),
        active=bool(orm_vehicle.active),
    )


def customer_to_domain(orm_customer: ORMCustomer) -> domain.Customer:
    """Convert SQLAlchemy Customer model to domain Customer entity."""
    return domain.Customer(
        id=orm_customer.id,
        name=orm_customer.name,
        phone=orm_customer.phone,
        email=orm_customer.email,
        address=orm_customer.address,
        notes=orm_customer.notes,
        created_at=orm_customer.created_at,
        active=bool(orm_customer.active),
    )


def event_item_to_domain(orm_item: ORMEventItem) -> domain.EventItem:
    """Convert SQLAlchemy EventItem model to domain EventItem entity."""
    return domain.EventItem(
        id=orm_item.id,
        event_id=orm_item.event_id,
        catalog_item_id=orm_item.catalog_item_id,
        quantity=orm_item.quantity,
        unit_price_snapshot=_decimal(orm_item.unit_price_snapshot),
        unit_cost_snapshot=_decimal(orm_item.unit_cost_snapshot),
    )


def event_team_member_to_domain(orm_member: ORMEventTeamMember) -> domain.EventTeamMember:
    """Convert SQLAlchemy EventTeamMember model to domain EventTeamMember entity."""
    return domain.EventTeamMember(
        id=orm_member.id,
        event_id=orm_member.event_id,
        employee_id=orm_member.employee_id,
        payment_snapshot=_decimal(orm_member.payment_snapshot),
        transport_cost_snapshot=_decimal(orm_member.transport_cost_snapshot),
    )


def financials_to_domain(orm_event: ORMEvent) -> domain.EventFinancials:
    """Read the derived financial columns of an event."""
    return domain.EventFinancials(
        total_revenue=_decimal(orm_event.total_revenue),
        total_cost_items=_decimal(orm_event.total_cost_items),
        total_cost_labor=_decimal(orm_event.total_cost_labor),
        total_cost_transport=_decimal(orm_event.total_cost_transport),
        net_profit=_decimal(orm_event.net_profit),
        profit_margin=_decimal(orm_event.profit_margin),
    )


def event_to_domain(orm_event: ORMEvent, with_associations: bool = False) -> domain.Event:
    """Convert SQLAlchemy Event model to domain Event entity.

    Args:
        orm_event: SQLAlchemy Event
        with_associations: Also convert items, team and vehicle
    """
    items: tuple[domain.EventItem, ...] = ()
    team: tuple[domain.EventTeamMember, ...] = ()
    vehicle = None
    if with_associations:
        items = tuple(event_item_to_domain(item) for item in orm_event.items)
        team = tuple(event_team_member_to_domain(member) for member in orm_event.team)
        if orm_event.vehicle is not None:
            vehicle = vehicle_to_domain(orm_event.vehicle)

    return domain.Event(
        id=orm_event.id,
        client_name=orm_event.client_name,
        client_phone=orm_event.client_phone,
        client_email=orm_event.client_email,
        client_address=orm_event.client_address,
        address=orm_event.address,
        event_date=orm_event.event_date,
        distance_km=_decimal(orm_event.distance_km),
        guest_adults=orm_event.guest_adults or 0,
        guest_kids=orm_event.guest_kids or 0,
        transport_type=domain.TransportType(orm_event.transport_type),
        vehicle_id=orm_event.vehicle_id,
        status=domain.EventStatus(orm_event.status),
        financial_status=domain.FinancialStatus(orm_event.financial_status),
        notes=orm_event.notes,
        extra_expenses=_decimal(orm_event.extra_expenses),
        customer_id=orm_event.customer_id,
        financials=financials_to_domain(orm_event),
        created_at=orm_event.created_at,
        active=bool(orm_event.active),
        items=items,
        team=team,
        vehicle=vehicle,
    )
