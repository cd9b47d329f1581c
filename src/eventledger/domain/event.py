"""Event domain service.

Every mutation commits its own change first and then calls ``recalculate``
as a separate step. A failed recalculation is logged and never undoes the
mutation that triggered it; the next mutation recomputes from scratch.
"""

import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional

from eventledger.database.base import Database
from eventledger.domain.entities import (
    ZERO,
    Event,
    EventFinancials,
    EventItem,
    EventStatus,
    EventTeamMember,
    FinancialStatus,
    TransportType,
    to_money,
)
from eventledger.domain.errors import (
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
    catalog_item_not_found,
    customer_not_found,
    employee_already_attached,
    employee_not_found,
    event_not_found,
    item_already_attached,
    vehicle_not_found,
)
from eventledger.domain.financials import calculate_event_financials

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = {
    "customer_id",
    "client_name",
    "client_phone",
    "client_email",
    "client_address",
    "address",
    "event_date",
    "distance_km",
    "guest_adults",
    "guest_kids",
    "transport_type",
    "vehicle_id",
    "status",
    "financial_status",
    "notes",
    "extra_expenses",
}


def _require_non_negative(name: str, value: Any) -> None:
    if value is not None and value < 0:
        raise ValidationError(f"{name} must not be negative")


def _require_positive_int(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(f"{name} must be a positive integer")


def _coerce(enum_cls: Any, value: Any) -> Any:
    """Convert a raw value to a member of ``enum_cls`` or raise ValidationError."""
    try:
        return enum_cls(value)
    except ValueError:
        raise ValidationError(f"Invalid {enum_cls.__name__} '{value}'")


class EventService:
    """Service for managing events, their items and their team."""

    def __init__(self, db: Database):
        """Initialize event service.

        Args:
            db: Database instance
        """
        self.db = db

    # Event lifecycle
    def create_event(
        self,
        address: str,
        event_date: datetime,
        client_name: Optional[str] = None,
        distance_km: Decimal = ZERO,
        transport_type: TransportType = TransportType.NO_TRANSPORT,
        vehicle_id: Optional[int] = None,
        client_phone: Optional[str] = None,
        client_email: Optional[str] = None,
        client_address: Optional[str] = None,
        guest_adults: int = 0,
        guest_kids: int = 0,
        status: EventStatus = EventStatus.PENDING,
        financial_status: FinancialStatus = FinancialStatus.UNPAID,
        notes: Optional[str] = None,
        extra_expenses: Decimal = ZERO,
        customer_id: Optional[int] = None,
    ) -> int:
        """Create an event and compute its initial financials.

        When ``customer_id`` is given, missing client details are copied from
        the customer record.

        Args:
            address: Venue address
            event_date: Date and time of the event
            client_name: Client name (required unless customer_id is given)
            distance_km: Round-trip distance to the venue
            transport_type: How the team gets to the venue
            vehicle_id: Fleet vehicle, required iff transport_type is FLEET_VEHICLE
            client_phone: Optional client phone
            client_email: Optional client email
            client_address: Optional client address
            guest_adults: Adult guest count
            guest_kids: Child guest count
            status: Lifecycle status
            financial_status: Payment status
            notes: Optional notes
            extra_expenses: Extra expenses subtracted from profit
            customer_id: Optional customer record

        Returns:
            Event ID

        Raises:
            ValidationError: If input is malformed or transport rules are broken
            NotFoundError: If the customer or vehicle doesn't exist
        """
        if customer_id is not None:
            customer = self.db.get_customer(customer_id)
            if customer is None:
                raise NotFoundError(customer_not_found(customer_id))
            client_name = client_name or customer.name
            client_phone = client_phone or customer.phone
            client_email = client_email or customer.email
            client_address = client_address or customer.address

        if not client_name or not client_name.strip():
            raise ValidationError("Client name is required")
        if not address or not address.strip():
            raise ValidationError("Venue address is required")

        transport_type = _coerce(TransportType, transport_type)
        distance_km = to_money(distance_km, "Distance")
        extra_expenses = to_money(extra_expenses, "Extra expenses")
        self._validate_numbers(
            distance_km=distance_km,
            guest_adults=guest_adults,
            guest_kids=guest_kids,
            extra_expenses=extra_expenses,
        )
        self._validate_transport(transport_type, vehicle_id)

        event_id = self.db.create_event(
            client_name=client_name,
            address=address,
            event_date=event_date,
            distance_km=distance_km,
            transport_type=transport_type,
            vehicle_id=vehicle_id,
            client_phone=client_phone,
            client_email=client_email,
            client_address=client_address,
            guest_adults=guest_adults,
            guest_kids=guest_kids,
            status=_coerce(EventStatus, status),
            financial_status=_coerce(FinancialStatus, financial_status),
            notes=notes,
            extra_expenses=extra_expenses,
            customer_id=customer_id,
        )
        logger.debug("Created event %s for %s", event_id, client_name)
        self._recalculate_after_change(event_id)
        return event_id

    def get_event(self, event_id: int) -> Optional[Event]:
        """Get an event with its items, team and vehicle.

        Args:
            event_id: Event ID

        Returns:
            Event entity or None if not found or deleted
        """
        return self.db.find_event_with_associations(event_id)

    def list_events(
        self,
        status: Optional[EventStatus] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        customer_id: Optional[int] = None,
    ) -> list[Event]:
        """List active events, newest first.

        Args:
            status: Optional status filter
            start_date: Optional start date filter
            end_date: Optional end date filter
            customer_id: Optional customer filter

        Returns:
            List of event entities without associations
        """
        if status is not None:
            status = _coerce(EventStatus, status)
        return self.db.list_events(
            status=status, start_date=start_date, end_date=end_date, customer_id=customer_id
        )

    def update_event(self, event_id: int, **fields: Any) -> Event:
        """Update event fields and recalculate its financials.

        Switching away from fleet transport drops the vehicle reference
        unless a vehicle is passed explicitly, which is then rejected.

        Args:
            event_id: Event ID
            **fields: Columns to change (see UPDATABLE_FIELDS)

        Returns:
            The updated event with its associations

        Raises:
            ValidationError: If a field is unknown or invalid
            NotFoundError: If the event, customer or vehicle doesn't exist
        """
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise ValidationError(f"Cannot update field(s): {', '.join(sorted(unknown))}")

        event = self.db.get_event(event_id)
        if event is None:
            raise NotFoundError(event_not_found(event_id))

        if "status" in fields:
            fields["status"] = _coerce(EventStatus, fields["status"])
        if "financial_status" in fields:
            fields["financial_status"] = _coerce(FinancialStatus, fields["financial_status"])
        if "transport_type" in fields:
            fields["transport_type"] = _coerce(TransportType, fields["transport_type"])
        for name in ("client_name", "address"):
            if name in fields and (fields[name] is None or not str(fields[name]).strip()):
                raise ValidationError(f"{name.replace('_', ' ').capitalize()} is required")
        for name, label in (("distance_km", "Distance"), ("extra_expenses", "Extra expenses")):
            if fields.get(name) is not None:
                fields[name] = to_money(fields[name], label)
        self._validate_numbers(
            distance_km=fields.get("distance_km"),
            guest_adults=fields.get("guest_adults"),
            guest_kids=fields.get("guest_kids"),
            extra_expenses=fields.get("extra_expenses"),
        )

        if "customer_id" in fields and fields["customer_id"] is not None:
            if self.db.get_customer(fields["customer_id"]) is None:
                raise NotFoundError(customer_not_found(fields["customer_id"]))

        if "transport_type" in fields or "vehicle_id" in fields:
            transport_type = fields.get("transport_type", event.transport_type)
            if transport_type != TransportType.FLEET_VEHICLE and "vehicle_id" not in fields:
                fields["vehicle_id"] = None
            vehicle_id = fields.get("vehicle_id", event.vehicle_id)
            self._validate_transport(transport_type, vehicle_id)

        self.db.update_event(event_id, **fields)
        logger.debug("Updated event %s: %s", event_id, ", ".join(sorted(fields)))
        self._recalculate_after_change(event_id)
        return self.db.find_event_with_associations(event_id)

    def delete_event(self, event_id: int) -> None:
        """Soft-delete an event.

        Raises:
            NotFoundError: If the event doesn't exist
        """
        if self.db.get_event(event_id) is None:
            raise NotFoundError(event_not_found(event_id))
        self.db.deactivate_event(event_id)
        logger.debug("Deactivated event %s", event_id)

    # Items
    def attach_item(self, event_id: int, catalog_item_id: int, quantity: int) -> EventItem:
        """Attach a catalog item, freezing its current price and cost.

        Inactive catalog items can still be attached. The same catalog item
        cannot be attached twice to one event.

        Args:
            event_id: Event ID
            catalog_item_id: Catalog item ID
            quantity: Positive quantity

        Returns:
            The created event item

        Raises:
            ValidationError: If quantity is not a positive integer
            NotFoundError: If the event or catalog item doesn't exist
            ConflictError: If the catalog item is already on the event
        """
        _require_positive_int("Quantity", quantity)

        with self.db.transaction():
            event = self._require_event(event_id)
            if any(item.catalog_item_id == catalog_item_id for item in event.items):
                raise ConflictError(item_already_attached(catalog_item_id, event_id))

            catalog_item = self.db.get_catalog_item(catalog_item_id, include_inactive=True)
            if catalog_item is None:
                raise NotFoundError(catalog_item_not_found(catalog_item_id))

            item_id = self.db.add_event_item(
                event_id=event_id,
                catalog_item_id=catalog_item_id,
                quantity=quantity,
                unit_price_snapshot=catalog_item.price_client,
                unit_cost_snapshot=catalog_item.internal_cost,
            )

        logger.debug(
            "Attached catalog item %s x%s to event %s at %s",
            catalog_item_id,
            quantity,
            event_id,
            catalog_item.price_client,
        )
        self._recalculate_after_change(event_id)
        return self.db.get_event_item(item_id)

    def detach_item(self, event_id: int, item_id: int) -> bool:
        """Remove an item from an event.

        Removing an item that is not on the event is a no-op.

        Returns:
            True if an item was removed

        Raises:
            NotFoundError: If the event doesn't exist
        """
        if self.db.get_event(event_id) is None:
            raise NotFoundError(event_not_found(event_id))
        removed = self.db.delete_event_item(item_id, event_id)
        logger.debug("Detach item %s from event %s: removed=%s", item_id, event_id, removed)
        self._recalculate_after_change(event_id)
        return removed

    # Team
    def attach_team_member(self, event_id: int, employee_id: int) -> EventTeamMember:
        """Add an employee to the event team, freezing payment and transport cost.

        Args:
            event_id: Event ID
            employee_id: Employee ID

        Returns:
            The created team membership

        Raises:
            NotFoundError: If the event or employee doesn't exist
            ConflictError: If the employee is already on the team
        """
        with self.db.transaction():
            event = self._require_event(event_id)
            if any(member.employee_id == employee_id for member in event.team):
                raise ConflictError(employee_already_attached(employee_id, event_id))

            employee = self.db.get_employee(employee_id, include_inactive=True)
            if employee is None:
                raise NotFoundError(employee_not_found(employee_id))

            team_id = self.db.add_event_team_member(
                event_id=event_id,
                employee_id=employee_id,
                payment_snapshot=employee.base_payment,
                transport_cost_snapshot=employee.individual_transport_cost,
            )

        logger.debug("Attached employee %s to event %s", employee_id, event_id)
        self._recalculate_after_change(event_id)
        return self.db.get_event_team_member(team_id)

    def detach_team_member(self, event_id: int, team_id: int) -> bool:
        """Remove a team membership from an event.

        Removing a membership that is not on the event is a no-op.

        Returns:
            True if a membership was removed

        Raises:
            NotFoundError: If the event doesn't exist
        """
        if self.db.get_event(event_id) is None:
            raise NotFoundError(event_not_found(event_id))
        removed = self.db.delete_event_team_member(team_id, event_id)
        logger.debug("Detach team member %s from event %s: removed=%s", team_id, event_id, removed)
        self._recalculate_after_change(event_id)
        return removed

    # Financials
    def recalculate(self, event_id: int) -> EventFinancials:
        """Recompute and persist the event's derived financial fields.

        The event row is locked for the duration, so concurrent
        recalculations of one event run one after the other and the last one
        sees every committed item and team member.

        Args:
            event_id: Event ID

        Returns:
            The persisted (rounded) financials

        Raises:
            NotFoundError: If the event doesn't exist
            InternalError: If the database fails
        """
        with self.db.transaction():
            event = self._require_event(event_id)
            financials = calculate_event_financials(event).rounded()
            self.db.update_event_financials(event_id, financials)

        logger.debug(
            "Recalculated event %s: revenue=%s net=%s margin=%s",
            event_id,
            financials.total_revenue,
            financials.net_profit,
            financials.profit_margin,
        )
        return financials

    def _recalculate_after_change(self, event_id: int) -> Optional[EventFinancials]:
        """Recalculate after a mutation, logging instead of raising on failure."""
        try:
            return self.recalculate(event_id)
        except DomainError:
            logger.exception("Recalculation failed for event %s", event_id)
            return None

    def _require_event(self, event_id: int) -> Event:
        """Load an event with associations and a row lock, or raise NotFoundError."""
        event = self.db.find_event_with_associations(event_id, for_update=True)
        if event is None:
            raise NotFoundError(event_not_found(event_id))
        return event

    def _validate_transport(self, transport_type: TransportType, vehicle_id: Optional[int]) -> None:
        if transport_type == TransportType.FLEET_VEHICLE:
            if vehicle_id is None:
                raise ValidationError("Fleet transport requires a vehicle")
            if self.db.get_vehicle(vehicle_id) is None:
                raise NotFoundError(vehicle_not_found(vehicle_id))
        elif vehicle_id is not None:
            raise ValidationError(
                f"A vehicle can only be set for {TransportType.FLEET_VEHICLE.value} transport"
            )

    @staticmethod
    def _validate_numbers(**values: Any) -> None:
        labels = {
            "distance_km": "Distance",
            "guest_adults": "Adult guest count",
            "guest_kids": "Child guest count",
            "extra_expenses": "Extra expenses",
        }
        for name, value in values.items():
            _require_non_negative(labels[name], value)
