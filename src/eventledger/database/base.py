"""Abstract database interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional

# Import entities directly to avoid circular import through domain/__init__.py
from eventledger.domain.entities import (
    CatalogItem,
    CatalogItemType,
    Category,
    Customer,
    Employee,
    Event,
    EventFinancials,
    EventItem,
    EventStatus,
    EventTeamMember,
    FinancialStatus,
    TransportType,
    Vehicle,
)


class Database(ABC):
    """Abstract database interface for eventledger.

    Reads exclude soft-deleted (inactive) rows unless ``include_inactive`` is
    passed. Every write is atomic on its own; ``transaction()`` groups several
    writes into one unit of work.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def transaction(self) -> AbstractContextManager[None]:
        """Return a context manager that commits on success and rolls back on error.

        Persistence failures inside it surface as InternalError.
        """
        pass

    # Category operations
    @abstractmethod
    def create_category(self, name: str) -> int:
        """Create a category. Returns category ID."""
        pass

    @abstractmethod
    def get_category(self, category_id: int, include_inactive: bool = False) -> Optional[Category]:
        """Get category by ID."""
        pass

    @abstractmethod
    def get_category_by_name(self, name: str) -> Optional[Category]:
        """Get category by name, active or not."""
        pass

    @abstractmethod
    def list_categories(self) -> list[Category]:
        """List active categories ordered by name."""
        pass

    @abstractmethod
    def update_category(self, category_id: int, name: str) -> None:
        """Rename a category."""
        pass

    @abstractmethod
    def deactivate_category(self, category_id: int) -> None:
        """Soft-delete a category."""
        pass

    # Catalog item operations
    @abstractmethod
    def create_catalog_item(
        self,
        name: str,
        type: CatalogItemType,
        price_client: Decimal,
        internal_cost: Decimal,
        category_id: Optional[int] = None,
        description: Optional[str] = None,
        stock_quantity: int = 0,
    ) -> int:
        """Create a catalog item. Returns item ID."""
        pass

    @abstractmethod
    def get_catalog_item(self, item_id: int, include_inactive: bool = False) -> Optional[CatalogItem]:
        """Get catalog item by ID."""
        pass

    @abstractmethod
    def list_catalog_items(self, category_id: Optional[int] = None) -> list[CatalogItem]:
        """List active catalog items, optionally filtered by category."""
        pass

    @abstractmethod
    def update_catalog_item(self, item_id: int, **fields: Any) -> None:
        """Update the given catalog item columns."""
        pass

    @abstractmethod
    def deactivate_catalog_item(self, item_id: int) -> None:
        """Soft-delete a catalog item."""
        pass

    # Employee operations
    @abstractmethod
    def create_employee(
        self,
        name: str,
        role: str,
        base_payment: Decimal,
        individual_transport_cost: Decimal,
        phone: Optional[str] = None,
    ) -> int:
        """Create an employee. Returns employee ID."""
        pass

    @abstractmethod
    def get_employee(self, employee_id: int, include_inactive: bool = False) -> Optional[Employee]:
        """Get employee by ID."""
        pass

    @abstractmethod
    def list_employees(self) -> list[Employee]:
        """List active employees ordered by name."""
        pass

    @abstractmethod
    def update_employee(self, employee_id: int, **fields: Any) -> None:
        """Update the given employee columns."""
        pass

    @abstractmethod
    def deactivate_employee(self, employee_id: int) -> None:
        """Soft-delete an employee."""
        pass

    # Vehicle operations
    @abstractmethod
    def create_vehicle(
        self,
        name: str,
        license_plate: str,
        km_per_liter: Decimal,
        avg_fuel_price: Decimal,
        maintenance_cost_per_km: Decimal,
    ) -> int:
        """Create a vehicle. Returns vehicle ID."""
        pass

    @abstractmethod
    def get_vehicle(self, vehicle_id: int, include_inactive: bool = False) -> Optional[Vehicle]:
        """Get vehicle by ID."""
        pass

    @abstractmethod
    def list_vehicles(self) -> list[Vehicle]:
        """List active vehicles ordered by name."""
        pass

    @abstractmethod
    def update_vehicle(self, vehicle_id: int, **fields: Any) -> None:
        """Update the given vehicle columns."""
        pass

    @abstractmethod
    def deactivate_vehicle(self, vehicle_id: int) -> None:
        """Soft-delete a vehicle."""
        pass

    # Customer operations
    @abstractmethod
    def create_customer(
        self,
        name: str,
        phone: Optional[str] = None,
        email: Optional[str] = None,
        address: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> int:
        """Create a customer. Returns customer ID."""
        pass

    @abstractmethod
    def get_customer(self, customer_id: int, include_inactive: bool = False) -> Optional[Customer]:
        """Get customer by ID."""
        pass

    @abstractmethod
    def list_customers(self, search: Optional[str] = None) -> list[Customer]:
        """List active customers, optionally matching ``search`` in name or phone."""
        pass

    @abstractmethod
    def update_customer(self, customer_id: int, **fields: Any) -> None:
        """Update the given customer columns."""
        pass

    @abstractmethod
    def deactivate_customer(self, customer_id: int) -> None:
        """Soft-delete a customer."""
        pass

    # Event operations
    @abstractmethod
    def create_event(
        self,
        client_name: str,
        address: str,
        event_date: datetime,
        distance_km: Decimal,
        transport_type: TransportType,
        vehicle_id: Optional[int] = None,
        client_phone: Optional[str] = None,
        client_email: Optional[str] = None,
        client_address: Optional[str] = None,
        guest_adults: int = 0,
        guest_kids: int = 0,
        status: EventStatus = EventStatus.PENDING,
        financial_status: FinancialStatus = FinancialStatus.UNPAID,
        notes: Optional[str] = None,
        extra_expenses: Decimal = Decimal("0"),
        customer_id: Optional[int] = None,
    ) -> int:
        """Create an event with zeroed financials. Returns event ID."""
        pass

    @abstractmethod
    def get_event(self, event_id: int) -> Optional[Event]:
        """Get an active event by ID without its associations."""
        pass

    @abstractmethod
    def find_event_with_associations(self, event_id: int, for_update: bool = False) -> Optional[Event]:
        """Get an active event with items, team and vehicle loaded.

        Args:
            event_id: Event ID
            for_update: Lock the event row until the surrounding transaction ends
        """
        pass

    @abstractmethod
    def list_events(
        self,
        status: Optional[EventStatus] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        customer_id: Optional[int] = None,
    ) -> list[Event]:
        """List active events, newest event date first.

        Args:
            status: Optional status filter
            start_date: Optional inclusive lower bound on event date
            end_date: Optional inclusive upper bound on event date
            customer_id: Optional customer filter
        """
        pass

    @abstractmethod
    def update_event(self, event_id: int, **fields: Any) -> None:
        """Update the given event columns (not the derived financials)."""
        pass

    @abstractmethod
    def deactivate_event(self, event_id: int) -> None:
        """Soft-delete an event."""
        pass

    @abstractmethod
    def update_event_financials(self, event_id: int, financials: EventFinancials) -> None:
        """Persist the six derived financial fields, rounded to two places."""
        pass

    # Event association operations
    @abstractmethod
    def add_event_item(
        self,
        event_id: int,
        catalog_item_id: int,
        quantity: int,
        unit_price_snapshot: Decimal,
        unit_cost_snapshot: Decimal,
    ) -> int:
        """Attach a catalog item to an event. Returns association ID."""
        pass

    @abstractmethod
    def get_event_item(self, item_id: int) -> Optional[EventItem]:
        """Get an event item association by ID."""
        pass

    @abstractmethod
    def delete_event_item(self, item_id: int, event_id: int) -> bool:
        """Delete an event item scoped to its event. Returns True if a row was removed."""
        pass

    @abstractmethod
    def add_event_team_member(
        self,
        event_id: int,
        employee_id: int,
        payment_snapshot: Decimal,
        transport_cost_snapshot: Decimal,
    ) -> int:
        """Attach an employee to an event. Returns association ID."""
        pass

    @abstractmethod
    def get_event_team_member(self, team_id: int) -> Optional[EventTeamMember]:
        """Get an event team association by ID."""
        pass

    @abstractmethod
    def delete_event_team_member(self, team_id: int, event_id: int) -> bool:
        """Delete an event team member scoped to its event. Returns True if a row was removed."""
        pass
