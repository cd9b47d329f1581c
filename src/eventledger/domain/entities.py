"""Domain model entities for eventledger.

These are pure data classes representing business concepts, independent of
database schema. Services and the financial engine only ever see these, so
the SQLAlchemy models can change without touching business rules.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from enum import Enum
from typing import Any, Optional

from eventledger.domain.errors import ValidationError

CENT = Decimal("0.01")
ZERO = Decimal("0")


def quantize_money(value: Decimal) -> Decimal:
    """Round a decimal half-up to two places."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def to_money(value: Any, label: str) -> Decimal:
    """Coerce a number or decimal string to a Decimal rounded half-up to cents.

    Raises:
        ValidationError: If the value is not a finite number
    """
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValidationError(f"{label} must be a number, got '{value}'")
    if isinstance(value, bool) or not amount.is_finite():
        raise ValidationError(f"{label} must be a number, got '{value}'")
    return quantize_money(amount)


class TransportType(str, Enum):
    """How the team and equipment get to the venue."""

    NO_TRANSPORT = "NO_TRANSPORT"
    FLEET_VEHICLE = "FLEET_VEHICLE"
    INDIVIDUAL_TRANSPORT = "INDIVIDUAL_TRANSPORT"


class EventStatus(str, Enum):
    """Lifecycle status of an event."""

    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    DONE = "DONE"
    CANCELED = "CANCELED"


class FinancialStatus(str, Enum):
    """Payment status of an event."""

    UNPAID = "UNPAID"
    PARTIAL = "PARTIAL"
    PAID = "PAID"


class CatalogItemType(str, Enum):
    """Kind of catalog entry."""

    PRODUCT = "PRODUCT"
    SERVICE = "SERVICE"


@dataclass(frozen=True)
class Category:
    """Catalog category domain entity."""

    id: int
    name: str
    active: bool = True


@dataclass(frozen=True)
class CatalogItem:
    """Product or service offered to clients."""

    id: int
    category_id: Optional[int]
    name: str
    description: Optional[str]
    type: CatalogItemType
    price_client: Decimal
    internal_cost: Decimal
    stock_quantity: int = 0
    active: bool = True


@dataclass(frozen=True)
class Employee:
    """Staff member domain entity."""

    id: int
    name: str
    phone: Optional[str]
    role: str
    base_payment: Decimal
    individual_transport_cost: Decimal
    active: bool = True


@dataclass(frozen=True)
class Vehicle:
    """Fleet vehicle domain entity."""

    id: int
    name: str
    license_plate: str
    km_per_liter: Decimal
    avg_fuel_price: Decimal
    maintenance_cost_per_km: Decimal
    active: bool = True


@dataclass(frozen=True)
class Customer:
    """Client domain entity."""

    id: int
    name: str
    phone: Optional[str]
    email: Optional[str]
    address: Optional[str]
    notes: Optional[str]
    created_at: datetime
    active: bool = True


@dataclass(frozen=True)
class EventItem:
    """Catalog item attached to an event, with prices frozen at attach time."""

    id: int
    event_id: int
    catalog_item_id: int
    quantity: int
    unit_price_snapshot: Decimal
    unit_cost_snapshot: Decimal


@dataclass(frozen=True)
class EventTeamMember:
    """Employee attached to an event, with costs frozen at attach time."""

    id: int
    event_id: int
    employee_id: int
    payment_snapshot: Decimal
    transport_cost_snapshot: Decimal


@dataclass(frozen=True)
class EventFinancials:
    """The six derived financial fields of an event."""

    total_revenue: Decimal = ZERO
    total_cost_items: Decimal = ZERO
    total_cost_labor: Decimal = ZERO
    total_cost_transport: Decimal = ZERO
    net_profit: Decimal = ZERO
    profit_margin: Decimal = ZERO

    @property
    def total_cost(self) -> Decimal:
        """Revenue minus profit, i.e. every cost including extra expenses."""
        return self.total_revenue - self.net_profit

    def rounded(self) -> "EventFinancials":
        """Return a copy with every field rounded to two decimal places."""
        return EventFinancials(
            total_revenue=quantize_money(self.total_revenue),
            total_cost_items=quantize_money(self.total_cost_items),
            total_cost_labor=quantize_money(self.total_cost_labor),
            total_cost_transport=quantize_money(self.total_cost_transport),
            net_profit=quantize_money(self.net_profit),
            profit_margin=quantize_money(self.profit_margin),
        )

    def as_strings(self) -> dict[str, str]:
        """Return the fields as two-decimal strings keyed by field name."""
        rounded = self.rounded()
        return {
            "total_revenue": str(rounded.total_revenue),
            "total_cost_items": str(rounded.total_cost_items),
            "total_cost_labor": str(rounded.total_cost_labor),
            "total_cost_transport": str(rounded.total_cost_transport),
            "net_profit": str(rounded.net_profit),
            "profit_margin": str(rounded.profit_margin),
        }


@dataclass(frozen=True)
class Event:
    """Booking domain entity.

    ``items``, ``team`` and ``vehicle`` are only populated when the event is
    loaded with its associations.
    """

    id: int
    client_name: str
    client_phone: Optional[str]
    client_email: Optional[str]
    client_address: Optional[str]
    address: str
    event_date: datetime
    distance_km: Decimal
    guest_adults: int
    guest_kids: int
    transport_type: TransportType
    vehicle_id: Optional[int]
    status: EventStatus
    financial_status: FinancialStatus
    notes: Optional[str]
    extra_expenses: Decimal
    customer_id: Optional[int]
    financials: EventFinancials
    created_at: datetime
    active: bool = True
    items: tuple[EventItem, ...] = ()
    team: tuple[EventTeamMember, ...] = ()
    vehicle: Optional[Vehicle] = None


@dataclass(frozen=True)
class Stats:
    """Dashboard rollup over a collection of events."""

    monthly_revenue: Decimal
    monthly_profit: Decimal
    avg_margin: Decimal
    pending_events: int


@dataclass(frozen=True)
class MonthlyTotals:
    """Revenue and cost of the events in one calendar month."""

    month: str
    revenue: Decimal
    costs: Decimal
    event_count: int = 0
