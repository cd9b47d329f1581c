"""SQLAlchemy models for eventledger database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Numeric,
    Boolean,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()

MONEY = Numeric(10, 2)
TOTAL = Numeric(12, 2)


class Category(Base):
    """Catalog category model."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    active = Column(Boolean, default=True, nullable=False)

    # Relationships
    catalog_items = relationship("CatalogItem", back_populates="category")


class CatalogItem(Base):
    """Product or service model."""

    __tablename__ = "catalog_items"

    id = Column(Integer, primary_key=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=True)
    type = Column(String, nullable=False)
    price_client = Column(MONEY, nullable=False)
    internal_cost = Column(MONEY, nullable=False)
    stock_quantity = Column(Integer, default=0, nullable=False)
    active = Column(Boolean, default=True, nullable=False)

    # Relationships
    category = relationship("Category", back_populates="catalog_items")


class Employee(Base):
    """Staff member model."""

    __tablename__ = "employees"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    phone = Column(String, nullable=True)
    role = Column(String, nullable=False)
    base_payment = Column(MONEY, nullable=False)
    individual_transport_cost = Column(MONEY, nullable=False)
    active = Column(Boolean, default=True, nullable=False)


class Vehicle(Base):
    """Fleet vehicle model."""

    __tablename__ = "vehicles"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    license_plate = Column(String, nullable=False)
    km_per_liter = Column(MONEY, nullable=False)
    avg_fuel_price = Column(MONEY, nullable=False)
    maintenance_cost_per_km = Column(MONEY, nullable=False)
    active = Column(Boolean, default=True, nullable=False)


class Customer(Base):
    """Client model."""

    __tablename__ = "customers"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    phone = Column(String, nullable=True)
    email = Column(String, nullable=True)
    address = Column(String, nullable=True)
    notes = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)
    active = Column(Boolean, default=True, nullable=False)

    # Relationships
    events = relationship("Event", back_populates="customer")


class Event(Base):
    """Event (booking) model."""

    __tablename__ = "events"

    id = Column(Integer, primary_key=True)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=True)
    client_name = Column(String, nullable=False)
    client_phone = Column(String, nullable=True)
    client_email = Column(String, nullable=True)
    client_address = Column(String, nullable=True)
    address = Column(String, nullable=False)
    event_date = Column(DateTime, nullable=False)
    distance_km = Column(MONEY, nullable=False)
    guest_adults = Column(Integer, default=0, nullable=False)
    guest_kids = Column(Integer, default=0, nullable=False)
    transport_type = Column(String, nullable=False)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id"), nullable=True)
    status = Column(String, default="PENDING", nullable=False)
    financial_status = Column(String, default="UNPAID", nullable=False)
    notes = Column(String, nullable=True)

    # Financials
    total_revenue = Column(TOTAL, default=0, nullable=False)
    total_cost_items = Column(TOTAL, default=0, nullable=False)
    total_cost_labor = Column(TOTAL, default=0, nullable=False)
    total_cost_transport = Column(TOTAL, default=0, nullable=False)
    extra_expenses = Column(TOTAL, default=0, nullable=False)
    net_profit = Column(TOTAL, default=0, nullable=False)
    profit_margin = Column(Numeric(10, 2), default=0, nullable=False)

    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)
    active = Column(Boolean, default=True, nullable=False)

    # Relationships
    customer = relationship("Customer", back_populates="events")
    vehicle = relationship("Vehicle")
    items = relationship("EventItem", back_populates="event", cascade="all, delete-orphan")
    team = relationship("EventTeamMember", back_populates="event", cascade="all, delete-orphan")


class EventItem(Base):
    """Catalog item attached to an event."""

    __tablename__ = "event_items"

    id = Column(Integer, primary_key=True)
    event_id = Column(Integer, ForeignKey("events.id"), nullable=False)
    catalog_item_id = Column(Integer, ForeignKey("catalog_items.id"), nullable=False)
    quantity = Column(Integer, nullable=False)
    unit_price_snapshot = Column(MONEY, nullable=False)
    unit_cost_snapshot = Column(MONEY, nullable=False)

    # Relationships
    event = relationship("Event", back_populates="items")
    catalog_item = relationship("CatalogItem")


class EventTeamMember(Base):
    """Employee attached to an event."""

    __tablename__ = "event_team"

    id = Column(Integer, primary_key=True)
    event_id = Column(Integer, ForeignKey("events.id"), nullable=False)
    employee_id = Column(Integer, ForeignKey("employees.id"), nullable=False)
    payment_snapshot = Column(MONEY, nullable=False)
    transport_cost_snapshot = Column(MONEY, nullable=False)

    # Relationships
    event = relationship("Event", back_populates="team")
    employee = relationship("Employee")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
