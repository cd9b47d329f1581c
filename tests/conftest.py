"""Shared pytest fixtures for eventledger tests."""

import tempfile
import os
from decimal import Decimal
import pytest

from eventledger.database.factories import create_sqlite_database
from eventledger.domain.catalog import CatalogService
from eventledger.domain.customer import CustomerService
from eventledger.domain.employee import EmployeeService
from eventledger.domain.entities import CatalogItemType
from eventledger.domain.event import EventService
from eventledger.domain.stats import StatsService
from eventledger.domain.vehicle import VehicleService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def catalog_service(temp_db):
    """Create a CatalogService with a temporary database."""
    return CatalogService(temp_db)


@pytest.fixture
def employee_service(temp_db):
    """Create an EmployeeService with a temporary database."""
    return EmployeeService(temp_db)


@pytest.fixture
def vehicle_service(temp_db):
    """Create a VehicleService with a temporary database."""
    return VehicleService(temp_db)


@pytest.fixture
def customer_service(temp_db):
    """Create a CustomerService with a temporary database."""
    return CustomerService(temp_db)


@pytest.fixture
def event_service(temp_db):
    """Create an EventService with a temporary database."""
    return EventService(temp_db)


@pytest.fixture
def stats_service(temp_db):
    """Create a StatsService with a temporary database."""
    return StatsService(temp_db)


@pytest.fixture
def sample_vehicle(vehicle_service):
    """Van doing 8.5 km/l on fuel at 5.90, with 0.50/km maintenance."""
    vehicle_id = vehicle_service.create_vehicle(
        name="Van Sprinter",
        license_plate="ABC-1234",
        km_per_liter=Decimal("8.5"),
        avg_fuel_price=Decimal("5.90"),
        maintenance_cost_per_km=Decimal("0.50"),
    )
    return vehicle_service.get_vehicle(vehicle_id)


@pytest.fixture
def sample_item(catalog_service):
    """Service priced 500.00 with an internal cost of 100.00."""
    category_id = catalog_service.create_category("Entertainment")
    item_id = catalog_service.create_item(
        name="Magic Show",
        type=CatalogItemType.SERVICE,
        price_client=Decimal("500.00"),
        internal_cost=Decimal("100.00"),
        category_id=category_id,
        stock_quantity=1,
    )
    return catalog_service.get_item(item_id)


@pytest.fixture
def sample_employee(employee_service):
    """Driver paid 150.00 per event, 30.00 when travelling alone."""
    employee_id = employee_service.create_employee(
        name="John Driver",
        role="Driver",
        base_payment=Decimal("150.00"),
        individual_transport_cost=Decimal("30.00"),
    )
    return employee_service.get_employee(employee_id)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
