"""Tests for the Database interface returning domain models."""

import pytest
from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from eventledger.domain import entities
from eventledger.domain.errors import InternalError, NotFoundError, ValidationError


@pytest.fixture
def event_id(temp_db):
    return temp_db.create_event(
        client_name="Maria Silva",
        address="1 Flower Street",
        event_date=datetime(2024, 6, 1, 15, 0),
        distance_km=Decimal("25.00"),
        transport_type=entities.TransportType.NO_TRANSPORT,
    )


class TestDatabaseInterface:
    """Tests to verify the Database interface returns domain models."""

    def test_get_event_returns_domain_model(self, temp_db, event_id):
        event = temp_db.get_event(event_id)

        assert isinstance(event, entities.Event)
        assert event.transport_type == entities.TransportType.NO_TRANSPORT
        assert event.status == entities.EventStatus.PENDING
        assert event.financial_status == entities.FinancialStatus.UNPAID
        assert event.financials == entities.EventFinancials()
        assert isinstance(event.created_at, datetime)
        assert event.active is True

    def test_find_event_with_associations(self, temp_db, event_id):
        item_id = temp_db.create_catalog_item(
            name="Magic Show",
            type=entities.CatalogItemType.SERVICE,
            price_client=Decimal("500.00"),
            internal_cost=Decimal("100.00"),
        )
        temp_db.add_event_item(
            event_id=event_id,
            catalog_item_id=item_id,
            quantity=2,
            unit_price_snapshot=Decimal("500.00"),
            unit_cost_snapshot=Decimal("100.00"),
        )

        event = temp_db.find_event_with_associations(event_id, for_update=True)

        assert len(event.items) == 1
        assert isinstance(event.items[0], entities.EventItem)
        assert event.items[0].quantity == 2
        assert event.team == ()

    def test_update_event_financials_rounds(self, temp_db, event_id):
        temp_db.update_event_financials(
            event_id,
            entities.EventFinancials(
                total_revenue=Decimal("500"),
                net_profit=Decimal("370.147058824"),
                profit_margin=Decimal("74.0294117648"),
            ),
        )

        event = temp_db.get_event(event_id)
        assert event.financials.net_profit == Decimal("370.15")
        assert event.financials.profit_margin == Decimal("74.03")

    def test_update_event_rejects_derived_fields(self, temp_db, event_id):
        with pytest.raises(ValidationError):
            temp_db.update_event(event_id, net_profit=Decimal("1"))

    def test_update_missing_event(self, temp_db):
        with pytest.raises(NotFoundError):
            temp_db.update_event(999, notes="x")

    def test_list_events_date_bounds_are_inclusive(self, temp_db, event_id):
        assert len(temp_db.list_events(start_date=date(2024, 6, 1), end_date=date(2024, 6, 1))) == 1
        assert temp_db.list_events(start_date=date(2024, 6, 2)) == []
        assert temp_db.list_events(end_date=date(2024, 5, 31)) == []

    def test_delete_event_item_is_scoped_to_event(self, temp_db, event_id):
        item_id = temp_db.create_catalog_item(
            name="Balloons",
            type=entities.CatalogItemType.PRODUCT,
            price_client=Decimal("5"),
            internal_cost=Decimal("1"),
        )
        event_item_id = temp_db.add_event_item(
            event_id=event_id,
            catalog_item_id=item_id,
            quantity=1,
            unit_price_snapshot=Decimal("5"),
            unit_cost_snapshot=Decimal("1"),
        )

        assert temp_db.delete_event_item(event_item_id, event_id + 1) is False
        assert temp_db.delete_event_item(event_item_id, event_id) is True
        assert temp_db.delete_event_item(event_item_id, event_id) is False
        assert temp_db.get_event_item(event_item_id) is None

    def test_inactive_rows_need_include_inactive(self, temp_db):
        employee_id = temp_db.create_employee(
            name="John",
            role="Driver",
            base_payment=Decimal("150"),
            individual_transport_cost=Decimal("30"),
        )
        temp_db.deactivate_employee(employee_id)

        assert temp_db.get_employee(employee_id) is None
        employee = temp_db.get_employee(employee_id, include_inactive=True)
        assert isinstance(employee, entities.Employee)
        assert employee.active is False


class TestTransactions:
    """Tests for Database.transaction."""

    def test_outer_transaction_rolls_back_nested_writes(self, temp_db):
        with pytest.raises(RuntimeError):
            with temp_db.transaction():
                temp_db.create_category("Sweets")
                raise RuntimeError("boom")

        assert temp_db.get_category_by_name("Sweets") is None

    def test_nested_transactions_commit_once(self, temp_db):
        with temp_db.transaction():
            first = temp_db.create_category("Sweets")
            second = temp_db.create_category("Toys")

        assert temp_db.get_category(first).name == "Sweets"
        assert temp_db.get_category(second).name == "Toys"

    def test_database_errors_become_internal_errors(self, temp_db):
        def failing():
            raise OperationalError("UPDATE events", {}, Exception("database is locked"))

        with pytest.raises(InternalError, match="Database error"):
            with temp_db.transaction():
                failing()

    def test_duplicate_category_violates_unique_constraint(self, temp_db):
        temp_db.create_category("Sweets")

        with pytest.raises(InternalError):
            temp_db.create_category("Sweets")

        # The session is usable again after the rollback
        assert temp_db.create_category("Toys") > 0

    def test_failed_reads_become_internal_errors(self, temp_db, event_id):
        session = temp_db._get_session()
        session.execute(text("DROP TABLE event_team"))
        session.commit()

        with pytest.raises(InternalError, match="Database error"):
            temp_db.get_event_team_member(1)
        with pytest.raises(InternalError, match="Database error"):
            temp_db.find_event_with_associations(event_id)

        # The session is usable again after the failed reads
        assert temp_db.get_event(event_id).client_name == "Maria Silva"
