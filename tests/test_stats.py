"""Tests for dashboard statistics."""

from datetime import date, datetime, time
from decimal import Decimal

import pytest

from eventledger.domain.entities import (
    Event,
    EventFinancials,
    EventStatus,
    FinancialStatus,
    Stats,
    TransportType,
)
from eventledger.domain.stats import compute_stats, monthly_series
from eventledger.utils.date_parser import get_date_range


def _event(event_id, revenue, profit, status=EventStatus.CONFIRMED, when=datetime(2024, 6, 1)):
    return Event(
        id=event_id,
        client_name="Client",
        client_phone=None,
        client_email=None,
        client_address=None,
        address="Venue",
        event_date=when,
        distance_km=Decimal("0"),
        guest_adults=0,
        guest_kids=0,
        transport_type=TransportType.NO_TRANSPORT,
        vehicle_id=None,
        status=status,
        financial_status=FinancialStatus.UNPAID,
        notes=None,
        extra_expenses=Decimal("0"),
        customer_id=None,
        financials=EventFinancials(total_revenue=Decimal(revenue), net_profit=Decimal(profit)),
        created_at=datetime(2024, 1, 1),
    )


class TestComputeStats:
    """Tests for compute_stats."""

    def test_rollup(self):
        events = [
            _event(1, "500.00", "370.15", EventStatus.PENDING),
            _event(2, "300.00", "-50.00"),
            _event(3, "0.00", "0.00", EventStatus.PENDING),
        ]

        stats = compute_stats(events)

        assert stats == Stats(
            monthly_revenue=Decimal("800.00"),
            monthly_profit=Decimal("320.15"),
            avg_margin=Decimal("40.02"),
            pending_events=2,
        )

    def test_margin_is_aggregate_not_average_of_margins(self):
        """Small events do not pull the margin as much as their own margin would suggest."""
        events = [_event(1, "1000.00", "500.00"), _event(2, "10.00", "-10.00")]

        stats = compute_stats(events)

        # 490 / 1010, not (50% + -100%) / 2
        assert stats.avg_margin == Decimal("48.51")

    def test_empty(self):
        stats = compute_stats([])

        assert stats.monthly_revenue == Decimal("0")
        assert stats.monthly_profit == Decimal("0")
        assert stats.avg_margin == Decimal("0")
        assert stats.pending_events == 0

    def test_accepts_generator(self):
        stats = compute_stats(_event(i, "10.00", "5.00") for i in range(3))

        assert stats.monthly_revenue == Decimal("30.00")


class TestMonthlySeries:
    """Tests for monthly_series."""

    def test_buckets_by_month_oldest_first(self):
        events = [
            _event(1, "500.00", "370.15", when=datetime(2024, 7, 3)),
            _event(2, "200.00", "50.00", when=datetime(2024, 6, 30, 23, 59)),
            _event(3, "100.00", "-20.00", when=datetime(2024, 7, 20)),
        ]

        series = monthly_series(events)

        assert [row.month for row in series] == ["2024-06", "2024-07"]
        assert series[0].revenue == Decimal("200.00")
        assert series[0].costs == Decimal("150.00")
        assert series[0].event_count == 1
        assert series[1].revenue == Decimal("600.00")
        assert series[1].costs == Decimal("249.85")
        assert series[1].event_count == 2


class TestStatsService:
    """Tests for StatsService against the database."""

    @pytest.fixture
    def booked(self, event_service, sample_item):
        june = event_service.create_event(
            client_name="June", address="A", event_date=datetime(2024, 6, 10, 14, 0)
        )
        event_service.attach_item(june, sample_item.id, 1)
        july = event_service.create_event(
            client_name="July",
            address="B",
            event_date=datetime(2024, 7, 5, 14, 0),
            status=EventStatus.CONFIRMED,
        )
        event_service.attach_item(july, sample_item.id, 2)
        return june, july

    def test_all_events(self, stats_service, booked):
        stats = stats_service.get_stats()

        assert stats.monthly_revenue == Decimal("1500.00")
        assert stats.monthly_profit == Decimal("1200.00")
        assert stats.avg_margin == Decimal("80.00")
        assert stats.pending_events == 1

    def test_date_range(self, stats_service, booked):
        stats = stats_service.get_stats(start_date=date(2024, 7, 1), end_date=date(2024, 7, 31))

        assert stats.monthly_revenue == Decimal("1000.00")
        assert stats.pending_events == 0

    def test_status_filter(self, stats_service, booked):
        stats = stats_service.get_stats(status=EventStatus.PENDING)

        assert stats.monthly_revenue == Decimal("500.00")
        assert stats.pending_events == 1

    def test_deleted_events_are_excluded(self, stats_service, event_service, booked):
        event_service.delete_event(booked[1])

        assert stats_service.get_stats().monthly_revenue == Decimal("500.00")

    def test_monthly_series(self, stats_service, booked):
        series = stats_service.get_monthly_series()

        assert [(row.month, row.revenue, row.costs) for row in series] == [
            ("2024-06", Decimal("500.00"), Decimal("100.00")),
            ("2024-07", Decimal("1000.00"), Decimal("200.00")),
        ]

    def test_this_month_includes_bookings_later_in_the_month(
        self, stats_service, event_service, sample_item
    ):
        month_start, month_end = get_date_range("this-month")
        event_id = event_service.create_event(
            client_name="Month end",
            address="C",
            event_date=datetime.combine(month_end, time(20, 0)),
        )
        event_service.attach_item(event_id, sample_item.id, 1)

        stats = stats_service.get_stats(start_date=month_start, end_date=month_end)

        assert stats.monthly_revenue == Decimal("500.00")
        assert stats.pending_events == 1
