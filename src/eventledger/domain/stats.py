"""Dashboard statistics over event financials."""

from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from eventledger.database.base import Database
from eventledger.domain.entities import (
    ZERO,
    Event,
    EventStatus,
    MonthlyTotals,
    Stats,
    quantize_money,
)
from eventledger.domain.financials import profit_margin


def compute_stats(events: Iterable[Event]) -> Stats:
    """Roll up revenue, profit, margin and pending count over ``events``.

    Filtering is the caller's job; every event passed in is counted.
    """
    revenue = ZERO
    profit = ZERO
    pending = 0
    for event in events:
        revenue += event.financials.total_revenue
        profit += event.financials.net_profit
        if event.status == EventStatus.PENDING:
            pending += 1

    return Stats(
        monthly_revenue=quantize_money(revenue),
        monthly_profit=quantize_money(profit),
        avg_margin=quantize_money(profit_margin(profit, revenue)),
        pending_events=pending,
    )


def monthly_series(events: Iterable[Event]) -> list[MonthlyTotals]:
    """Bucket revenue and cost by the month of each event's date.

    Returns:
        One MonthlyTotals per month that has events, oldest first
    """
    revenue: dict[str, Decimal] = defaultdict(lambda: ZERO)
    costs: dict[str, Decimal] = defaultdict(lambda: ZERO)
    counts: dict[str, int] = defaultdict(int)

    for event in events:
        key = event.event_date.strftime("%Y-%m")
        revenue[key] += event.financials.total_revenue
        costs[key] += event.financials.total_cost
        counts[key] += 1

    return [
        MonthlyTotals(
            month=key,
            revenue=quantize_money(revenue[key]),
            costs=quantize_money(costs[key]),
            event_count=counts[key],
        )
        for key in sorted(counts)
    ]


class StatsService:
    """Service that selects events and aggregates them for the dashboard."""

    def __init__(self, db: Database):
        """Initialize stats service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_stats(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        status: Optional[EventStatus] = None,
    ) -> Stats:
        """Compute stats over active events matching the filters.

        Args:
            start_date: Optional inclusive lower bound on event date
            end_date: Optional inclusive upper bound on event date
            status: Optional status filter

        Returns:
            Stats rollup
        """
        events = self.db.list_events(status=status, start_date=start_date, end_date=end_date)
        return compute_stats(events)

    def get_monthly_series(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        status: Optional[EventStatus] = None,
    ) -> list[MonthlyTotals]:
        """Revenue/cost per month over active events matching the filters."""
        events = self.db.list_events(status=status, start_date=start_date, end_date=end_date)
        return monthly_series(events)
