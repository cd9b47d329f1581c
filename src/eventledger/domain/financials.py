"""Event financial recalculation engine.

Everything here is pure: the functions take snapshot values and return
``EventFinancials`` without touching the database. Values are kept at full
decimal precision and only rounded when persisted (``EventFinancials.rounded``).
"""

import logging
from decimal import Decimal
from typing import Iterable, Optional

from eventledger.domain.entities import (
    ZERO,
    Event,
    EventFinancials,
    EventItem,
    EventTeamMember,
    TransportType,
    Vehicle,
)

logger = logging.getLogger(__name__)

HUNDRED = Decimal("100")


def items_revenue(items: Iterable[EventItem]) -> Decimal:
    """Sum of unit price snapshot times quantity."""
    return sum((item.unit_price_snapshot * item.quantity for item in items), ZERO)


def items_cost(items: Iterable[EventItem]) -> Decimal:
    """Sum of unit cost snapshot times quantity."""
    return sum((item.unit_cost_snapshot * item.quantity for item in items), ZERO)


def labor_cost(team: Iterable[EventTeamMember]) -> Decimal:
    """Sum of payment snapshots."""
    return sum((member.payment_snapshot for member in team), ZERO)


def fleet_transport_cost(distance_km: Decimal, vehicle: Vehicle) -> Decimal:
    """Fuel plus maintenance cost of driving ``distance_km`` with ``vehicle``.

    The distance is already a round trip and is not doubled here. A vehicle
    without a positive consumption figure contributes maintenance only.
    """
    maintenance_cost = distance_km * vehicle.maintenance_cost_per_km
    if vehicle.km_per_liter <= ZERO:
        logger.warning(
            "Vehicle %s has km_per_liter=%s; fuel cost ignored",
            vehicle.id,
            vehicle.km_per_liter,
        )
        return maintenance_cost
    fuel_cost = distance_km / vehicle.km_per_liter * vehicle.avg_fuel_price
    return fuel_cost + maintenance_cost


def transport_cost(
    transport_type: TransportType,
    distance_km: Decimal,
    team: Iterable[EventTeamMember],
    vehicle: Optional[Vehicle],
) -> Decimal:
    """Transport cost for the given transport mode.

    Individual transport pays each team member's transport snapshot; fleet
    transport reads the vehicle's current parameters. A fleet event whose
    vehicle cannot be resolved costs nothing to move.
    """
    if transport_type == TransportType.INDIVIDUAL_TRANSPORT:
        return sum((member.transport_cost_snapshot for member in team), ZERO)
    if transport_type == TransportType.FLEET_VEHICLE:
        if vehicle is None:
            logger.warning("Fleet transport without a resolvable vehicle; transport cost is 0")
            return ZERO
        return fleet_transport_cost(distance_km, vehicle)
    return ZERO


def profit_margin(net_profit: Decimal, total_revenue: Decimal) -> Decimal:
    """Net profit as a percentage of revenue, 0 when there is no revenue."""
    if total_revenue == ZERO:
        return ZERO
    return net_profit / total_revenue * HUNDRED


def calculate_financials(
    transport_type: TransportType,
    distance_km: Decimal,
    extra_expenses: Decimal,
    items: Iterable[EventItem] = (),
    team: Iterable[EventTeamMember] = (),
    vehicle: Optional[Vehicle] = None,
) -> EventFinancials:
    """Compute the six derived financial fields of an event.

    Args:
        transport_type: Event transport mode
        distance_km: Round-trip distance to the venue
        extra_expenses: User-entered extra expenses, used verbatim
        items: Attached items with their price/cost snapshots
        team: Attached team members with their payment/transport snapshots
        vehicle: Referenced fleet vehicle, read live; only used for fleet transport

    Returns:
        Unrounded EventFinancials; a negative net profit means a loss
    """
    items = tuple(items)
    team = tuple(team)

    total_revenue = items_revenue(items)
    total_cost_items = items_cost(items)
    total_cost_labor = labor_cost(team)
    total_cost_transport = transport_cost(transport_type, distance_km, team, vehicle)

    net_profit = total_revenue - (
        total_cost_items + total_cost_labor + total_cost_transport + extra_expenses
    )

    return EventFinancials(
        total_revenue=total_revenue,
        total_cost_items=total_cost_items,
        total_cost_labor=total_cost_labor,
        total_cost_transport=total_cost_transport,
        net_profit=net_profit,
        profit_margin=profit_margin(net_profit, total_revenue),
    )


def calculate_event_financials(event: Event) -> EventFinancials:
    """Compute financials for an event loaded with its associations."""
    return calculate_financials(
        transport_type=event.transport_type,
        distance_km=event.distance_km,
        extra_expenses=event.extra_expenses,
        items=event.items,
        team=event.team,
        vehicle=event.vehicle,
    )
