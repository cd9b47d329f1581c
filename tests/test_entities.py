"""Tests for domain entities."""

import pytest
from dataclasses import FrozenInstanceError
from decimal import Decimal

from eventledger.domain.entities import (
    EventFinancials,
    TransportType,
    Vehicle,
    quantize_money,
    to_money,
)
from eventledger.domain.errors import ValidationError


class TestQuantizeMoney:
    """Tests for money rounding."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("29.852941", "29.85"),
            ("74.029411", "74.03"),
            ("0.125", "0.13"),
            ("-0.125", "-0.13"),
            ("10", "10.00"),
        ],
    )
    def test_half_up(self, value, expected):
        assert str(quantize_money(Decimal(value))) == expected


class TestToMoney:
    """Tests for coercing caller input to money."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("25.00", Decimal("25.00")),
            (" 25.005 ", Decimal("25.01")),
            (10, Decimal("10.00")),
            (Decimal("0.125"), Decimal("0.13")),
        ],
    )
    def test_coerces(self, value, expected):
        assert to_money(value, "Amount") == expected

    @pytest.mark.parametrize("value", ["abc", "", None, True, "NaN", "Infinity"])
    def test_rejects_non_numbers(self, value):
        with pytest.raises(ValidationError, match="Amount must be a number"):
            to_money(value, "Amount")


class TestEventFinancials:
    """Tests for EventFinancials."""

    def test_defaults_are_zero(self):
        financials = EventFinancials()

        assert financials.total_revenue == Decimal("0")
        assert financials.total_cost == Decimal("0")

    def test_total_cost_includes_everything_subtracted(self):
        financials = EventFinancials(total_revenue=Decimal("500"), net_profit=Decimal("370.15"))

        assert financials.total_cost == Decimal("129.85")

    def test_rounded_and_strings(self):
        financials = EventFinancials(
            total_revenue=Decimal("500"),
            total_cost_transport=Decimal("29.852941176"),
            net_profit=Decimal("370.147058824"),
            profit_margin=Decimal("74.0294117648"),
        )

        assert financials.rounded().net_profit == Decimal("370.15")
        assert financials.as_strings() == {
            "total_revenue": "500.00",
            "total_cost_items": "0.00",
            "total_cost_labor": "0.00",
            "total_cost_transport": "29.85",
            "net_profit": "370.15",
            "profit_margin": "74.03",
        }

    def test_immutability(self):
        financials = EventFinancials()

        with pytest.raises(FrozenInstanceError):
            financials.net_profit = Decimal("1")


def test_enums_compare_to_strings():
    assert TransportType("FLEET_VEHICLE") is TransportType.FLEET_VEHICLE
    assert TransportType.FLEET_VEHICLE == "FLEET_VEHICLE"


def test_vehicle_defaults_active():
    vehicle = Vehicle(
        id=1,
        name="Van",
        license_plate="ABC",
        km_per_liter=Decimal("8.5"),
        avg_fuel_price=Decimal("5.9"),
        maintenance_cost_per_km=Decimal("0.5"),
    )

    assert vehicle.active is True
