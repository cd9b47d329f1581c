"""Tests for amount parsing and formatting."""

import pytest
from decimal import Decimal

from eventledger.utils.amount_parser import format_amount, parse_amount


@pytest.mark.parametrize(
    "text,expected",
    [
        ("123.45", Decimal("123.45")),
        ("R$1,234.56", Decimal("1234.56")),
        ("$8.5", Decimal("8.5")),
        ("-12.30", Decimal("-12.30")),
        ("(99.99)", Decimal("-99.99")),
        ("0.005", Decimal("0.005")),
    ],
)
def test_parse_amount(text, expected):
    assert parse_amount(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "abc", "NaN", "Infinity"])
def test_parse_amount_rejects(text):
    with pytest.raises(ValueError):
        parse_amount(text)


def test_format_amount_rounds_half_up():
    assert format_amount(Decimal("370.147")) == "370.15"
    assert format_amount(Decimal("0.005")) == "0.01"
    assert format_amount(Decimal("-2.5")) == "-2.50"
    assert format_amount(Decimal("0")) == "0.00"
