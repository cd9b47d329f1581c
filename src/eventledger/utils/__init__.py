"""Utility functions for eventledger."""

from eventledger.utils.date_parser import parse_date, parse_datetime
from eventledger.utils.amount_parser import parse_amount, format_amount

__all__ = ["parse_date", "parse_datetime", "parse_amount", "format_amount"]
