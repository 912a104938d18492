"""Utility functions for fundtrack."""

from fundtrack.utils.date_parser import parse_date
from fundtrack.utils.amount_parser import parse_amount
from fundtrack.utils.currency import format_currency

__all__ = ["parse_date", "parse_amount", "format_currency"]
