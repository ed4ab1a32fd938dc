"""Utility functions for expensebook."""

from expensebook.utils.currency import format_currency, parse_currency
from expensebook.utils.date_parser import parse_date, format_display_date

__all__ = ["format_currency", "parse_currency", "parse_date", "format_display_date"]
