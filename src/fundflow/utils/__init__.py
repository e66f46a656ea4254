"""Utility functions for fundflow."""

from fundflow.utils.amount_parser import format_currency, parse_amount, parse_percentage

__all__ = ["format_currency", "parse_amount", "parse_percentage"]
