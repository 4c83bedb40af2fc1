"""Utility functions for costureira."""

from costureira.utils.date_parser import parse_date
from costureira.utils.amount_parser import parse_amount, parse_pieces
from costureira.utils.names import normalize_name

__all__ = ["parse_date", "parse_amount", "parse_pieces", "normalize_name"]
