"""Utility functions for vendorcosts."""

from vendorcosts.utils.date_parser import parse_date
from vendorcosts.utils.amount_parser import parse_amount, parse_assignment
from vendorcosts.utils.vendor_resolver import resolve_vendor

__all__ = ["parse_date", "parse_amount", "parse_assignment", "resolve_vendor"]
