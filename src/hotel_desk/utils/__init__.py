"""Shared utilities for HotelDesk."""

from hotel_desk.utils.date_parser import parse_date
from hotel_desk.utils.logging import bind_context, get_logger, sanitize_for_logging

__all__ = [
    "parse_date",
    "get_logger",
    "bind_context",
    "sanitize_for_logging",
]
