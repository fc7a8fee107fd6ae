"""Command-line front end for HotelDesk."""

from .formatter import format_error, format_rows
from .shell import FrontDeskShell

__all__ = ["FrontDeskShell", "format_error", "format_rows"]
