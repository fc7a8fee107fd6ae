"""Configuration management for HotelDesk.

Usage:
    >>> from hotel_desk.config import get_settings
    >>> settings = get_settings()
    >>> settings.get_database_connection_string()
"""

from hotel_desk.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
