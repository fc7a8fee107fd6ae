"""Database connectors."""

from .database import create_database_engine, open_connection, redact_url
from .exceptions import DatabaseConnectionFailed, DatabaseExecutionFailed

__all__ = [
    "create_database_engine",
    "open_connection",
    "redact_url",
    "DatabaseConnectionFailed",
    "DatabaseExecutionFailed",
]
