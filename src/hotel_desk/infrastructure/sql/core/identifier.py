"""
SQL identifier handling utilities.

Provides functions for quoting SQL identifiers (table names, column names,
aliases). Plain identifiers are emitted bare so that PostgreSQL's case
folding matches the unquoted names the schema was created with; anything
else is double-quoted and escaped so it can never break out of the
identifier position.
"""

import re
from typing import Optional

SIMPLE_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def is_simple_identifier(name: str) -> bool:
    """Return True when ``name`` can be emitted without quoting."""
    return bool(SIMPLE_IDENTIFIER.fullmatch(name))


def quote_identifier(name: str) -> str:
    """
    Quote a SQL identifier (table or column name) when needed.

    Args:
        name: The identifier to quote

    Returns:
        The identifier, bare if simple, otherwise double-quoted with escaping

    Raises:
        ValueError: If name is empty

    Examples:
        >>> quote_identifier("customerID")
        'customerID'
        >>> quote_identifier("room type")
        '"room type"'
    """
    if not name or not isinstance(name, str):
        raise ValueError("Identifier name must be non-empty string")

    if is_simple_identifier(name):
        return name

    # Escape internal double quotes by doubling them
    escaped = name.replace('"', '""')
    return f'"{escaped}"'


def qualify_column(column: str, alias: Optional[str] = None) -> str:
    """
    Create a column reference, prefixed with a table alias when given.

    Examples:
        >>> qualify_column("hotelID", alias="r")
        'r.hotelID'
    """
    quoted_column = quote_identifier(column)
    if alias:
        return f"{quote_identifier(alias)}.{quoted_column}"
    return quoted_column
