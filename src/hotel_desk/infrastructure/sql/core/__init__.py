"""Core SQL utilities package."""

from .identifier import is_simple_identifier, qualify_column, quote_identifier
from .parameters import (
    PLACEHOLDER,
    build_indexed_params,
    count_placeholders,
    positional_placeholders,
    to_named_binds,
)

__all__ = [
    "is_simple_identifier",
    "quote_identifier",
    "qualify_column",
    "PLACEHOLDER",
    "build_indexed_params",
    "count_placeholders",
    "positional_placeholders",
    "to_named_binds",
]
