"""
SQL module for parameterized statement generation.

This module builds INSERT and SELECT statements whose text only holds
identifiers, developer-authored fragments and ``?`` markers; every value is
returned separately as a bound parameter.
"""

from .builder import build, check_alignment
from .core.identifier import qualify_column, quote_identifier
from .core.parameters import build_indexed_params, count_placeholders, to_named_binds
from .dialects.postgresql import PostgreSQLDialect
from .exceptions import ClauseParameterMismatch
from .operations.insert import InsertBuilder
from .operations.select import SelectBuilder
from .statement import BuiltStatement, ExtraClauses, StatementMode

__all__ = [
    "build",
    "check_alignment",
    "quote_identifier",
    "qualify_column",
    "build_indexed_params",
    "count_placeholders",
    "to_named_binds",
    "PostgreSQLDialect",
    "ClauseParameterMismatch",
    "InsertBuilder",
    "SelectBuilder",
    "BuiltStatement",
    "ExtraClauses",
    "StatementMode",
]
