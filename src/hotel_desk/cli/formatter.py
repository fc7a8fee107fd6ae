"""Result and error message formatting for CLI output."""

from typing import Any, List

from hotel_desk.domain.front_desk.models import RecordNotFound
from hotel_desk.infrastructure.sql.exceptions import ClauseParameterMismatch
from hotel_desk.infrastructure.validation.types import (
    FieldValidationError,
    SpecMismatch,
)
from hotel_desk.io.connectors.exceptions import DatabaseExecutionFailed
from hotel_desk.io.repositories.statement_executor import ExecutionResult

NULL_TEXT = "null"
SEPARATOR = "\t"


def format_cell(value: Any) -> str:
    """Render one value the way the report output shows it."""
    if value is None:
        return NULL_TEXT
    return str(value)


def format_rows(result: ExecutionResult) -> List[str]:
    """
    Render query results as tab-separated lines.

    The header line is only emitted when at least one row was returned; the
    last line always reports the row count.

    Example:
        >>> format_rows(ExecutionResult(("roomNo",), [(101,), (102,)], 2))
        ['roomNo', '101', '102', 'total row(s): 2']
    """
    lines: List[str] = []
    if result.rows:
        lines.append(SEPARATOR.join(result.columns))
        lines.extend(
            SEPARATOR.join(format_cell(value) for value in row) for row in result.rows
        )
    lines.append(f"total row(s): {len(result.rows)}")
    return lines


def format_error(error: Exception) -> str:
    """Turn an exception raised by an action into a user-facing message."""
    if isinstance(error, FieldValidationError):
        return str(error)
    if isinstance(error, DatabaseExecutionFailed):
        return f"Database error: {error}"
    if isinstance(error, RecordNotFound):
        return str(error)
    if isinstance(error, (SpecMismatch, ClauseParameterMismatch)):
        return f"Internal error: {error}"
    return f"Unexpected error: {type(error).__name__}: {error}"
