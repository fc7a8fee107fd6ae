"""
Statement value types.

``BuiltStatement`` is the only thing handed to the database layer: statement
text with positional ``?`` markers plus the values bound to them, carried
separately so user input never becomes part of the SQL text.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple


class StatementMode(str, Enum):
    """Kind of statement to build."""

    INSERT = "insert"
    SELECT = "select"


@dataclass(frozen=True)
class BuiltStatement:
    """
    Executable statement text plus its bound parameters.

    Example:
        >>> BuiltStatement("SELECT * FROM Room WHERE hotelID = ?", (3,))
        BuiltStatement(text='SELECT * FROM Room WHERE hotelID = ?', parameters=(3,))
    """

    text: str
    parameters: Tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameters", tuple(self.parameters))

    @property
    def is_query(self) -> bool:
        """True for statements that return rows."""
        return self.text.lstrip().upper().startswith("SELECT")


@dataclass(frozen=True)
class ExtraClauses:
    """
    Developer-authored fragments added to a SELECT.

    Fragments may contain ``?`` markers; ``where_parameters`` supplies the
    values for the markers in ``where`` and ``joins``, in textual order
    (joins first). ``limit`` is always bound as a parameter.

    Attributes:
        projection: Select-list expressions
        alias: Alias for the main table; equality filters are qualified with it
        joins: JOIN fragments
        where: Condition ANDed after the equality filters
        where_parameters: Values for markers in ``joins`` and ``where``
        group_by: GROUP BY expressions
        order_by: ORDER BY fragment (no markers)
        limit: Maximum number of rows, a positive int
    """

    projection: Tuple[str, ...] = ("*",)
    alias: Optional[str] = None
    joins: Tuple[str, ...] = ()
    where: Optional[str] = None
    where_parameters: Tuple[Any, ...] = ()
    group_by: Tuple[str, ...] = ()
    order_by: Optional[str] = None
    limit: Optional[int] = None

    def __post_init__(self) -> None:
        for name in ("projection", "joins", "where_parameters", "group_by"):
            value = getattr(self, name)
            if isinstance(value, str):
                value = (value,)
            object.__setattr__(self, name, tuple(value))

    @property
    def is_empty(self) -> bool:
        return self == ExtraClauses()


__all__ = [
    "StatementMode",
    "BuiltStatement",
    "ExtraClauses",
]
