"""
SQL INSERT statement builders.

Only values that are present are written; optional fields left empty are
omitted from both the column list and the parameters.
"""

from typing import List, Optional, Protocol, Sequence

from hotel_desk.infrastructure.validation.types import FieldValue, SpecMismatch

from ..core.parameters import positional_placeholders
from ..statement import BuiltStatement


class Dialect(Protocol):
    """Protocol for SQL dialects."""

    name: str

    def quote(self, identifier: str) -> str: ...
    def column(self, column: str, alias: Optional[str] = None) -> str: ...
    def build_insert(
        self, table: str, columns: List[str], placeholders: List[str]
    ) -> str: ...
    def build_select(
        self,
        table: str,
        projection: Sequence[str],
        predicates: Sequence[str] = (),
        alias: Optional[str] = None,
        joins: Sequence[str] = (),
        group_by: Sequence[str] = (),
        order_by: Optional[str] = None,
        limit_placeholder: Optional[str] = None,
    ) -> str: ...


class InsertBuilder:
    """
    High-level builder for INSERT statements.

    Example:
        >>> builder = InsertBuilder(PostgreSQLDialect())
        >>> builder.insert("Room", values).text
        'INSERT INTO Room (hotelID, roomNo, roomType) VALUES (?, ?, ?)'
    """

    def __init__(self, dialect: Dialect):
        """
        Initialize the InsertBuilder.

        Args:
            dialect: SQL dialect to use for statement generation
        """
        self.dialect = dialect

    def insert(
        self,
        table: str,
        values: Sequence[FieldValue],
    ) -> BuiltStatement:
        """
        Build an INSERT of the present values, in the given order.

        Args:
            table: Table name
            values: Validated values, already aligned with the record

        Returns:
            BuiltStatement with one placeholder per present value

        Raises:
            SpecMismatch: If no value is present
        """
        present = [value for value in values if value.is_present]
        if not present:
            raise SpecMismatch(table, f"INSERT into '{table}' has no values to write")

        columns = [value.name for value in present]
        text = self.dialect.build_insert(
            table, columns, positional_placeholders(len(columns))
        )
        return BuiltStatement(text, tuple(value.parsed for value in present))
