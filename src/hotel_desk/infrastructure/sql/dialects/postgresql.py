"""
PostgreSQL-specific SQL dialect implementation.

Provides PostgreSQL syntax for INSERT and SELECT statements and identifier
quoting. The emitted text only uses standard SQL, so the same statements run
against SQLite in tests.
"""

from typing import List, Optional, Sequence

from ..core.identifier import qualify_column, quote_identifier


class PostgreSQLDialect:
    """PostgreSQL SQL dialect implementation."""

    name = "postgresql"

    def quote(self, identifier: str) -> str:
        """Quote an identifier using PostgreSQL syntax (double quotes)."""
        return quote_identifier(identifier)

    def column(self, column: str, alias: Optional[str] = None) -> str:
        """Create a column reference with optional table alias."""
        return qualify_column(column, alias)

    def build_insert(
        self,
        table: str,
        columns: List[str],
        placeholders: List[str],
    ) -> str:
        """
        Build a simple INSERT statement.

        Args:
            table: Table name
            columns: List of column names
            placeholders: List of parameter placeholders

        Returns:
            INSERT SQL statement
        """
        quoted_cols = ", ".join(self.quote(c) for c in columns)
        values = ", ".join(placeholders)
        return f"INSERT INTO {self.quote(table)} ({quoted_cols}) VALUES ({values})"

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
    ) -> str:
        """
        Build a SELECT statement.

        Args:
            table: Table name
            projection: Select-list expressions
            predicates: Conditions joined with AND; WHERE is omitted when empty
            alias: Optional table alias
            joins: JOIN fragments appended after the table
            group_by: GROUP BY expressions
            order_by: ORDER BY fragment
            limit_placeholder: Placeholder for LIMIT, or None for no limit

        Returns:
            SELECT SQL statement
        """
        source = self.quote(table)
        if alias:
            source = f"{source} {self.quote(alias)}"

        parts = [f"SELECT {', '.join(projection)} FROM {source}"]
        parts.extend(joins)
        if predicates:
            parts.append("WHERE " + " AND ".join(predicates))
        if group_by:
            parts.append("GROUP BY " + ", ".join(group_by))
        if order_by:
            parts.append(f"ORDER BY {order_by}")
        if limit_placeholder:
            parts.append(f"LIMIT {limit_placeholder}")
        return " ".join(parts)
