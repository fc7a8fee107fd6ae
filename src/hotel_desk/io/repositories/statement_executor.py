"""
Statement executor.

Submits ``BuiltStatement``s through a SQLAlchemy connection. Positional
markers are rewritten to indexed named binds, and each value is bound with
an explicit SQLAlchemy type so dates and decimals travel the same way on
PostgreSQL and SQLite.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Any, List, Optional, Tuple

import sqlalchemy as sa
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from hotel_desk.infrastructure.sql.core.parameters import to_named_binds
from hotel_desk.infrastructure.sql.statement import BuiltStatement
from hotel_desk.io.connectors.exceptions import DatabaseExecutionFailed
from hotel_desk.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ExecutionResult:
    """
    Outcome of one statement.

    Attributes:
        columns: Column names for queries, empty for writes
        rows: Result rows for queries, empty for writes
        rowcount: Rows affected by a write, or rows returned by a query
    """

    columns: Tuple[str, ...] = ()
    rows: List[Tuple[Any, ...]] = field(default_factory=list)
    rowcount: int = 0

    @property
    def returns_rows(self) -> bool:
        return bool(self.columns)

    def scalar(self) -> Any:
        """First column of the first row, or None."""
        if not self.rows:
            return None
        return self.rows[0][0]


def _sql_type_for(value: Any) -> Optional[sa.types.TypeEngine]:
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return sa.Boolean()
    if isinstance(value, int):
        return sa.Integer()
    if isinstance(value, Decimal):
        return sa.Numeric(asdecimal=True)
    if isinstance(value, datetime):
        return sa.DateTime()
    if isinstance(value, date):
        return sa.Date()
    if isinstance(value, str):
        return sa.String()
    return None


def to_sqlalchemy(statement: BuiltStatement) -> sa.TextClause:
    """Convert a BuiltStatement into a typed SQLAlchemy text clause."""
    text, params = to_named_binds(statement.text, statement.parameters)
    clause = sa.text(text)
    if params:
        clause = clause.bindparams(
            *[
                sa.bindparam(name, value, type_=_sql_type_for(value))
                for name, value in params.items()
            ]
        )
    return clause


class StatementExecutor:
    """
    Executes built statements on a borrowed connection.

    The caller owns the connection and its transaction; this class never
    commits or rolls back.

    Usage:
        with engine.connect() as conn:
            executor = StatementExecutor(conn)
            result = executor.execute(statement)
            conn.commit()
    """

    def __init__(self, connection: Connection):
        """
        Initialize the executor with a database connection.

        Args:
            connection: SQLAlchemy Connection. Caller owns transaction lifecycle.
        """
        self.connection = connection

    def execute(self, statement: BuiltStatement) -> ExecutionResult:
        """
        Execute one statement.

        Args:
            statement: Statement text and bound parameters

        Returns:
            ExecutionResult with rows for queries or the affected row count

        Raises:
            DatabaseExecutionFailed: If the driver rejects the statement
        """
        clause = to_sqlalchemy(statement)
        try:
            result = self.connection.execute(clause)
            if result.returns_rows:
                columns = tuple(result.keys())
                rows = [tuple(row) for row in result.fetchall()]
                outcome = ExecutionResult(columns=columns, rows=rows, rowcount=len(rows))
            else:
                outcome = ExecutionResult(rowcount=result.rowcount)
        except SQLAlchemyError as exc:
            error = DatabaseExecutionFailed(exc, statement=statement.text)
            logger.error("statement.failed", **error.to_dict())
            raise error from exc

        logger.info(
            "statement.executed",
            statement=statement.text,
            parameter_count=len(statement.parameters),
            rowcount=outcome.rowcount,
        )
        return outcome
