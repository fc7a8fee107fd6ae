"""
Statement builder entry point.

``build`` turns a record declaration and its validated values into a
``BuiltStatement``. It is pure and deterministic: the same arguments always
produce an equal statement, and no user value is ever placed in the text.
"""

from typing import Optional, Sequence

from hotel_desk.infrastructure.schema.core import RecordSpec
from hotel_desk.infrastructure.validation.types import FieldValue, SpecMismatch

from .dialects.postgresql import PostgreSQLDialect
from .operations.insert import Dialect, InsertBuilder
from .operations.select import SelectBuilder
from .statement import BuiltStatement, ExtraClauses, StatementMode

DEFAULT_DIALECT = PostgreSQLDialect()


def check_alignment(record: RecordSpec, values: Sequence[FieldValue]) -> None:
    """
    Ensure ``values[i]`` was validated against ``record.fields[i]``.

    Raises:
        SpecMismatch: On a length or field mismatch
    """
    if len(values) != len(record.fields):
        raise SpecMismatch(
            record.name,
            f"Record '{record.name}' has {len(record.fields)} fields, "
            f"got {len(values)} values",
        )
    for spec, value in zip(record.fields, values):
        if value.spec != spec:
            raise SpecMismatch(
                spec.name,
                f"Expected value for '{spec.name}', got value for '{value.spec.name}'",
            )


def build(
    table: str,
    record: RecordSpec,
    values: Sequence[FieldValue],
    mode: StatementMode,
    extra: Optional[ExtraClauses] = None,
    dialect: Dialect = DEFAULT_DIALECT,
) -> BuiltStatement:
    """
    Build a parameterized INSERT or SELECT.

    Args:
        table: Target (INSERT) or main (SELECT) table
        record: Declaration the values were validated against
        values: Validated values, one per record field, in record order
        mode: StatementMode.INSERT or StatementMode.SELECT
        extra: SELECT-only projection, joins, conditions, ordering and limit
        dialect: SQL dialect used to render identifiers and clauses

    Returns:
        BuiltStatement with ``?`` markers and the parameters bound to them

    Raises:
        SpecMismatch: If values are not aligned with the record, or an INSERT
            has nothing to write
        ClauseParameterMismatch: If extra clause markers and parameters differ
        ValueError: If extra clauses are given for an INSERT, or the limit is
            not a positive int

    Example:
        >>> record = RecordSpec("Room", (FieldSpec("hotelID", FieldKind.INTEGER),))
        >>> build("Room", record, [validate(record.fields[0], "3")], StatementMode.SELECT)
        BuiltStatement(text='SELECT * FROM Room WHERE hotelID = ?', parameters=(3,))
    """
    check_alignment(record, values)
    mode = StatementMode(mode)

    if mode is StatementMode.INSERT:
        if extra is not None and not extra.is_empty:
            raise ValueError("Extra clauses are only supported for SELECT statements")
        return InsertBuilder(dialect).insert(table, values)

    return SelectBuilder(dialect).select(table, values, extra)
