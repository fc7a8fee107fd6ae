"""
SQL SELECT statement builders.

Present values become equality filters; every literal travels as a bound
parameter, including the LIMIT.
"""

from typing import Any, List, Optional, Sequence

from hotel_desk.infrastructure.validation.types import FieldValue

from ..core.parameters import PLACEHOLDER, count_placeholders
from ..exceptions import ClauseParameterMismatch
from ..statement import BuiltStatement, ExtraClauses
from .insert import Dialect


def _check_limit(limit: Any) -> None:
    # bool is an int subclass; LIMIT TRUE is never intended
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise ValueError(f"LIMIT must be a positive integer, got {limit!r}")


class SelectBuilder:
    """High-level builder for SELECT statements."""

    def __init__(self, dialect: Dialect):
        self.dialect = dialect

    def select(
        self,
        table: str,
        values: Sequence[FieldValue],
        extra: Optional[ExtraClauses] = None,
    ) -> BuiltStatement:
        """
        Build a SELECT filtered by the present values and the extra clauses.

        Args:
            table: Main table name
            values: Validated values used as ``column = ?`` filters
            extra: Projection, joins, conditions, grouping, ordering and limit

        Returns:
            BuiltStatement whose parameters follow the markers in textual order:
            join values, filter values, ``where`` values, then the limit

        Raises:
            ClauseParameterMismatch: If fragment markers and parameters differ
            ValueError: If the limit is not a positive int
        """
        extra = extra or ExtraClauses()

        fragments = list(extra.joins) + ([extra.where] if extra.where else [])
        join_markers = sum(count_placeholders(fragment) for fragment in extra.joins)
        markers = join_markers + count_placeholders(extra.where or "")
        if markers != len(extra.where_parameters):
            raise ClauseParameterMismatch(
                " ".join(fragments), markers, len(extra.where_parameters)
            )
        for name, fragment in (
            ("projection", ", ".join(extra.projection)),
            ("group_by", ", ".join(extra.group_by)),
            ("order_by", extra.order_by or ""),
        ):
            found = count_placeholders(fragment)
            if found:
                raise ClauseParameterMismatch(f"{name}: {fragment}", found, 0)

        present = [value for value in values if value.is_present]
        predicates: List[str] = [
            f"{self.dialect.column(value.name, extra.alias)} = {PLACEHOLDER}"
            for value in present
        ]
        if extra.where:
            predicates.append(f"({extra.where})" if predicates else extra.where)

        # JOIN fragments precede WHERE in the text, so their values bind first
        parameters: List[Any] = list(extra.where_parameters[:join_markers])
        parameters.extend(value.parsed for value in present)
        parameters.extend(extra.where_parameters[join_markers:])

        limit_placeholder = None
        if extra.limit is not None:
            _check_limit(extra.limit)
            limit_placeholder = PLACEHOLDER
            parameters.append(extra.limit)

        text = self.dialect.build_select(
            table,
            extra.projection,
            predicates,
            alias=extra.alias,
            joins=extra.joins,
            group_by=extra.group_by,
            order_by=extra.order_by,
            limit_placeholder=limit_placeholder,
        )
        return BuiltStatement(text, tuple(parameters))
