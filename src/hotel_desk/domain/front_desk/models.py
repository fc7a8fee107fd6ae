"""
Front-desk action models.

An action pairs an input form (a ``RecordSpec`` the shell prompts for) with
the statements it runs once every field has been validated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Sequence

from hotel_desk.infrastructure.schema.core import RecordSpec
from hotel_desk.infrastructure.sql import BuiltStatement, StatementMode, build, check_alignment
from hotel_desk.infrastructure.validation.types import FieldValue
from hotel_desk.io.repositories.statement_executor import ExecutionResult, StatementExecutor

Composer = Callable[[Mapping[str, FieldValue]], BuiltStatement]


class RecordNotFound(LookupError):
    """Raised when a lookup that must match exactly one row does not."""

    def __init__(self, entity: str, criteria: Mapping[str, Any], matches: int = 0):
        self.entity = entity
        self.criteria = dict(criteria)
        self.matches = matches
        described = ", ".join(f"{key}={value!r}" for key, value in self.criteria.items())
        if matches:
            message = f"{matches} {entity} records match {described}; expected exactly one"
        else:
            message = f"No {entity} found for {described}"
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to structured dict for logging."""
        return {
            "error_type": "RecordNotFound",
            "entity": self.entity,
            "criteria_fields": sorted(self.criteria),
            "matches": self.matches,
        }


@dataclass(frozen=True)
class FrontDeskAction:
    """Base class for a numbered menu action."""

    key: int
    title: str
    form: RecordSpec

    @property
    def writes(self) -> bool:
        """True when the action modifies the database."""
        return False

    def compose(self, values: Sequence[FieldValue]) -> BuiltStatement:
        raise NotImplementedError

    def run(self, executor: StatementExecutor, values: Sequence[FieldValue]) -> ExecutionResult:
        """Execute the action with validated form values."""
        return executor.execute(self.compose(values))


@dataclass(frozen=True)
class InsertAction(FrontDeskAction):
    """Adds one row to ``table`` from a form identical to the table's record."""

    table: str = ""

    @property
    def writes(self) -> bool:
        return True

    def compose(self, values: Sequence[FieldValue]) -> BuiltStatement:
        return build(self.table or self.form.name, self.form, values, StatementMode.INSERT)


@dataclass(frozen=True)
class ReportAction(FrontDeskAction):
    """Runs one query composed from the form values."""

    composer: Composer = None  # type: ignore[assignment]

    def compose(self, values: Sequence[FieldValue]) -> BuiltStatement:
        check_alignment(self.form, values)
        return self.composer({value.name: value for value in values})
