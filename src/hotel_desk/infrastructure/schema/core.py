"""Core record declaration types for HotelDesk.

A ``RecordSpec`` declares, in binding order, the fields one operation accepts.
Declarations are immutable and created once at import time.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Iterator, Optional, Tuple, Union

from hotel_desk.utils.date_parser import DEFAULT_DATE_FORMAT

Number = Union[int, Decimal]


class FieldKind(Enum):
    """Supported kinds of field values."""

    INTEGER = "integer"
    TEXT = "text"
    DATE = "date"
    DECIMAL = "decimal"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class FieldSpec:
    """Declaration of a single input field."""

    name: str
    kind: FieldKind = FieldKind.TEXT
    required: bool = True
    pattern: Optional[str] = None
    label: str = ""
    max_length: Optional[int] = None
    min_value: Optional[Number] = None
    max_value: Optional[Number] = None
    date_format: str = DEFAULT_DATE_FORMAT

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("FieldSpec name must be a non-empty string")
        if self.pattern is not None:
            # Fail at declaration time rather than on the first submission
            re.compile(self.pattern)

    @property
    def prompt_label(self) -> str:
        """Text shown when prompting for this field."""
        return self.label or self.name


@dataclass(frozen=True)
class RecordSpec:
    """Ordered declaration of the fields one table or operation accepts."""

    name: str
    fields: Tuple[FieldSpec, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any iterable of FieldSpec but always store a tuple
        object.__setattr__(self, "fields", tuple(self.fields))
        seen = set()
        for spec in self.fields:
            if spec.name in seen:
                raise ValueError(
                    f"Duplicate field '{spec.name}' in record '{self.name}'"
                )
            seen.add(spec.name)

    def __iter__(self) -> Iterator[FieldSpec]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(spec.name for spec in self.fields)

    @property
    def required_fields(self) -> Tuple[str, ...]:
        return tuple(spec.name for spec in self.fields if spec.required)

    def get_field(self, name: str) -> FieldSpec:
        """Look up a field by name."""
        for spec in self.fields:
            if spec.name == name:
                return spec
        raise KeyError(f"Field '{name}' not found in record '{self.name}'")

    def subset(self, name: str, *field_names: str) -> "RecordSpec":
        """Build a new record from some of this record's fields, in the given order."""
        return RecordSpec(name, tuple(self.get_field(n) for n in field_names))


__all__ = [
    "FieldKind",
    "FieldSpec",
    "RecordSpec",
]
