"""Validation types and exceptions for the infrastructure layer.

This module defines the shared types produced and raised by field validation:
- FieldValue: a raw input together with its coerced form (or absence)
- RequiredFieldMissing: a required field was left empty
- InvalidFieldFormat: a value could not be coerced to its declared kind
- FieldOutOfRange: a numeric value fell outside its declared bounds
- SpecMismatch: values do not line up with their record declaration
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from hotel_desk.infrastructure.schema.core import FieldKind, FieldSpec


@dataclass(frozen=True)
class FieldValue:
    """A validated input for one field.

    Attributes:
        spec: Declaration the raw value was validated against
        raw: Text exactly as supplied by the input source
        parsed: Coerced value, or None when an optional field was left empty

    Example:
        >>> value = validate(FieldSpec("roomNo", FieldKind.INTEGER), "12")
        >>> value.parsed
        12
    """

    spec: FieldSpec
    raw: str
    parsed: Any = None

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def is_present(self) -> bool:
        """True when the value takes part in the statement."""
        return self.parsed is not None


class FieldValidationError(ValueError):
    """Base class for errors raised while validating a single field."""

    def __init__(self, message: str, *, field: str) -> None:
        super().__init__(message)
        self.field = field

    def to_dict(self) -> Dict[str, Any]:
        """Convert to structured dict for logging."""
        return {
            "error_type": type(self).__name__,
            "field": self.field,
            "message": str(self),
        }


class RequiredFieldMissing(FieldValidationError):
    """Raised when a required field is empty after trimming."""

    def __init__(self, field: str) -> None:
        super().__init__(f"{field} CANNOT be empty!", field=field)


class InvalidFieldFormat(FieldValidationError):
    """Raised when a raw value cannot be coerced to the field's kind.

    Attributes:
        field: Name of the field
        raw: The offending input
        kind: Declared kind of the field
        reason: Short human-readable explanation
    """

    def __init__(
        self,
        field: str,
        raw: str,
        kind: FieldKind,
        reason: Optional[str] = None,
    ) -> None:
        message = f"Invalid {kind.value} for {field}: {raw!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, field=field)
        self.raw = raw
        self.kind = kind
        self.reason = reason

    def to_dict(self) -> Dict[str, Any]:
        """Convert to structured dict for logging.

        The message and reason can quote the guest's input, so only its
        length is reported.
        """
        return {
            "error_type": type(self).__name__,
            "field": self.field,
            "message": f"Invalid {self.kind.value} for {self.field}",
            "kind": self.kind.value,
            "raw_length": len(self.raw),
        }


class SpecMismatch(ValueError):
    """Raised when values do not line up with the record they claim to fill.

    This is a programming error in the caller, not a user input error.
    """

    def __init__(self, field: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"Value does not match record field '{field}'")
        self.field = field

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_type": "SpecMismatch",
            "field": self.field,
            "message": str(self),
        }


class FieldOutOfRange(InvalidFieldFormat):
    """Raised when a numeric value is outside its declared bounds."""

    def __init__(
        self,
        field: str,
        raw: str,
        kind: FieldKind,
        *,
        min_value: Any = None,
        max_value: Any = None,
    ) -> None:
        if min_value is not None and max_value is not None:
            reason = f"must be between {min_value} and {max_value}"
        elif min_value is not None:
            reason = f"must be at least {min_value}"
        else:
            reason = f"must be at most {max_value}"
        super().__init__(field, raw, kind, reason)
        self.min_value = min_value
        self.max_value = max_value


__all__ = [
    "FieldValue",
    "FieldValidationError",
    "RequiredFieldMissing",
    "InvalidFieldFormat",
    "FieldOutOfRange",
    "SpecMismatch",
]
