"""Field validation for front-desk input.

Usage:
    >>> from hotel_desk.infrastructure.validation import validate, RequiredFieldMissing
    >>> from hotel_desk.infrastructure.schema import FieldKind, FieldSpec
    >>> validate(FieldSpec("roomNo", FieldKind.INTEGER), "101").parsed
    101
"""

from hotel_desk.infrastructure.validation.field_validator import (
    validate,
    validate_record,
    values_by_name,
)
from hotel_desk.infrastructure.validation.types import (
    FieldOutOfRange,
    FieldValidationError,
    FieldValue,
    InvalidFieldFormat,
    RequiredFieldMissing,
    SpecMismatch,
)

__all__ = [
    "validate",
    "validate_record",
    "values_by_name",
    "FieldValue",
    "FieldValidationError",
    "RequiredFieldMissing",
    "InvalidFieldFormat",
    "FieldOutOfRange",
    "SpecMismatch",
]
