"""Field validation and coercion.

``validate`` turns one raw input string into a ``FieldValue`` according to its
``FieldSpec``. It is a pure function: no I/O, no prompting, no retry. Callers
decide what to do with the exceptions it raises.
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, List, Sequence

from hotel_desk.infrastructure.schema.core import FieldKind, FieldSpec, RecordSpec
from hotel_desk.infrastructure.validation.types import (
    FieldOutOfRange,
    FieldValue,
    InvalidFieldFormat,
    RequiredFieldMissing,
    SpecMismatch,
)
from hotel_desk.utils.date_parser import parse_date

INTEGER_PATTERN = re.compile(r"-?[0-9]+")
DECIMAL_PATTERN = re.compile(r"-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")

TRUE_VALUES = frozenset({"true", "t", "yes", "y", "1"})
FALSE_VALUES = frozenset({"false", "f", "no", "n", "0"})


def _coerce_integer(spec: FieldSpec, text: str) -> int:
    if not INTEGER_PATTERN.fullmatch(text):
        raise InvalidFieldFormat(spec.name, text, spec.kind, "expected a whole number")
    return int(text)


def _coerce_decimal(spec: FieldSpec, text: str) -> Decimal:
    if not DECIMAL_PATTERN.fullmatch(text):
        raise InvalidFieldFormat(spec.name, text, spec.kind, "expected a number")
    try:
        return Decimal(text)
    except InvalidOperation as exc:
        raise InvalidFieldFormat(spec.name, text, spec.kind, "expected a number") from exc


def _coerce_date(spec: FieldSpec, text: str) -> Any:
    try:
        return parse_date(text, spec.date_format)
    except ValueError as exc:
        raise InvalidFieldFormat(spec.name, text, spec.kind, str(exc)) from exc


def _coerce_boolean(spec: FieldSpec, text: str) -> bool:
    lowered = text.lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise InvalidFieldFormat(spec.name, text, spec.kind, "expected yes or no")


def _coerce_text(spec: FieldSpec, text: str) -> str:
    if spec.max_length is not None and len(text) > spec.max_length:
        raise InvalidFieldFormat(
            spec.name, text, spec.kind, f"at most {spec.max_length} characters"
        )
    return text


_COERCERS: Dict[FieldKind, Callable[[FieldSpec, str], Any]] = {
    FieldKind.INTEGER: _coerce_integer,
    FieldKind.DECIMAL: _coerce_decimal,
    FieldKind.DATE: _coerce_date,
    FieldKind.BOOLEAN: _coerce_boolean,
    FieldKind.TEXT: _coerce_text,
}


def _check_bounds(spec: FieldSpec, text: str, value: Any) -> None:
    if spec.kind not in (FieldKind.INTEGER, FieldKind.DECIMAL):
        return
    too_small = spec.min_value is not None and value < spec.min_value
    too_large = spec.max_value is not None and value > spec.max_value
    if too_small or too_large:
        raise FieldOutOfRange(
            spec.name,
            text,
            spec.kind,
            min_value=spec.min_value,
            max_value=spec.max_value,
        )


def validate(spec: FieldSpec, raw: str) -> FieldValue:
    """
    Validate and coerce a single raw input.

    Args:
        spec: Declaration of the field
        raw: Input exactly as received; surrounding whitespace is ignored

    Returns:
        FieldValue whose ``parsed`` is the coerced value, or None when an
        optional field was left empty

    Raises:
        RequiredFieldMissing: Required field is empty after trimming
        InvalidFieldFormat: Value does not match the field's kind or pattern
        FieldOutOfRange: Numeric value outside ``min_value``/``max_value``

    Examples:
        >>> validate(FieldSpec("hotelID", FieldKind.INTEGER), " 3 ").parsed
        3
        >>> validate(FieldSpec("Address", required=False), "").is_present
        False
    """
    text = (raw or "").strip()

    if not text:
        if spec.required:
            raise RequiredFieldMissing(spec.name)
        return FieldValue(spec=spec, raw=raw or "", parsed=None)

    if spec.pattern is not None and not re.fullmatch(spec.pattern, text):
        raise InvalidFieldFormat(
            spec.name, text, spec.kind, f"must match {spec.pattern}"
        )

    parsed = _COERCERS[spec.kind](spec, text)
    _check_bounds(spec, text, parsed)
    return FieldValue(spec=spec, raw=raw, parsed=parsed)


def validate_record(record: RecordSpec, raws: Sequence[str]) -> List[FieldValue]:
    """
    Validate a full submission, one raw string per field in record order.

    Stops at the first invalid field.

    Raises:
        SpecMismatch: If the number of raw values differs from the record
        RequiredFieldMissing, InvalidFieldFormat: From ``validate``
    """
    if len(raws) != len(record.fields):
        raise SpecMismatch(
            record.name,
            f"Record '{record.name}' has {len(record.fields)} fields, "
            f"got {len(raws)} values",
        )
    return [validate(spec, raw) for spec, raw in zip(record.fields, raws)]


def values_by_name(values: Sequence[FieldValue]) -> Dict[str, Any]:
    """Map field names to parsed values (absent fields map to None)."""
    return {value.name: value.parsed for value in values}


__all__ = [
    "validate",
    "validate_record",
    "values_by_name",
]
