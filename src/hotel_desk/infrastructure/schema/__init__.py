"""Record declarations for the hotel schema.

Usage:
    >>> from hotel_desk.infrastructure.schema import get_record
    >>> get_record("Customer").required_fields
    ('customerID', 'fName', 'lName')
"""

from .core import FieldKind, FieldSpec, RecordSpec
from .registry import get_record, list_records, register_record, unregister_record

# Register all table definitions
from . import definitions  # noqa: E402,F401

__all__ = [
    "FieldKind",
    "FieldSpec",
    "RecordSpec",
    "get_record",
    "list_records",
    "register_record",
    "unregister_record",
]
