"""Record declaration registry for HotelDesk.

Table definitions under ``definitions/`` register themselves on import.
"""

from __future__ import annotations

from typing import Dict, List

from .core import RecordSpec


_RECORD_REGISTRY: Dict[str, RecordSpec] = {}


def register_record(record: RecordSpec) -> RecordSpec:
    """Register a table record declaration in the global registry."""
    if record.name in _RECORD_REGISTRY:
        raise ValueError(
            f"Record '{record.name}' is already registered. "
            "Use a different name or unregister first."
        )
    _RECORD_REGISTRY[record.name] = record
    return record


def get_record(name: str) -> RecordSpec:
    """Retrieve a record declaration from the registry by table name."""
    if name not in _RECORD_REGISTRY:
        available = list(_RECORD_REGISTRY.keys())
        raise KeyError(f"Record '{name}' not found in registry. Available: {available}")
    return _RECORD_REGISTRY[name]


def list_records() -> List[str]:
    """List all registered table names."""
    return sorted(_RECORD_REGISTRY.keys())


def unregister_record(name: str) -> None:
    """Remove a record declaration (used by tests registering scratch records)."""
    _RECORD_REGISTRY.pop(name, None)


__all__ = [
    "register_record",
    "get_record",
    "list_records",
    "unregister_record",
]
