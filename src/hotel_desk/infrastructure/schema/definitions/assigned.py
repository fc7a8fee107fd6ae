"""Assigned (house cleaning staff to room) table record definition."""

from ..core import FieldKind, FieldSpec, RecordSpec
from ..registry import register_record

ASSIGNED = register_record(
    RecordSpec(
        "Assigned",
        (
            FieldSpec("asgID", FieldKind.INTEGER),
            FieldSpec("staffID", FieldKind.INTEGER),
            FieldSpec("hotelID", FieldKind.INTEGER),
            FieldSpec("roomNo", FieldKind.INTEGER),
        ),
    )
)
