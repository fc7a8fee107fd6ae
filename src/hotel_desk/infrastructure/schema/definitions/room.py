"""Room table record definition."""

from ..core import FieldKind, FieldSpec, RecordSpec
from ..registry import register_record

ROOM = register_record(
    RecordSpec(
        "Room",
        (
            FieldSpec("hotelID", FieldKind.INTEGER),
            FieldSpec("roomNo", FieldKind.INTEGER),
            FieldSpec("roomType", FieldKind.TEXT, max_length=10),
        ),
    )
)
