"""Repair table record definition."""

from ..core import FieldKind, FieldSpec, RecordSpec
from ..registry import register_record

REPAIR = register_record(
    RecordSpec(
        "Repair",
        (
            FieldSpec("rID", FieldKind.INTEGER),
            FieldSpec("hotelID", FieldKind.INTEGER),
            FieldSpec("roomNo", FieldKind.INTEGER),
            FieldSpec("mCompany", FieldKind.INTEGER),
            FieldSpec("repairDate", FieldKind.DATE, label="repairDate(DD/MM/YYYY)"),
            FieldSpec("description", FieldKind.TEXT, required=False),
            FieldSpec("repairType", FieldKind.TEXT, required=False, max_length=10),
        ),
    )
)
