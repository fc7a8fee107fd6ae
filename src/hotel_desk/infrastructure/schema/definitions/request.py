"""Request (repair request raised by a manager) table record definition."""

from ..core import FieldKind, FieldSpec, RecordSpec
from ..registry import register_record

REQUEST = register_record(
    RecordSpec(
        "Request",
        (
            FieldSpec("reqID", FieldKind.INTEGER),
            FieldSpec("managerID", FieldKind.INTEGER),
            FieldSpec("repairID", FieldKind.INTEGER),
            FieldSpec("requestDate", FieldKind.DATE, label="requestDate(DD/MM/YYYY)"),
            FieldSpec("description", FieldKind.TEXT, required=False),
        ),
    )
)
