"""MaintenanceCompany table record definition."""

from ..core import FieldKind, FieldSpec, RecordSpec
from ..registry import register_record

MAINTENANCE_COMPANY = register_record(
    RecordSpec(
        "MaintenanceCompany",
        (
            FieldSpec("cmpID", FieldKind.INTEGER),
            FieldSpec("name", FieldKind.TEXT, max_length=30),
            FieldSpec("address", FieldKind.TEXT, required=False),
            FieldSpec("isCertified", FieldKind.BOOLEAN, label="isCertified(yes/no)"),
        ),
    )
)
