"""Customer table record definition."""

from ..core import FieldKind, FieldSpec, RecordSpec
from ..registry import register_record

CUSTOMER = register_record(
    RecordSpec(
        "Customer",
        (
            FieldSpec("customerID", FieldKind.INTEGER),
            FieldSpec("fName", FieldKind.TEXT, max_length=30),
            FieldSpec("lName", FieldKind.TEXT, max_length=30),
            FieldSpec("Address", FieldKind.TEXT, required=False),
            FieldSpec(
                "phNo", FieldKind.TEXT, required=False, pattern=r"\+?[0-9][0-9 -]*"
            ),
            FieldSpec("DOB", FieldKind.DATE, required=False, label="DOB(DD/MM/YYYY)"),
            FieldSpec(
                "gender",
                FieldKind.TEXT,
                required=False,
                pattern=r"Male|Female|Other",
                label="gender(Male/Female/Other)",
            ),
        ),
    )
)
