"""Booking table record definition."""

from decimal import Decimal

from ..core import FieldKind, FieldSpec, RecordSpec
from ..registry import register_record

BOOKING = register_record(
    RecordSpec(
        "Booking",
        (
            FieldSpec("bID", FieldKind.INTEGER),
            FieldSpec("customer", FieldKind.INTEGER),
            FieldSpec("hotelID", FieldKind.INTEGER),
            FieldSpec("roomNo", FieldKind.INTEGER),
            FieldSpec("bookingDate", FieldKind.DATE, label="bookingDate(DD/MM/YYYY)"),
            FieldSpec("noOfPeople", FieldKind.INTEGER, required=False, min_value=1),
            FieldSpec("price", FieldKind.DECIMAL, min_value=Decimal("0")),
        ),
    )
)
