"""
Front-desk report queries.

Each composer receives the validated form values by field name and returns a
parameterized SELECT. Forms reuse the table records' field declarations so
that equality filters line up with the tables they filter.
"""

from datetime import timedelta
from typing import Mapping

from hotel_desk.infrastructure.schema.core import FieldKind, FieldSpec, RecordSpec
from hotel_desk.infrastructure.schema.definitions import (
    BOOKING,
    CUSTOMER,
    REPAIR,
    ROOM,
)
from hotel_desk.infrastructure.sql import BuiltStatement, ExtraClauses, StatementMode, build
from hotel_desk.infrastructure.validation.types import FieldValue, InvalidFieldFormat

from .constants import DATE_LABEL, WEEK_LENGTH_DAYS

NO_FILTERS = RecordSpec("NoFilters", ())

HOTEL_ID = ROOM.get_field("hotelID")
BOOKING_HOTEL_ID = BOOKING.get_field("hotelID")
FIRST_NAME = CUSTOMER.get_field("fName")
LAST_NAME = CUSTOMER.get_field("lName")
COMPANY_NAME = FieldSpec(
    "name", FieldKind.TEXT, label="company name", max_length=30
)

DATE_FROM = FieldSpec("dateFrom", FieldKind.DATE, label=f"date from{DATE_LABEL}")
DATE_TO = FieldSpec("dateTo", FieldKind.DATE, label=f"to{DATE_LABEL}")
WEEK_START = FieldSpec("date", FieldKind.DATE, label=f"date{DATE_LABEL}")

CUSTOMER_NAME = CUSTOMER.subset("CustomerName", "fName", "lName")
COMPANY_BY_NAME = RecordSpec("CompanyName", (COMPANY_NAME,))


def top_k_field(top_k_max: int) -> FieldSpec:
    """Declaration for the bounded "top k" prompt."""
    return FieldSpec(
        "k", FieldKind.INTEGER, label="top k", min_value=1, max_value=top_k_max
    )


def _check_date_range(values: Mapping[str, FieldValue]) -> None:
    start, end = values["dateFrom"], values["dateTo"]
    if end.parsed < start.parsed:
        raise InvalidFieldFormat(
            end.name, end.raw, FieldKind.DATE, "end date is before start date"
        )


def available_rooms(values: Mapping[str, FieldValue]) -> BuiltStatement:
    """Rooms of a hotel that have no booking at all."""
    return build(
        "Room",
        ROOM.subset("RoomHotel", "hotelID"),
        [values["hotelID"]],
        StatementMode.SELECT,
        ExtraClauses(
            projection=("COUNT(*) AS available",),
            alias="r",
            where=(
                "NOT EXISTS (SELECT 1 FROM Booking b "
                "WHERE b.hotelID = r.hotelID AND b.roomNo = r.roomNo)"
            ),
        ),
    )


def booked_rooms(values: Mapping[str, FieldValue]) -> BuiltStatement:
    """Number of bookings recorded for a hotel."""
    return build(
        "Booking",
        BOOKING.subset("BookingHotel", "hotelID"),
        [values["hotelID"]],
        StatementMode.SELECT,
        ExtraClauses(projection=("COUNT(*) AS booked",)),
    )


def rooms_free_for_week(values: Mapping[str, FieldValue]) -> BuiltStatement:
    """Rooms of a hotel with no booking in the seven days starting at a date."""
    hotel_id = values["hotelID"]
    start = values["date"].parsed
    end = start + timedelta(days=WEEK_LENGTH_DAYS)
    return build(
        "Room",
        ROOM.subset("RoomHotel", "hotelID"),
        [hotel_id],
        StatementMode.SELECT,
        ExtraClauses(
            projection=("r.roomNo",),
            alias="r",
            where=(
                "r.roomNo NOT IN (SELECT b.roomNo FROM Booking b "
                "WHERE b.hotelID = ? AND b.bookingDate >= ? AND b.bookingDate < ?)"
            ),
            where_parameters=(hotel_id.parsed, start, end),
            order_by="r.roomNo",
        ),
    )


def top_prices_for_date_range(values: Mapping[str, FieldValue]) -> BuiltStatement:
    """Highest booking prices within an inclusive date range."""
    _check_date_range(values)
    return build(
        "Booking",
        NO_FILTERS,
        [],
        StatementMode.SELECT,
        ExtraClauses(
            projection=("price",),
            where="bookingDate BETWEEN ? AND ?",
            where_parameters=(values["dateFrom"].parsed, values["dateTo"].parsed),
            order_by="price DESC",
            limit=values["k"].parsed,
        ),
    )


def top_prices_for_customer(values: Mapping[str, FieldValue]) -> BuiltStatement:
    """Highest booking prices paid by a customer, found by name."""
    return build(
        "Customer",
        CUSTOMER_NAME,
        [values["fName"], values["lName"]],
        StatementMode.SELECT,
        ExtraClauses(
            projection=("b.price",),
            alias="c",
            joins=("JOIN Booking b ON b.customer = c.customerID",),
            order_by="b.price DESC",
            limit=values["k"].parsed,
        ),
    )


def total_cost_for_customer(values: Mapping[str, FieldValue]) -> BuiltStatement:
    """Total booking cost of a customer at one hotel within a date range."""
    _check_date_range(values)
    return build(
        "Customer",
        CUSTOMER_NAME,
        [values["fName"], values["lName"]],
        StatementMode.SELECT,
        ExtraClauses(
            projection=("SUM(b.price) AS total_cost",),
            alias="c",
            joins=("JOIN Booking b ON b.customer = c.customerID",),
            where="b.hotelID = ? AND b.bookingDate BETWEEN ? AND ?",
            where_parameters=(
                values["hotelID"].parsed,
                values["dateFrom"].parsed,
                values["dateTo"].parsed,
            ),
        ),
    )


def repairs_by_company(values: Mapping[str, FieldValue]) -> BuiltStatement:
    """Repairs made by a maintenance company, found by name."""
    return build(
        "MaintenanceCompany",
        COMPANY_BY_NAME,
        [values["name"]],
        StatementMode.SELECT,
        ExtraClauses(
            projection=("r.rID", "r.hotelID", "r.roomNo", "r.repairType"),
            alias="m",
            joins=("JOIN Repair r ON r.mCompany = m.cmpID",),
            order_by="r.rID",
        ),
    )


def top_companies_by_repairs(values: Mapping[str, FieldValue]) -> BuiltStatement:
    """Maintenance companies with the most repairs."""
    return build(
        "MaintenanceCompany",
        NO_FILTERS,
        [],
        StatementMode.SELECT,
        ExtraClauses(
            projection=("m.name", "COUNT(*) AS repair_count"),
            alias="m",
            joins=("JOIN Repair r ON r.mCompany = m.cmpID",),
            group_by=("m.cmpID", "m.name"),
            order_by="COUNT(*) DESC, m.name",
            limit=values["k"].parsed,
        ),
    )


def repairs_per_year(values: Mapping[str, FieldValue]) -> BuiltStatement:
    """Repair count per year for one room of a hotel."""
    return build(
        "Repair",
        REPAIR.subset("RepairRoom", "hotelID", "roomNo"),
        [values["hotelID"], values["roomNo"]],
        StatementMode.SELECT,
        ExtraClauses(
            projection=(
                "EXTRACT(YEAR FROM repairDate) AS repair_year",
                "COUNT(*) AS repair_count",
            ),
            group_by=("EXTRACT(YEAR FROM repairDate)",),
            order_by="repair_year",
        ),
    )


__all__ = [
    "COMPANY_NAME",
    "COMPANY_BY_NAME",
    "CUSTOMER_NAME",
    "DATE_FROM",
    "DATE_TO",
    "WEEK_START",
    "HOTEL_ID",
    "BOOKING_HOTEL_ID",
    "FIRST_NAME",
    "LAST_NAME",
    "top_k_field",
    "available_rooms",
    "booked_rooms",
    "rooms_free_for_week",
    "top_prices_for_date_range",
    "top_prices_for_customer",
    "total_cost_for_customer",
    "repairs_by_company",
    "top_companies_by_repairs",
    "repairs_per_year",
]
