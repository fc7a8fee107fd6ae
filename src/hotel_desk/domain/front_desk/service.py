"""
Front-desk action catalog.

``build_actions`` assembles the numbered menu once at start-up. Forms are
static declarations; only the top-k bound comes from settings.
"""

from collections import OrderedDict
from typing import Dict, Optional

from hotel_desk.config import Settings, get_settings
from hotel_desk.infrastructure.schema.core import RecordSpec
from hotel_desk.infrastructure.schema.definitions import (
    ASSIGNED,
    CUSTOMER,
    MAINTENANCE_COMPANY,
    REPAIR,
    REQUEST,
    ROOM,
)

from . import reports
from .booking import BOOKING_FORM, BookRoomAction
from .models import FrontDeskAction, InsertAction, ReportAction


def build_actions(settings: Optional[Settings] = None) -> Dict[int, FrontDeskAction]:
    """
    Build the numbered front-desk actions, in menu order.

    Args:
        settings: Settings instance; defaults to ``get_settings()``

    Returns:
        Ordered mapping of menu number to action
    """
    settings = settings or get_settings()
    top_k = reports.top_k_field(settings.top_k_max)

    actions = [
        InsertAction(1, "Add new customer", CUSTOMER, table="Customer"),
        InsertAction(2, "Add new room", ROOM, table="Room"),
        InsertAction(
            3, "Add new maintenance company", MAINTENANCE_COMPANY, table="MaintenanceCompany"
        ),
        InsertAction(4, "Add new repair", REPAIR, table="Repair"),
        BookRoomAction(5, "Add new Booking", BOOKING_FORM),
        InsertAction(6, "Assign house cleaning staff to a room", ASSIGNED, table="Assigned"),
        InsertAction(7, "Raise a repair request", REQUEST, table="Request"),
        ReportAction(
            8,
            "Get number of available rooms",
            RecordSpec("AvailableRooms", (reports.HOTEL_ID,)),
            composer=reports.available_rooms,
        ),
        ReportAction(
            9,
            "Get number of booked rooms",
            RecordSpec("BookedRooms", (reports.BOOKING_HOTEL_ID,)),
            composer=reports.booked_rooms,
        ),
        ReportAction(
            10,
            "Get hotel bookings for a week",
            RecordSpec("WeekAvailability", (reports.HOTEL_ID, reports.WEEK_START)),
            composer=reports.rooms_free_for_week,
        ),
        ReportAction(
            11,
            "Get top k rooms with highest price for a date range",
            RecordSpec("TopPricesByDate", (reports.DATE_FROM, reports.DATE_TO, top_k)),
            composer=reports.top_prices_for_date_range,
        ),
        ReportAction(
            12,
            "Get top k highest booking price for a customer",
            RecordSpec(
                "TopPricesByCustomer", (reports.FIRST_NAME, reports.LAST_NAME, top_k)
            ),
            composer=reports.top_prices_for_customer,
        ),
        ReportAction(
            13,
            "Get customer total cost occurred for a give date range",
            RecordSpec(
                "CustomerTotalCost",
                (
                    reports.BOOKING_HOTEL_ID,
                    reports.FIRST_NAME,
                    reports.LAST_NAME,
                    reports.DATE_FROM,
                    reports.DATE_TO,
                ),
            ),
            composer=reports.total_cost_for_customer,
        ),
        ReportAction(
            14,
            "List the repairs made by maintenance company",
            reports.COMPANY_BY_NAME,
            composer=reports.repairs_by_company,
        ),
        ReportAction(
            15,
            "Get top k maintenance companies based on repair count",
            RecordSpec("TopCompanies", (top_k,)),
            composer=reports.top_companies_by_repairs,
        ),
        ReportAction(
            16,
            "Get number of repairs occurred per year for a given hotel room",
            REPAIR.subset("RepairRoom", "hotelID", "roomNo"),
            composer=reports.repairs_per_year,
        ),
    ]
    return OrderedDict((action.key, action) for action in actions)
