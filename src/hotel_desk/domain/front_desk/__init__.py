"""Front-desk domain: the numbered menu actions of the hotel desk."""

from .booking import BOOKING_FORM, BookRoomAction, customer_lookup
from .models import FrontDeskAction, InsertAction, RecordNotFound, ReportAction
from .service import build_actions

__all__ = [
    "BOOKING_FORM",
    "BookRoomAction",
    "customer_lookup",
    "FrontDeskAction",
    "InsertAction",
    "RecordNotFound",
    "ReportAction",
    "build_actions",
]
