"""
Booking creation.

A booking names its customer by first and last name. The customer's ID is
looked up first, then the booking row is inserted with that ID.
"""

from dataclasses import dataclass
from typing import Sequence

from hotel_desk.infrastructure.schema.core import RecordSpec
from hotel_desk.infrastructure.schema.definitions import BOOKING, CUSTOMER
from hotel_desk.infrastructure.sql import (
    BuiltStatement,
    ExtraClauses,
    StatementMode,
    build,
    check_alignment,
)
from hotel_desk.infrastructure.validation import FieldValue, validate
from hotel_desk.io.repositories.statement_executor import ExecutionResult, StatementExecutor
from hotel_desk.utils.logging import get_logger

from .models import FrontDeskAction, RecordNotFound
from .reports import CUSTOMER_NAME

logger = get_logger(__name__)

BOOKING_FORM = RecordSpec(
    "BookingForm",
    (
        BOOKING.get_field("bID"),
        CUSTOMER.get_field("fName"),
        CUSTOMER.get_field("lName"),
        BOOKING.get_field("hotelID"),
        BOOKING.get_field("roomNo"),
        BOOKING.get_field("bookingDate"),
        BOOKING.get_field("noOfPeople"),
        BOOKING.get_field("price"),
    ),
)


def customer_lookup(first_name: FieldValue, last_name: FieldValue) -> BuiltStatement:
    """Statement returning the IDs of customers with the given name."""
    return build(
        "Customer",
        CUSTOMER_NAME,
        [first_name, last_name],
        StatementMode.SELECT,
        ExtraClauses(projection=("customerID",), order_by="customerID"),
    )


@dataclass(frozen=True)
class BookRoomAction(FrontDeskAction):
    """Creates a booking for a customer identified by name."""

    @property
    def writes(self) -> bool:
        return True

    def booking_values(
        self, values: Sequence[FieldValue], customer_id: int
    ) -> Sequence[FieldValue]:
        """Booking record values with the resolved customer ID filled in."""
        by_name = {value.name: value for value in values}
        customer = validate(BOOKING.get_field("customer"), str(customer_id))
        return [
            customer if spec.name == "customer" else by_name[spec.name]
            for spec in BOOKING.fields
        ]

    def compose_insert(
        self, values: Sequence[FieldValue], customer_id: int
    ) -> BuiltStatement:
        return build(
            "Booking",
            BOOKING,
            self.booking_values(values, customer_id),
            StatementMode.INSERT,
        )

    def run(self, executor: StatementExecutor, values: Sequence[FieldValue]) -> ExecutionResult:
        """
        Resolve the customer and insert the booking.

        Raises:
            RecordNotFound: If zero or several customers carry the name
            DatabaseExecutionFailed: If either statement fails
        """
        check_alignment(self.form, values)
        by_name = {value.name: value for value in values}
        first_name, last_name = by_name["fName"], by_name["lName"]

        matches = executor.execute(customer_lookup(first_name, last_name))
        if len(matches.rows) != 1:
            error = RecordNotFound(
                "Customer",
                {"fName": first_name.parsed, "lName": last_name.parsed},
                matches=len(matches.rows),
            )
            logger.warning("booking.customer_unresolved", **error.to_dict())
            raise error

        return executor.execute(self.compose_insert(values, matches.scalar()))
