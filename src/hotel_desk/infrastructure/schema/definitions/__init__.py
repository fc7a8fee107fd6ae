"""Record definitions for every table of the hotel schema.

Importing this package registers all records.
"""

from .assigned import ASSIGNED
from .booking import BOOKING
from .customer import CUSTOMER
from .maintenance_company import MAINTENANCE_COMPANY
from .repair import REPAIR
from .request import REQUEST
from .room import ROOM

__all__ = [
    "ASSIGNED",
    "BOOKING",
    "CUSTOMER",
    "MAINTENANCE_COMPANY",
    "REPAIR",
    "REQUEST",
    "ROOM",
]
