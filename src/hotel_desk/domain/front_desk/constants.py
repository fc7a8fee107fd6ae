"""Front-desk constants."""

from hotel_desk.utils.date_parser import DEFAULT_DATE_FORMAT, describe_format

DATE_LABEL = f"({describe_format(DEFAULT_DATE_FORMAT)})"

# Length of the window searched by "rooms available for a week"
WEEK_LENGTH_DAYS = 7

EXIT_KEY = 17
EXIT_TITLE = "< EXIT"
