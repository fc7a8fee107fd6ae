"""
Date parsing utilities for HotelDesk.

Front-desk prompts accept dates in one fixed format (day/month/year by
default). Full-width digits pasted from other systems are normalized before
parsing.
"""

import logging
from datetime import date, datetime

logger = logging.getLogger(__name__)

DEFAULT_DATE_FORMAT = "%d/%m/%Y"

MIN_YEAR = 1900
MAX_YEAR = 2100


def _normalize_fullwidth_digits(value: str) -> str:
    """Convert full-width digits (０-９) and slash to half-width equivalents."""
    translation_table = str.maketrans("０１２３４５６７８９／", "0123456789/")
    return value.translate(translation_table)


def _validate_date_range(
    parsed: date, min_year: int = MIN_YEAR, max_year: int = MAX_YEAR
) -> date:
    """Ensure parsed date falls within allowed range."""
    if not (min_year <= parsed.year <= max_year):
        raise ValueError(
            f"Date {parsed.isoformat()} outside valid range {min_year}-{max_year}"
        )
    return parsed


def parse_date(value: str, date_format: str = DEFAULT_DATE_FORMAT) -> date:
    """
    Parse a user-entered date string into a ``date``.

    Args:
        value: Raw date text, e.g. ``"24/12/2024"``
        date_format: ``strptime`` format the value must match

    Returns:
        Parsed date

    Raises:
        ValueError: If the value does not match the format or the year is
            outside 1900-2100

    Example:
        >>> parse_date("01/02/2024")
        datetime.date(2024, 2, 1)
    """
    raw = _normalize_fullwidth_digits(value.strip())
    if not raw:
        raise ValueError("Cannot parse an empty string as date")

    try:
        parsed = datetime.strptime(raw, date_format).date()
    except ValueError as exc:
        logger.debug("Unable to parse date value with %s", date_format)
        raise ValueError(
            f"Cannot parse '{value}' as date. Expected format: {describe_format(date_format)}"
        ) from exc

    return _validate_date_range(parsed)


def describe_format(date_format: str) -> str:
    """
    Render a strptime format the way prompts show it.

    Example:
        >>> describe_format("%d/%m/%Y")
        'DD/MM/YYYY'
    """
    return (
        date_format.replace("%d", "DD")
        .replace("%m", "MM")
        .replace("%Y", "YYYY")
        .replace("%y", "YY")
    )
