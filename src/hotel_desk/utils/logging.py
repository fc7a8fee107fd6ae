"""Structured logging for the front desk, using structlog.

Events are JSON lines with an ISO-8601 timestamp. Two kinds of values never
reach a log record:

- credentials (passwords, tokens, database URLs) are replaced by
  ``[REDACTED]``
- guest personal data typed at the desk (phone numbers, birth dates,
  addresses, raw form input) is replaced by
  ``[GUEST DATA]``

The clerk works in the same terminal the logs go to, so records are written
to stderr only while file logging is off. With ``HOTEL_LOG_TO_FILE`` set they
go to a midnight-rotated ``hoteldesk.log`` under ``HOTEL_LOG_DIR`` instead.

Usage:
    >>> from hotel_desk.utils.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("statement.executed", table="Customer", parameter_count=3)
"""

import logging
import os
import re
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Dict, List, MutableMapping, Optional

import structlog
from structlog.types import EventDict, Processor

from hotel_desk.config import get_settings

SENSITIVE_PATTERNS = [
    re.compile(r".*password.*", re.IGNORECASE),
    re.compile(r".*token.*", re.IGNORECASE),
    re.compile(r".*secret.*", re.IGNORECASE),
    re.compile(r"^DATABASE_URL$", re.IGNORECASE),
    re.compile(r"^database_uri$", re.IGNORECASE),
]

# Customer columns and raw form input that identify a guest
GUEST_DATA_KEYS = frozenset(
    key.lower() for key in ("raw", "phNo", "DOB", "Address")
)

REDACTED_VALUE = "[REDACTED]"
GUEST_DATA_VALUE = "[GUEST DATA]"

LOG_FILE_NAME = "hoteldesk.log"
LOG_BACKUP_DAYS = 14


def _sanitize_value(value: Any) -> Any:
    if isinstance(value, dict):
        return sanitize_for_logging(value)
    if isinstance(value, (list, tuple)):
        return type(value)(_sanitize_value(item) for item in value)
    return value


def sanitize_for_logging(data: Dict[str, Any]) -> Dict[str, Any]:
    """Mask credentials and guest personal data before logging.

    Nested dicts and dicts inside lists or tuples are sanitized as well. The
    input is not modified.

    Example:
        >>> sanitize_for_logging({"password": "pw", "phNo": "0123", "table": "Customer"})
        {'password': '[REDACTED]', 'phNo': '[GUEST DATA]', 'table': 'Customer'}
    """
    sanitized: Dict[str, Any] = {}
    for key, value in data.items():
        if any(pattern.match(key) for pattern in SENSITIVE_PATTERNS):
            sanitized[key] = REDACTED_VALUE
        elif key.lower() in GUEST_DATA_KEYS:
            sanitized[key] = GUEST_DATA_VALUE
        else:
            sanitized[key] = _sanitize_value(value)
    return sanitized


def sanitization_processor(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> MutableMapping[str, Any]:
    """Structlog processor that sanitizes event_dict."""
    return sanitize_for_logging(dict(event_dict))


def _get_log_level() -> int:
    """Get log level from settings, falling back to the LOG_LEVEL variable."""
    try:
        level_name = get_settings().LOG_LEVEL.upper()
    except ValueError:
        # Invalid settings must not prevent logging from reporting the problem
        level_name = os.getenv("LOG_LEVEL", "WARNING").upper()

    return getattr(logging, level_name, logging.WARNING)


def _get_log_file_path() -> Optional[Path]:
    """Path of the log file, or None when file logging is disabled."""
    try:
        settings = get_settings()
    except ValueError:
        return None
    if not settings.log_to_file:
        return None
    settings.log_dir.mkdir(parents=True, exist_ok=True)
    return settings.log_dir / LOG_FILE_NAME


def _build_handlers(level: int) -> List[logging.Handler]:
    """Handlers for the root logger: the log file if enabled, else stderr."""
    log_file = _get_log_file_path()
    if log_file is None:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
    else:
        handler = TimedRotatingFileHandler(
            filename=str(log_file),
            when="midnight",
            backupCount=LOG_BACKUP_DAYS,
            encoding="utf-8",
        )
    handler.setLevel(level)
    return [handler]


def _configure_structlog() -> None:
    """Configure structlog with JSON rendering and sanitization."""
    level = _get_log_level()
    logging.basicConfig(
        format="%(message)s",
        level=level,
        handlers=_build_handlers(level),
        force=True,
    )

    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        sanitization_processor,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


_configure_structlog()


def get_logger(name: str) -> Any:
    """Get a structlog BoundLogger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)
    """
    return structlog.get_logger(name)


def bind_context(name: str, **kwargs: Any) -> Any:
    """Create a named logger with bound context fields.

    Bound values pass through the same sanitization as event fields.

    Example:
        >>> log = bind_context(__name__, action=1, title="Add new customer")
        >>> log.info("shell.action_completed", rowcount=1)
    """
    return get_logger(name).bind(**kwargs)
