"""Database connector exceptions.

Provides structured context for failures surfaced by the database driver.
"""

from typing import Any, Dict, Optional


class DatabaseExecutionFailed(Exception):
    """Structured error for a statement the database refused or could not run."""

    def __init__(
        self,
        underlying: Exception,
        statement: Optional[str] = None,
        message: Optional[str] = None,
    ):
        self.underlying = underlying
        self.statement = statement
        super().__init__(message or _driver_message(underlying))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to structured dict for logging.

        Parameter values are never included; only the statement text.
        """
        return {
            "error_type": "DatabaseExecutionFailed",
            "message": str(self),
            "statement": self.statement,
            "original_error_type": type(self.underlying).__name__,
        }


class DatabaseConnectionFailed(Exception):
    """Raised when no connection to the configured database can be opened."""

    def __init__(self, underlying: Exception, url_preview: str):
        self.underlying = underlying
        self.url_preview = url_preview
        super().__init__(
            f"Unable to connect to database {url_preview}: {_driver_message(underlying)}"
        )


def _driver_message(error: Exception) -> str:
    """Extract the driver's own message from a SQLAlchemy wrapper exception."""
    original = getattr(error, "orig", None)
    text = str(original if original is not None else error)
    return text.strip().splitlines()[0] if text.strip() else type(error).__name__
