"""
Database engine construction.

The engine is created from settings (or an explicit URL from the command
line) and the connection is opened eagerly so configuration problems surface
before the menu is shown.
"""

from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Connection, Engine, make_url
from sqlalchemy.exc import SQLAlchemyError

from hotel_desk.config import Settings, get_settings
from hotel_desk.utils.logging import get_logger

from .exceptions import DatabaseConnectionFailed

logger = get_logger(__name__)


def redact_url(url: str) -> str:
    """Render a database URL with the password masked."""
    try:
        return make_url(url).render_as_string(hide_password=True)
    except SQLAlchemyError:
        return url.split("@")[-1]


def create_database_engine(
    url: Optional[str] = None, settings: Optional[Settings] = None
) -> Engine:
    """
    Create a SQLAlchemy engine.

    Args:
        url: Explicit database URL; defaults to the configured connection string
        settings: Settings instance; defaults to ``get_settings()``

    Returns:
        Engine (no connection opened yet)
    """
    if url is None:
        url = (settings or get_settings()).get_database_connection_string()
    logger.debug("database.engine_created", url=redact_url(url))
    return create_engine(url)


def open_connection(engine: Engine) -> Connection:
    """
    Open a connection, translating driver errors.

    Raises:
        DatabaseConnectionFailed: If the database is unreachable or refuses login
    """
    try:
        connection = engine.connect()
    except SQLAlchemyError as exc:
        url_preview = engine.url.render_as_string(hide_password=True)
        logger.error(
            "database.connection_failed",
            url=url_preview,
            error=str(exc.orig if getattr(exc, "orig", None) else exc),
        )
        raise DatabaseConnectionFailed(exc, url_preview) from exc

    logger.info("database.connected", url=engine.url.render_as_string(hide_password=True))
    return connection
