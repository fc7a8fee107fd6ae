"""
HotelDesk CLI entry point.

Usage:
    python -m hotel_desk.cli [options]

Examples:
    # Connect using HOTEL_DATABASE_* settings
    python -m hotel_desk.cli

    # Override individual connection settings
    python -m hotel_desk.cli --host db.local --dbname hotel --user clerk

    # Use a complete URL
    python -m hotel_desk.cli --database-url postgresql://clerk@db.local/hotel
"""

import argparse
import sys
from typing import Any, Dict, List, Optional

from pydantic import ValidationError
from rich.console import Console

from hotel_desk.config import Settings, get_settings
from hotel_desk.domain.front_desk import build_actions
from hotel_desk.io.connectors import (
    DatabaseConnectionFailed,
    create_database_engine,
    open_connection,
)
from hotel_desk.io.repositories import StatementExecutor
from hotel_desk.utils.logging import get_logger

from .shell import FrontDeskShell

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hotel-desk",
        description="HotelDesk - interactive hotel front-desk console",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m hotel_desk.cli
  python -m hotel_desk.cli --host db.local --dbname hotel --user clerk
  python -m hotel_desk.cli --database-url postgresql://clerk@db.local/hotel
        """,
    )
    parser.add_argument("--database-url", help="Complete database URL")
    parser.add_argument("--host", help="Database host")
    parser.add_argument("--port", type=int, help="Database port")
    parser.add_argument("--dbname", help="Database name")
    parser.add_argument("--user", help="Database user")
    parser.add_argument("--password", help="Database password")
    parser.add_argument(
        "--no-greeting",
        action="store_true",
        help="Skip the banner before the main menu",
    )
    return parser


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """
    Return settings with command-line connection options applied.

    Component options (``--host`` and friends) replace any configured
    database URI; ``--database-url`` replaces everything. The result is
    validated again, so production still requires PostgreSQL.

    Raises:
        ValidationError: If the overridden settings are invalid
    """
    components = {
        "database_host": args.host,
        "database_port": args.port,
        "database_db": args.dbname,
        "database_user": args.user,
        "database_password": args.password,
    }
    update: Dict[str, Any] = {
        key: value for key, value in components.items() if value is not None
    }
    if args.database_url is not None:
        update["database_uri"] = args.database_url
    elif update:
        update["database_uri"] = None
    if args.no_greeting:
        update["show_greeting"] = False
    if not update:
        return settings
    return Settings.model_validate({**settings.model_dump(), **update})


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for invalid settings or an unreachable
        database)
    """
    args = build_parser().parse_args(argv)
    console = Console(highlight=False)
    try:
        settings = apply_overrides(get_settings(), args)
    except ValidationError as exc:
        logger.error("configuration.invalid", error_count=exc.error_count())
        # str(exc) would echo the input values, password included
        reasons = "; ".join(error["msg"] for error in exc.errors())
        console.print(f"Invalid configuration: {reasons}", style="red", markup=False)
        return 1

    engine = create_database_engine(settings=settings)
    try:
        connection = open_connection(engine)
    except DatabaseConnectionFailed as exc:
        console.print(str(exc), style="red", markup=False)
        engine.dispose()
        return 1

    try:
        shell = FrontDeskShell(
            build_actions(settings),
            StatementExecutor(connection),
            connection=connection,
            console=console,
        )
        return shell.run(greet=settings.show_greeting)
    finally:
        connection.close()
        engine.dispose()
        logger.info("database.disconnected")


if __name__ == "__main__":
    sys.exit(main())
