"""
Configuration management for HotelDesk.

This module provides environment-based configuration using Pydantic BaseSettings,
so the same front end can point at a local development database, a staging
copy, or the production PostgreSQL server without code changes.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

import structlog
from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = structlog.get_logger(__name__)

# Determine project root for resolving .env by default
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("HOTEL_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE


class DatabaseSettings:
    """
    Database settings compatibility layer for unified DSN retrieval.

    Supports both component-based and URI-based connection strings.
    """

    def __init__(
        self,
        host: str,
        port: int = 5432,
        user: str = "",
        password: str = "",
        db: str = "",
        uri: Optional[str] = None,
    ):
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.db = db
        self.uri = uri

    def get_connection_string(self) -> str:
        """
        Get PostgreSQL connection string.

        Returns:
            Database connection string (DSN)
        """
        if self.uri:
            return self.uri
        credentials = self.user
        if self.password:
            credentials = f"{self.user}:{self.password}"
        if credentials:
            credentials = f"{credentials}@"
        return f"postgresql://{credentials}{self.host}:{self.port}/{self.db}"


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Environment variables are loaded with the HOTEL_ prefix, e.g.
    HOTEL_DATABASE_PORT overrides ``database_port``. ENVIRONMENT and
    LOG_LEVEL are read without prefix.
    """

    ENVIRONMENT: Literal["dev", "staging", "prod"] = Field(
        default="dev",
        validation_alias="ENVIRONMENT",
        description="Deployment environment",
    )
    LOG_LEVEL: str = Field(
        default="WARNING",
        validation_alias="LOG_LEVEL",
        description="Logging level (uppercase); WARNING keeps the menu readable",
    )

    app_name: str = Field(default="HotelDesk", description="Application name")

    # Database configuration - nested settings with HOTEL_DATABASE__ prefix
    database_host: str = Field(default="localhost", description="Database host")
    database_port: int = Field(default=5432, description="Database port")
    database_user: str = Field(default="postgres", description="Database user")
    database_password: str = Field(default="", description="Database password")
    database_db: str = Field(default="hotel", description="Database name")
    database_uri: Optional[str] = Field(
        default=None,
        description="Complete database URI",
        validation_alias=AliasChoices(
            "HOTEL_DATABASE__URI", "HOTEL_DATABASE_URI", "DATABASE_URL"
        ),
    )

    # Front desk behaviour
    top_k_max: int = Field(
        default=1000,
        ge=1,
        description="Upper bound accepted for top-k prompts",
    )
    show_greeting: bool = Field(
        default=True, description="Print the banner before the main menu"
    )

    # Logging output
    log_to_file: bool = Field(
        default=False, description="Write logs to a rotating file instead of stderr"
    )
    log_dir: Path = Field(default=Path("logs"), description="Directory for the log file")

    def get_database_connection_string(self) -> str:
        """Get the database connection string.

        Priority order:
        1) HOTEL_DATABASE__URI / HOTEL_DATABASE_URI / DATABASE_URL
        2) Construct from individual HOTEL_DATABASE_* components

        Automatically corrects 'postgres://' scheme to 'postgresql://' for
        SQLAlchemy compatibility.
        """
        final_uri = self.database_uri or self.database.get_connection_string()

        if final_uri.startswith("postgres://"):
            final_uri = final_uri.replace("postgres://", "postgresql://", 1)

        return final_uri

    @property
    def database(self) -> DatabaseSettings:
        """Database settings assembled from individual configuration fields."""
        return DatabaseSettings(
            host=self.database_host,
            port=self.database_port,
            user=self.database_user,
            password=self.database_password,
            db=self.database_db,
            uri=self.database_uri,
        )

    @model_validator(mode="after")
    def validate_production_database_url(self) -> "Settings":
        """Validate that production environment uses PostgreSQL.

        Raises:
            ValueError: If ENVIRONMENT is 'prod' and database URL is not PostgreSQL
        """
        db_url = self.get_database_connection_string()

        if self.ENVIRONMENT == "prod" and not db_url.startswith("postgresql"):
            db_url_preview = db_url[:20]
            logger.error(
                "configuration.invalid_production_database",
                url_preview=db_url_preview,
            )
            raise ValueError(
                "Production environment requires PostgreSQL database. "
                f"Database URL must start with 'postgresql', "
                f"got: {db_url_preview}..."
            )

        return self

    model_config = SettingsConfigDict(
        env_prefix="HOTEL_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are loaded once and reused for the lifetime of the process.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()
