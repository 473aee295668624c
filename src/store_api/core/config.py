"""
Store settings, read from environment variables and an optional ``.env`` file.
"""

from enum import Enum
from functools import lru_cache
from pathlib import Path

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_PAGE_SIZE

SQLITE_FILE_PREFIX = "sqlite:///"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Environment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class DatabaseType(str, Enum):
    SQLITE = "sqlite"
    POSTGRESQL = "postgresql"


class LogFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


class Settings(BaseSettings):
    """
    Runtime configuration of the store API.

    Field names map to environment variables case-insensitively, so
    ``DATABASE_URL`` sets ``database_url`` and ``DEFAULT_PAGE_SIZE`` sets
    the page size used when a search leaves it unset.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Environment = Environment.DEVELOPMENT

    # Storage
    database_url: str = Field(
        default=f"{SQLITE_FILE_PREFIX}./data/store.db",
        description="SQLAlchemy URL of the store database",
    )
    database_echo: bool = Field(default=False, description="Log every SQL statement")

    # HTTP
    api_title: str = "Store API"
    api_version: str = "1.0.0"
    api_host: str = "0.0.0.0"
    api_port: int = Field(default=8080, ge=1, le=65535)
    api_prefix: str = Field(default="/api/v1", description="Mount point of the entity routers")

    # Searches
    default_page_size: int = Field(
        default=DEFAULT_PAGE_SIZE,
        ge=1,
        description="Rows per page when a search does not ask for a size",
    )

    # Logging
    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.TEXT
    log_file_path: Path | None = Field(default=None, description="Also write logs to this file")
    log_config_path: Path = Field(
        default=Path("config/logging.yaml"),
        description="YAML dictConfig file that replaces the built-in setup when present",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level {v!r}; expected one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_log_format(cls, v: object) -> object:
        return v.strip().lower() if isinstance(v, str) else v

    @computed_field
    @property
    def database_type(self) -> DatabaseType:
        """Backend family, derived from the URL scheme."""
        if self.database_url.startswith("sqlite"):
            return DatabaseType.SQLITE
        return DatabaseType.POSTGRESQL

    @property
    def is_sqlite(self) -> bool:
        return self.database_type is DatabaseType.SQLITE

    @property
    def is_production(self) -> bool:
        return self.environment is Environment.PRODUCTION

    def get_database_url(self) -> str:
        """Return the database URL, creating the directory of a SQLite file first."""
        if self.database_url.startswith(SQLITE_FILE_PREFIX):
            location = self.database_url[len(SQLITE_FILE_PREFIX):]
            if location and location != ":memory:":
                Path(location).parent.mkdir(parents=True, exist_ok=True)
        return self.database_url


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
