"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - database_type must be one of ALLOWED_DB_TYPES (startup fails otherwise)
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - database_url, when set, wins over the host/port/credential fields
    - Defaults provided for all non-secret settings: works with docker-compose
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

from app.core.constants import ALLOWED_DB_TYPES, DB_DRIVERS


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_type: str = "postgres"
    database_host: str = "localhost"
    database_port: int = 5432
    database_username: str = "postgres"
    database_password: str = "postgres"
    database_name: str = "users"
    database_url: str | None = None
    database_sync: bool = False
    database_pool_size: int = 20
    database_max_overflow: int = 10

    @field_validator("database_type")
    @classmethod
    def check_database_type(cls, v: str) -> str:
        if v not in ALLOWED_DB_TYPES:
            raise ValueError(
                f"database_type must be one of: {', '.join(ALLOWED_DB_TYPES)}",
            )
        return v

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str | None) -> str | None:
        """Hosting providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v or None

    # Characters API (Rick and Morty)
    characters_api_url: str = "https://rickandmortyapi.com/api"
    characters_api_liveness_url: str = "https://rickandmortyapi.com/api"
    characters_api_timeout_seconds: float = 10.0

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def sqlalchemy_url(self) -> str:
        """Async SQLAlchemy URL for the configured engine."""
        if self.database_url:
            return self.database_url
        drivername = DB_DRIVERS[self.database_type]
        if self.database_type == "sqlite":
            return URL.create(drivername, database=self.database_name).render_as_string(
                hide_password=False,
            )
        return URL.create(
            drivername,
            username=self.database_username,
            password=self.database_password,
            host=self.database_host,
            port=self.database_port,
            database=self.database_name,
        ).render_as_string(hide_password=False)

    @property
    def pooled(self) -> bool:
        """SQLite's async driver does not take pool sizing arguments."""
        return not self.sqlalchemy_url.startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    return Settings()
