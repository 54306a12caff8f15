"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here — no scattered magic strings.
"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        api_prefix: Path prefix under which all routers are mounted.
        rate_limit_enabled: Turn per-client rate limiting on or off.
        rate_limit_default: Default rate limit for all endpoints.
        database_url: SQLAlchemy async database URL.
        database_echo: Echo SQL statements to the log.
        repository_backend: Which book repository adapter to wire ("sql" or "memory").
        seed_sample_data: Insert sample books on startup when the store is empty.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Book API"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/api"
    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"

    database_url: str = "sqlite+aiosqlite:///./books.db"
    database_echo: bool = False
    repository_backend: Literal["sql", "memory"] = "sql"
    seed_sample_data: bool = False

    def get_async_database_url(self) -> str:
        """Return the database URL with an async driver.

        Plain ``postgresql://`` and ``sqlite://`` URLs are rewritten to
        their asyncpg / aiosqlite equivalents.
        """
        url = self.database_url
        if url.startswith("postgresql://"):
            return url.replace("postgresql://", "postgresql+asyncpg://", 1)
        if url.startswith("sqlite://"):
            return url.replace("sqlite://", "sqlite+aiosqlite://", 1)
        return url


settings = Settings()
