"""
Tests for application settings.
"""

from bookapi.core.config import Settings


class TestSettings:
    """Tests for Settings loading and helpers."""

    def test_defaults(self, monkeypatch) -> None:
        monkeypatch.delenv("REPOSITORY_BACKEND", raising=False)
        settings = Settings(_env_file=None)

        assert settings.api_prefix == "/api"
        assert settings.repository_backend == "sql"
        assert settings.database_url.startswith("sqlite+aiosqlite://")

    def test_reads_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("PROJECT_NAME", "Library")
        monkeypatch.setenv("SEED_SAMPLE_DATA", "true")
        monkeypatch.setenv("REPOSITORY_BACKEND", "memory")

        settings = Settings(_env_file=None)

        assert settings.project_name == "Library"
        assert settings.seed_sample_data is True
        assert settings.repository_backend == "memory"

    def test_async_url_for_postgres(self) -> None:
        settings = Settings(_env_file=None, database_url="postgresql://u:p@db:5432/books")
        assert settings.get_async_database_url() == "postgresql+asyncpg://u:p@db:5432/books"

    def test_async_url_for_plain_sqlite(self) -> None:
        settings = Settings(_env_file=None, database_url="sqlite:///./books.db")
        assert settings.get_async_database_url() == "sqlite+aiosqlite:///./books.db"

    def test_async_url_left_alone_when_driver_given(self) -> None:
        url = "sqlite+aiosqlite:///./other.db"
        assert Settings(_env_file=None, database_url=url).get_async_database_url() == url
