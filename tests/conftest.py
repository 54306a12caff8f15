"""
Shared fixtures for the Book API test suite.

The app is driven against in-memory or stub repositories; the SQL
adapter runs against an in-process SQLite database.
"""

import os

# Must be set before bookapi.core.config is imported.
os.environ.setdefault("REPOSITORY_BACKEND", "memory")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from bookapi.core.config import settings
from bookapi.core.db import init_db
from bookapi.domain.books.ports import CommonRepository
from bookapi.infrastructure.books import InMemoryBookRepository, SqlBookRepository
from bookapi.interfaces.books.dependencies import get_book_repository
from bookapi.main import app


@pytest.fixture
def stub_repo() -> AsyncMock:
    """Repository stub whose return values each test sets explicitly."""
    return AsyncMock(spec=CommonRepository)


@pytest.fixture
def memory_repo() -> InMemoryBookRepository:
    return InMemoryBookRepository()


def _client_for(repo):
    app.dependency_overrides[get_book_repository] = lambda: repo
    return TestClient(app)


@pytest.fixture
def client(stub_repo):
    """HTTP client wired to ``stub_repo``."""
    with _client_for(stub_repo) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def memory_client(memory_repo):
    """HTTP client wired to a fresh in-memory store."""
    with _client_for(memory_repo) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def sql_repo():
    """SqlBookRepository over a private in-memory SQLite database."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await init_db(engine)
    yield SqlBookRepository(async_sessionmaker(engine, expire_on_commit=False))
    await engine.dispose()


@pytest.fixture
def sql_settings(tmp_path, monkeypatch):
    """Point the app at a fresh SQLite file through the SQL backend."""
    monkeypatch.setattr(settings, "repository_backend", "sql")
    monkeypatch.setattr(
        settings, "database_url", f"sqlite+aiosqlite:///{tmp_path / 'books.db'}"
    )
    monkeypatch.setattr(settings, "seed_sample_data", False)
    return settings


@pytest.fixture
def sql_client(sql_settings):
    """HTTP client running the real lifespan and SqlBookRepository."""
    app.dependency_overrides.clear()
    with TestClient(app) as test_client:
        yield test_client
