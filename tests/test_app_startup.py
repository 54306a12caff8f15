"""
Tests for application startup against the SQL backend.

The lifespan creates the schema in a temporary SQLite file and,
when enabled, seeds sample books. Requests then go through
SqlBookRepository end to end.
"""

from fastapi.testclient import TestClient

from bookapi.infrastructure.books.seed import SAMPLE_BOOKS
from bookapi.main import app

BOOKS_URL = "/api/books"
OVERSIZED_ID = 2**70


class TestStartupWithSqlBackend:
    """Tests for schema creation and seeding during startup."""

    def test_schema_created_on_startup(self, sql_client) -> None:
        response = sql_client.get(BOOKS_URL)

        assert response.status_code == 404
        assert response.text == "No books found."

    def test_seeds_sample_books(self, sql_settings, monkeypatch) -> None:
        monkeypatch.setattr(sql_settings, "seed_sample_data", True)
        app.dependency_overrides.clear()

        with TestClient(app) as client:
            response = client.get(BOOKS_URL)

        assert response.status_code == 200
        assert [(b["id"], b["title"], b["author"], b["year"]) for b in response.json()] == [
            (i, b.title, b.author, b.year) for i, b in enumerate(SAMPLE_BOOKS, start=1)
        ]

    def test_seeding_skipped_on_restart(self, sql_settings, monkeypatch) -> None:
        monkeypatch.setattr(sql_settings, "seed_sample_data", True)
        app.dependency_overrides.clear()

        with TestClient(app):
            pass
        with TestClient(app) as client:
            response = client.get(BOOKS_URL)

        assert len(response.json()) == len(SAMPLE_BOOKS)


class TestSqlBackendRoutes:
    """CRUD through HTTP with the SQL repository wired in."""

    def test_create_then_fetch(self, sql_client) -> None:
        created = sql_client.post(
            BOOKS_URL, json={"title": "Dune", "author": "Frank Herbert", "year": 1965}
        )

        assert created.status_code == 201
        fetched = sql_client.get(created.headers["location"])
        assert fetched.json() == {
            "id": 1,
            "title": "Dune",
            "author": "Frank Herbert",
            "year": 1965,
        }

    def test_oversized_id_is_not_found(self, sql_client) -> None:
        message = f"Book with ID {OVERSIZED_ID} not found."

        fetched = sql_client.get(f"{BOOKS_URL}/{OVERSIZED_ID}")
        updated = sql_client.put(
            f"{BOOKS_URL}/{OVERSIZED_ID}",
            json={"title": "T", "author": "A", "year": 2000},
        )
        deleted = sql_client.delete(f"{BOOKS_URL}/{OVERSIZED_ID}")

        for response in (fetched, updated, deleted):
            assert response.status_code == 404
            assert response.text == message
