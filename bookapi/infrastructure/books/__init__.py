"""Books bounded context: repository adapters."""

from bookapi.infrastructure.books.in_memory_book_repository import (
    InMemoryBookRepository,
)
from bookapi.infrastructure.books.sql_book_repository import SqlBookRepository

__all__ = ["InMemoryBookRepository", "SqlBookRepository"]
