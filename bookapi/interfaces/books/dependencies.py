"""
Dependency injection for the books bounded context.

Provides FastAPI dependency functions that wire a repository adapter
into use cases via constructor injection. Tests replace
``get_book_repository`` through ``app.dependency_overrides``.
"""

from functools import lru_cache

from fastapi import Depends

from bookapi.application.books import (
    CreateBookUseCase,
    DeleteBookUseCase,
    GetBookUseCase,
    ListBooksUseCase,
    UpdateBookUseCase,
)
from bookapi.core.config import settings
from bookapi.core.db import get_session_factory
from bookapi.domain.books.ports import BookRepository
from bookapi.infrastructure.books import InMemoryBookRepository, SqlBookRepository


@lru_cache(maxsize=1)
def _get_in_memory_repository() -> InMemoryBookRepository:
    """Process-wide in-memory store, shared across requests."""
    return InMemoryBookRepository()


def get_book_repository() -> BookRepository:
    """Build the repository adapter selected by ``settings.repository_backend``."""
    if settings.repository_backend == "memory":
        return _get_in_memory_repository()
    return SqlBookRepository(session_factory=get_session_factory())


def get_list_books_use_case(
    repo: BookRepository = Depends(get_book_repository),
) -> ListBooksUseCase:
    return ListBooksUseCase(book_repo=repo)


def get_get_book_use_case(
    repo: BookRepository = Depends(get_book_repository),
) -> GetBookUseCase:
    return GetBookUseCase(book_repo=repo)


def get_create_book_use_case(
    repo: BookRepository = Depends(get_book_repository),
) -> CreateBookUseCase:
    return CreateBookUseCase(book_repo=repo)


def get_update_book_use_case(
    repo: BookRepository = Depends(get_book_repository),
) -> UpdateBookUseCase:
    return UpdateBookUseCase(book_repo=repo)


def get_delete_book_use_case(
    repo: BookRepository = Depends(get_book_repository),
) -> DeleteBookUseCase:
    return DeleteBookUseCase(book_repo=repo)
