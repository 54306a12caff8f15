"""
Use case: Create a new book.

Input: Book without id
Output: Book as stored, with the id assigned by the repository
Side effects: Persists one row.
Failure cases: InvalidBookError when no book is given.
"""

import logging
from typing import Optional

from bookapi.domain.books.entities import Book
from bookapi.domain.books.errors import InvalidBookError
from bookapi.domain.books.ports import BookRepository

logger = logging.getLogger(__name__)


class CreateBookUseCase:
    """Forwards the new book to the repository unchanged."""

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    async def execute(self, book: Optional[Book]) -> Book:
        """Run the create use case.

        Args:
            book: The book to store. Any id it carries is left for the
                repository to handle.

        Returns:
            The stored book including its assigned id.

        Raises:
            InvalidBookError: If ``book`` is None.
        """
        if book is None:
            raise InvalidBookError("request body is required")

        created = await self._book_repo.create(book)
        logger.info("Created book id=%s", created.id)
        return created
