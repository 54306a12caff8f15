"""
Use case: Fetch a single book by id.

Input: book_id (int, passed through without range checks)
Output: Book
Side effects: None.
Failure cases: BookNotFoundError.
"""

import logging

from bookapi.domain.books.entities import Book
from bookapi.domain.books.errors import BookNotFoundError
from bookapi.domain.books.ports import BookRepository

logger = logging.getLogger(__name__)


class GetBookUseCase:
    """Looks a book up by id and turns absence into BookNotFoundError."""

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    async def execute(self, book_id: int) -> Book:
        """Run the fetch use case.

        Args:
            book_id: Identifier to look up. Zero and negative ids are
                forwarded to the repository unchanged.

        Returns:
            The stored book.

        Raises:
            BookNotFoundError: If the repository has no book with that id.
        """
        logger.info("Fetching book id=%d", book_id)

        book = await self._book_repo.get_by_id(book_id)
        if book is None:
            raise BookNotFoundError(book_id)
        return book
