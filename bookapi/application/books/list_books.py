"""
Use case: List every stored book.

Input: none
Output: list[Book], non-empty
Side effects: None.
Failure cases: NoBooksFoundError when the store is empty or returns None.
"""

import logging

from bookapi.domain.books.entities import Book
from bookapi.domain.books.errors import NoBooksFoundError
from bookapi.domain.books.ports import BookRepository

logger = logging.getLogger(__name__)


class ListBooksUseCase:
    """Returns the store's collection unmodified and unfiltered."""

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    async def execute(self) -> list[Book]:
        """Run the list use case.

        Returns:
            Every book the repository holds, in repository order.

        Raises:
            NoBooksFoundError: If the repository holds no books.
        """
        books = await self._book_repo.get_all()
        if not books:
            raise NoBooksFoundError()

        logger.info("Listed %d books.", len(books))
        return books
