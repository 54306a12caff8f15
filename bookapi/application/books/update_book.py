"""
Use case: Replace the title, author and year of an existing book.

Input: book_id from the path, Book from the body
Output: Book as returned by the repository
Side effects: Updates one row.
Failure cases: BookNotFoundError (always reported with the path id).
"""

import logging

from bookapi.domain.books.entities import Book
from bookapi.domain.books.errors import BookNotFoundError
from bookapi.domain.books.ports import BookRepository

logger = logging.getLogger(__name__)


class UpdateBookUseCase:
    """Delegates the update to the repository and maps absence to an error."""

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    async def execute(self, book_id: int, book: Book) -> Book:
        """Run the update use case.

        The id carried by ``book`` is not compared with ``book_id``;
        the repository decides what a mismatch means.

        Args:
            book_id: Identifier from the request path.
            book: Replacement values.

        Returns:
            The repository's result, verbatim.

        Raises:
            BookNotFoundError: If the repository reports nothing was updated.
        """
        logger.info("Updating book id=%d", book_id)

        updated = await self._book_repo.update(book_id, book)
        if updated is None:
            raise BookNotFoundError(book_id)
        return updated
