"""
Use case: Delete a book by id.

Input: book_id
Output: None
Side effects: Removes one row.
Failure cases: BookNotFoundError when the repository reports nothing was removed.
"""

import logging

from bookapi.domain.books.errors import BookNotFoundError
from bookapi.domain.books.ports import BookRepository

logger = logging.getLogger(__name__)


class DeleteBookUseCase:
    """Removes a book and maps a False result to BookNotFoundError."""

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    async def execute(self, book_id: int) -> None:
        deleted = await self._book_repo.delete(book_id)
        if not deleted:
            raise BookNotFoundError(book_id)
        logger.info("Deleted book id=%d", book_id)
