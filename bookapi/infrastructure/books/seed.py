"""
Sample data for a fresh store.

Inserts a handful of well-known books when the repository is empty.
Enabled with the ``SEED_SAMPLE_DATA`` setting.
"""

import logging

from bookapi.domain.books.entities import Book
from bookapi.domain.books.ports import BookRepository

logger = logging.getLogger(__name__)

SAMPLE_BOOKS = (
    Book(title="Nineteen Eighty-Four", author="George Orwell", year=1949),
    Book(title="To Kill a Mockingbird", author="Harper Lee", year=1960),
    Book(title="The Hobbit", author="J. R. R. Tolkien", year=1937),
)


async def seed_sample_books(repo: BookRepository) -> int:
    """Insert SAMPLE_BOOKS if the repository holds no books.

    Returns:
        Number of books inserted.
    """
    if await repo.get_all():
        logger.info("Store already populated; skipping sample data.")
        return 0

    for book in SAMPLE_BOOKS:
        await repo.create(book)
    logger.info("Seeded %d sample books.", len(SAMPLE_BOOKS))
    return len(SAMPLE_BOOKS)
