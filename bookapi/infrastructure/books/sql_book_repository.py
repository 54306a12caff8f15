"""
Adapter: SQL book repository.

Implements the BookRepository port.
Reads and writes the ``books`` table through an async SQLAlchemy session.
"""

import logging
from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Row
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from bookapi.domain.books.entities import Book
from bookapi.domain.books.ports import BookRepository
from bookapi.infrastructure.books.tables import books_table

logger = logging.getLogger(__name__)

# Signed 64-bit range of the id column (SQLite INTEGER, Postgres BIGINT).
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1


def _storable_id(entity_id: int) -> bool:
    return MIN_ID <= entity_id <= MAX_ID


def _row_to_book(row: Row) -> Book:
    return Book(id=row.id, title=row.title, author=row.author, year=row.year)


class SqlBookRepository(BookRepository):
    """Persists books in a relational database.

    Each operation opens its own session; writes are committed
    before the method returns.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def get_all(self) -> list[Book]:
        """Return every book ordered by id."""
        query = select(books_table).order_by(books_table.c.id)

        async with self._session_factory() as session:
            rows = (await session.execute(query)).fetchall()

        logger.debug("Fetched %d books.", len(rows))
        return [_row_to_book(row) for row in rows]

    async def get_by_id(self, entity_id: int) -> Optional[Book]:
        """Return the book with the given id, or None."""
        if not _storable_id(entity_id):
            return None

        query = select(books_table).where(books_table.c.id == entity_id)

        async with self._session_factory() as session:
            row = (await session.execute(query)).first()

        return _row_to_book(row) if row is not None else None

    async def create(self, entity: Book) -> Book:
        """Insert a new row and return the book with its generated id.

        Raises:
            ValueError: If ``entity`` is None.
        """
        if entity is None:
            raise ValueError("book must not be None")

        stmt = insert(books_table).values(
            title=entity.title,
            author=entity.author,
            year=entity.year,
        )

        async with self._session_factory() as session:
            result = await session.execute(stmt)
            await session.commit()

        new_id = result.inserted_primary_key[0]
        return Book(id=new_id, title=entity.title, author=entity.author, year=entity.year)

    async def update(self, entity_id: int, entity: Book) -> Optional[Book]:
        """Replace title, author and year of the row with ``entity_id``.

        A body that carries an id different from ``entity_id`` is
        treated as a miss.

        Returns:
            The updated book, or None if no row was changed.
        """
        if entity.id is not None and entity.id != entity_id:
            logger.warning(
                "Update rejected: path id %d does not match body id %d",
                entity_id,
                entity.id,
            )
            return None
        if not _storable_id(entity_id):
            return None

        stmt = (
            update(books_table)
            .where(books_table.c.id == entity_id)
            .values(title=entity.title, author=entity.author, year=entity.year)
        )

        async with self._session_factory() as session:
            result = await session.execute(stmt)
            await session.commit()

        if result.rowcount == 0:
            return None
        return Book(id=entity_id, title=entity.title, author=entity.author, year=entity.year)

    async def delete(self, entity_id: int) -> bool:
        """Delete the row with ``entity_id``. Returns True if a row was removed."""
        if not _storable_id(entity_id):
            return False

        stmt = delete(books_table).where(books_table.c.id == entity_id)

        async with self._session_factory() as session:
            result = await session.execute(stmt)
            await session.commit()

        return result.rowcount > 0
