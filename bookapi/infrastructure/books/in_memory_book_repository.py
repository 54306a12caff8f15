"""
Adapter: In-memory book repository.

Implements the BookRepository port with a process-local dict.
Used for tests and for running the service without a database.
"""

import asyncio
from dataclasses import replace
from typing import Iterable, Optional

from bookapi.domain.books.entities import Book
from bookapi.domain.books.ports import BookRepository


class InMemoryBookRepository(BookRepository):
    """Dict-backed repository with store-assigned, increasing ids.

    Returned books are copies; callers cannot mutate stored state.
    """

    def __init__(self, seed: Optional[Iterable[Book]] = None) -> None:
        self._books: dict[int, Book] = {}
        self._next_id = 1
        self._lock = asyncio.Lock()
        for book in seed or ():
            self._insert(book)

    def _insert(self, book: Book) -> Book:
        stored = replace(book, id=self._next_id)
        self._books[stored.id] = stored
        self._next_id += 1
        return replace(stored)

    async def get_all(self) -> list[Book]:
        return [replace(book) for _, book in sorted(self._books.items())]

    async def get_by_id(self, entity_id: int) -> Optional[Book]:
        book = self._books.get(entity_id)
        return replace(book) if book is not None else None

    async def create(self, entity: Book) -> Book:
        if entity is None:
            raise ValueError("book must not be None")
        async with self._lock:
            return self._insert(entity)

    async def update(self, entity_id: int, entity: Book) -> Optional[Book]:
        if entity.id is not None and entity.id != entity_id:
            return None
        async with self._lock:
            if entity_id not in self._books:
                return None
            updated = replace(entity, id=entity_id)
            self._books[entity_id] = updated
            return replace(updated)

    async def delete(self, entity_id: int) -> bool:
        async with self._lock:
            return self._books.pop(entity_id, None) is not None
