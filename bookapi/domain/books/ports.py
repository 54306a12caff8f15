"""
Port interfaces (ABCs) for the books bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from bookapi.domain.books.entities import Book

T = TypeVar("T")


class CommonRepository(ABC, Generic[T]):
    """Generic async CRUD port over a single entity type.

    Absence is reported as ``None`` (or ``False`` for delete),
    never as an exception.
    """

    @abstractmethod
    async def get_all(self) -> Optional[list[T]]:
        """Return every stored entity. May be empty."""
        raise NotImplementedError

    @abstractmethod
    async def get_by_id(self, entity_id: int) -> Optional[T]:
        """Return the entity with the given id, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    async def create(self, entity: T) -> T:
        """Persist a new entity and return it with its assigned id."""
        raise NotImplementedError

    @abstractmethod
    async def update(self, entity_id: int, entity: T) -> Optional[T]:
        """Replace the entity stored under ``entity_id``.

        Returns:
            The updated entity, or None if nothing is stored under that id.
        """
        raise NotImplementedError

    @abstractmethod
    async def delete(self, entity_id: int) -> bool:
        """Remove the entity with the given id. Returns True if one was removed."""
        raise NotImplementedError


BookRepository = CommonRepository[Book]
