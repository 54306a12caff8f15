"""
Domain entities for the books bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Book:
    """A single book record.

    ``id`` is ``None`` until the store assigns one on creation.
    """

    title: str
    author: str
    year: int
    id: Optional[int] = None
