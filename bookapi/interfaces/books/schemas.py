"""
Pydantic schemas for books API request/response validation.

These schemas define the API contract.
No business logic belongs here.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from bookapi.domain.books.entities import Book

TITLE_MAX_LEN = 255
AUTHOR_MAX_LEN = 255


class BookCreateRequest(BaseModel):
    """Request schema for creating a book. The store assigns the id.

    Attributes:
        title: Book title.
        author: Author name.
        year: Publication year.
    """

    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LEN, description="Book title")
    author: str = Field(..., min_length=1, max_length=AUTHOR_MAX_LEN, description="Author name")
    year: int = Field(..., description="Publication year")

    def to_entity(self) -> Book:
        return Book(title=self.title, author=self.author, year=self.year)


class BookUpdateRequest(BookCreateRequest):
    """Request schema for replacing a book.

    Attributes:
        id: Optional id carried in the body. Must match the path id
            for the update to apply.
    """

    id: Optional[int] = Field(default=None, description="Book id, if repeated in the body")

    def to_entity(self) -> Book:
        return Book(id=self.id, title=self.title, author=self.author, year=self.year)


class BookResponse(BaseModel):
    """A stored book."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    author: str
    year: int


class ErrorResponse(BaseModel):
    """Standard JSON error response."""

    error: str
    detail: Optional[str] = None


class HealthResponse(BaseModel):
    """Response schema for the health endpoint."""

    status: str
    version: str
