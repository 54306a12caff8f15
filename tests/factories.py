"""Test data builders."""

from bookapi.domain.books.entities import Book


def make_books() -> list[Book]:
    """Three stored books with ids 1-3."""
    return [
        Book(id=1, title="Book 1", author="Author 1", year=2001),
        Book(id=2, title="Book 2", author="Author 2", year=2002),
        Book(id=3, title="Book 3", author="Author 3", year=2003),
    ]
