"""
Domain-specific errors for the books bounded context.

All errors raised from the domain and application layers are defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class BookDomainError(Exception):
    """Base error for all books domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class BookNotFoundError(BookDomainError):
    """Raised when no book exists for the requested identifier."""

    def __init__(self, book_id: int) -> None:
        super().__init__(f"Book with ID {book_id} not found.")
        self.book_id = book_id


class NoBooksFoundError(BookDomainError):
    """Raised when the store holds no books at all."""

    def __init__(self) -> None:
        super().__init__("No books found.")


class InvalidBookError(BookDomainError):
    """Raised when a book payload is missing or malformed."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid book: {reason}")
        self.reason = reason
