"""Books bounded context: use cases."""

from bookapi.application.books.create_book import CreateBookUseCase
from bookapi.application.books.delete_book import DeleteBookUseCase
from bookapi.application.books.get_book import GetBookUseCase
from bookapi.application.books.list_books import ListBooksUseCase
from bookapi.application.books.update_book import UpdateBookUseCase

__all__ = [
    "CreateBookUseCase",
    "DeleteBookUseCase",
    "GetBookUseCase",
    "ListBooksUseCase",
    "UpdateBookUseCase",
]
