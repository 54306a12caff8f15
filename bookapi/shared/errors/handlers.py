"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
No stack traces or internal details are exposed to clients.
Not-found responses carry the bare message as plain text;
everything else uses the JSON error body.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from bookapi.domain.books.errors import (
    BookDomainError,
    BookNotFoundError,
    InvalidBookError,
    NoBooksFoundError,
)

logger = logging.getLogger(__name__)

HTTP_404 = 404
HTTP_422 = 422
HTTP_500 = 500


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def _not_found_response(message: str) -> PlainTextResponse:
    return PlainTextResponse(message, status_code=HTTP_404)


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(BookNotFoundError)
    async def handle_book_not_found(
        _request: Request, exc: BookNotFoundError
    ) -> PlainTextResponse:
        """Handle a missing book id."""
        logger.warning("Book not found: %d", exc.book_id)
        return _not_found_response(exc.message)

    @app.exception_handler(NoBooksFoundError)
    async def handle_no_books_found(
        _request: Request, exc: NoBooksFoundError
    ) -> PlainTextResponse:
        """Handle an empty store on list."""
        logger.warning("No books found")
        return _not_found_response(exc.message)

    @app.exception_handler(InvalidBookError)
    async def handle_invalid_book(
        _request: Request, exc: InvalidBookError
    ) -> JSONResponse:
        """Handle a missing or malformed book payload."""
        logger.warning("Invalid book payload: %s", exc.reason)
        return _error_response(HTTP_422, "Invalid book", exc.reason)

    @app.exception_handler(BookDomainError)
    async def handle_book_domain(
        _request: Request, exc: BookDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled books domain errors."""
        logger.error("Unhandled books domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
