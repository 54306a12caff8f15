"""
FastAPI router for the books bounded context.

All routes delegate to use cases. No business logic here.
Input validation is handled by Pydantic schemas.
Not-found mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, Request, Response, status

from bookapi.application.books import (
    CreateBookUseCase,
    DeleteBookUseCase,
    GetBookUseCase,
    ListBooksUseCase,
    UpdateBookUseCase,
)
from bookapi.interfaces.books.dependencies import (
    get_create_book_use_case,
    get_delete_book_use_case,
    get_get_book_use_case,
    get_list_books_use_case,
    get_update_book_use_case,
)
from bookapi.interfaces.books.schemas import (
    BookCreateRequest,
    BookResponse,
    BookUpdateRequest,
    ErrorResponse,
)

router = APIRouter(prefix="/books", tags=["books"])

NOT_FOUND_RESPONSE = {404: {"description": "Not found (plain text message)"}}


@router.get(
    "",
    response_model=list[BookResponse],
    responses=NOT_FOUND_RESPONSE,
    summary="List books",
    description="Return every stored book. 404 when the store is empty.",
)
async def list_books(
    use_case: ListBooksUseCase = Depends(get_list_books_use_case),
) -> list[BookResponse]:
    """List all books."""
    books = await use_case.execute()
    return [BookResponse.model_validate(book) for book in books]


@router.get(
    "/{book_id}",
    name="get_book_by_id",
    response_model=BookResponse,
    responses=NOT_FOUND_RESPONSE,
    summary="Get a book",
    description="Return the book with the given id.",
)
async def get_book_by_id(
    book_id: int,
    use_case: GetBookUseCase = Depends(get_get_book_use_case),
) -> BookResponse:
    """Get a single book by id."""
    book = await use_case.execute(book_id)
    return BookResponse.model_validate(book)


@router.post(
    "",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": ErrorResponse}},
    summary="Create a book",
    description="Store a new book. The Location header points at the new record.",
)
async def create_book(
    payload: BookCreateRequest,
    request: Request,
    response: Response,
    use_case: CreateBookUseCase = Depends(get_create_book_use_case),
) -> BookResponse:
    """Create a book and reference it through the Location header."""
    created = await use_case.execute(payload.to_entity())
    response.headers["Location"] = str(
        request.url_for("get_book_by_id", book_id=created.id)
    )
    return BookResponse.model_validate(created)


@router.put(
    "/{book_id}",
    response_model=BookResponse,
    responses=NOT_FOUND_RESPONSE,
    summary="Update a book",
    description="Replace title, author and year of the book with the given id.",
)
async def update_book(
    book_id: int,
    payload: BookUpdateRequest,
    use_case: UpdateBookUseCase = Depends(get_update_book_use_case),
) -> BookResponse:
    """Update a book."""
    updated = await use_case.execute(book_id, payload.to_entity())
    return BookResponse.model_validate(updated)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSE,
    summary="Delete a book",
    description="Remove the book with the given id.",
)
async def delete_book(
    book_id: int,
    use_case: DeleteBookUseCase = Depends(get_delete_book_use_case),
) -> Response:
    """Delete a book."""
    await use_case.execute(book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
