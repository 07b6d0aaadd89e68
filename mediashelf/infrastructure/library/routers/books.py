import logging

from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from mediashelf.application.library.use_cases.book_management_use_case import (
    BookCreateData,
    BookManagementUseCase,
    BookUpdateData,
)
from mediashelf.core import container
from mediashelf.domain.common.exceptions import (
    AuthorizationError,
    ConflictError,
    DomainError,
    EntityNotFoundError,
)
from mediashelf.domain.library.entities.book import Book as BookEntity
from mediashelf.exceptions import MediaShelfError
from mediashelf.infrastructure.common.di import inject_use_case
from mediashelf.infrastructure.common.schemas import OkResponse
from mediashelf.infrastructure.identity.dependencies import CurrentUser
from mediashelf.infrastructure.library.schemas import (
    Book,
    BookCreate,
    BooksListResponse,
    BookUpdate,
    TagPair,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/books", tags=["books"])


def _book_schema(book: BookEntity) -> Book:
    return Book(
        id=book.id.value,
        user_id=book.user_id.value if book.user_id else None,
        title=book.title,
        content_hash=book.content_hash,
        description=book.description,
        tags=[TagPair(key=tag.key, value=tag.value) for tag in book.tags],
        created_at=book.created_at,
        updated_at=book.updated_at,
    )


@router.post("", response_model=Book, status_code=status.HTTP_201_CREATED)
def create_book(
    book_data: BookCreate,
    current_user: CurrentUser,
    use_case: BookManagementUseCase = Depends(inject_use_case(container.book_management_use_case)),
) -> Book:
    """
    Register a book uploaded by the current user.

    Tags are shared: an existing ``(key, value)`` pair is reused.

    Raises:
        HTTPException: 409 if the content hash is already registered
    """
    try:
        book = use_case.create_book(
            BookCreateData(
                title=book_data.title,
                content_hash=book_data.content_hash,
                description=book_data.description,
                tags=[tag.to_spec() for tag in book_data.tags] if book_data.tags else None,
            ),
            current_user.id.value,
        )
        return _book_schema(book)
    except (ConflictError, MediaShelfError):
        # Handled by exception handlers
        raise
    except DomainError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
    except Exception as e:
        logger.error(f"Failed to create book: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/my", response_model=BooksListResponse, status_code=status.HTTP_200_OK)
def get_my_books(
    current_user: CurrentUser,
    use_case: BookManagementUseCase = Depends(inject_use_case(container.book_management_use_case)),
) -> BooksListResponse:
    """Get every book the current user uploaded, newest first."""
    try:
        books = use_case.get_user_books(current_user.id.value)
        return BooksListResponse(books=[_book_schema(book) for book in books], total=len(books))
    except Exception as e:
        logger.error(f"Failed to fetch books: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/{book_id}", response_model=Book, status_code=status.HTTP_200_OK)
def get_book(
    book_id: int,
    current_user: CurrentUser,
    use_case: BookManagementUseCase = Depends(inject_use_case(container.book_management_use_case)),
) -> Book:
    """
    Get a single book.

    Raises:
        HTTPException: 404 if the book does not exist
    """
    try:
        return _book_schema(use_case.get_book(book_id))
    except EntityNotFoundError:
        raise
    except Exception as e:
        logger.error(f"Failed to fetch book {book_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.patch("/{book_id}", response_model=Book, status_code=status.HTTP_200_OK)
def update_book(
    book_id: int,
    book_data: BookUpdate,
    current_user: CurrentUser,
    use_case: BookManagementUseCase = Depends(inject_use_case(container.book_management_use_case)),
) -> Book:
    """
    Update title, description or tags of a book the current user uploaded.

    Raises:
        HTTPException: 404 if the book does not exist, 403 if it is not the user's
    """
    try:
        book = use_case.update_book(
            book_id,
            current_user.id.value,
            BookUpdateData(
                title=book_data.title,
                description=book_data.description,
                description_provided="description" in book_data.model_fields_set,
                tags=[tag.to_spec() for tag in book_data.tags]
                if book_data.tags is not None
                else None,
            ),
        )
        return _book_schema(book)
    except (EntityNotFoundError, AuthorizationError, ConflictError, MediaShelfError):
        raise
    except DomainError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
    except Exception as e:
        logger.error(f"Failed to update book {book_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete("/{book_id}", response_model=OkResponse, status_code=status.HTTP_200_OK)
def delete_book(
    book_id: int,
    current_user: CurrentUser,
    use_case: BookManagementUseCase = Depends(inject_use_case(container.book_management_use_case)),
) -> OkResponse:
    """
    Delete a book the current user uploaded.

    It is also removed from every media library that contained it.
    """
    try:
        use_case.delete_book(book_id, current_user.id.value)
        return OkResponse()
    except (EntityNotFoundError, AuthorizationError):
        raise
    except Exception as e:
        logger.error(f"Failed to delete book {book_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
