import logging
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

from fastapi import APIRouter, Depends, HTTPException, Query
from starlette import status

from mediashelf.application.library.use_cases.media_library_management_use_case import (
    MediaLibraryCreateData,
    MediaLibraryManagementUseCase,
    MediaLibraryUpdateData,
)
from mediashelf.application.library.use_cases.media_library_membership_use_case import (
    MediaLibraryMembershipUseCase,
)
from mediashelf.application.library.use_cases.media_library_query_use_case import (
    MediaLibraryDetail as MediaLibraryDetailResult,
)
from mediashelf.application.library.use_cases.media_library_query_use_case import (
    MediaLibraryQueryUseCase,
)
from mediashelf.core import container
from mediashelf.domain.common.exceptions import (
    AuthorizationError,
    ConflictError,
    DomainError,
    EntityNotFoundError,
)
from mediashelf.domain.library.entities.media_library import MediaLibrary
from mediashelf.domain.library.entities.media_library_item import (
    BookTarget,
    MediaLibraryItem,
)
from mediashelf.exceptions import MediaShelfError
from mediashelf.infrastructure.common.di import inject_use_case
from mediashelf.infrastructure.common.schemas import OkResponse
from mediashelf.infrastructure.identity.dependencies import CurrentUser, OptionalCurrentUser
from mediashelf.infrastructure.library.schemas import (
    BookRef,
    ChildLibraryRef,
    LibraryBookAdded,
    LibraryNested,
    MediaLibraryCopied,
    MediaLibraryCreated,
    MediaLibraryCreateRequest,
    MediaLibraryDetail,
    MediaLibraryItemResponse,
    MediaLibrarySummary,
    MediaLibraryUpdated,
    MediaLibraryUpdateRequest,
    TagPair,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/media-libraries", tags=["media-libraries"])

F = TypeVar("F", bound=Callable[..., Any])

# Mapped to 404/403/409 (or their own status) by the app's exception handlers
HANDLED_ERRORS = (EntityNotFoundError, AuthorizationError, ConflictError, MediaShelfError)

management_use_case = inject_use_case(container.media_library_management_use_case)
membership_use_case = inject_use_case(container.media_library_membership_use_case)
query_use_case = inject_use_case(container.media_library_query_use_case)


def handle_library_errors(action: str) -> Callable[[F], F]:
    """
    Translate use case failures for a media library endpoint.

    Known domain errors propagate to the exception handlers, other domain
    errors become 400 and anything unexpected is logged and becomes 500.
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:  # noqa: ANN401
            try:
                return func(*args, **kwargs)
            except HANDLED_ERRORS:
                raise
            except DomainError as e:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST, detail=e.message
                ) from e
            except Exception as e:
                logger.error(f"Failed to {action}: {e!s}", exc_info=True)
                raise HTTPException(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    detail="An unexpected error occurred. Please try again later.",
                ) from e

        return wrapper  # type: ignore[return-value]

    return decorator


def _tag_pairs(library: MediaLibrary) -> list[TagPair]:
    return [TagPair(key=key, value=value) for key, value in library.tag_pairs()]


def _item_schema(item: MediaLibraryItem) -> MediaLibraryItemResponse:
    if isinstance(item.target, BookTarget):
        return MediaLibraryItemResponse(
            id=item.id.value,
            book=BookRef(id=item.target.book_id.value),
            child_library=None,
            added_at=item.added_at,
        )
    return MediaLibraryItemResponse(
        id=item.id.value,
        book=None,
        child_library=ChildLibraryRef(id=item.target.library_id.value, name=item.target.name),
        added_at=item.added_at,
    )


def _detail_schema(detail: MediaLibraryDetailResult) -> MediaLibraryDetail:
    """Build the detail response; paging fields are only set for paged reads."""
    library = detail.library
    fields: dict[str, Any] = {
        "id": library.id.value,
        "name": library.name,
        "description": library.description,
        "is_public": library.is_public,
        "is_system": library.is_system,
        "is_virtual": detail.is_virtual,
        "tags": _tag_pairs(library),
        "owner_id": library.owner_id.value if library.owner_id else None,
        "created_at": library.created_at,
        "updated_at": library.updated_at,
        "items": [_item_schema(item) for item in detail.items],
        "items_count": detail.items_count,
    }
    if detail.window is not None:
        fields["limit"] = detail.window.limit
        fields["offset"] = detail.window.offset
    return MediaLibraryDetail(**fields)


@router.post("", response_model=MediaLibraryCreated, status_code=status.HTTP_201_CREATED)
@handle_library_errors("create media library")
def create_media_library(
    request: MediaLibraryCreateRequest,
    current_user: CurrentUser,
    use_case: MediaLibraryManagementUseCase = Depends(management_use_case),
) -> MediaLibraryCreated:
    """
    Create a media library owned by the current user.

    Raises:
        HTTPException: 409 if the user already has a library with this name
    """
    library = use_case.create_library(
        current_user.id.value,
        MediaLibraryCreateData(
            name=request.name,
            description=request.description,
            is_public=request.is_public,
            tags=[tag.to_spec() for tag in request.tags] if request.tags else None,
        ),
    )
    return MediaLibraryCreated(
        id=library.id.value,
        name=library.name,
        description=library.description,
        is_public=library.is_public,
        is_system=library.is_system,
        tags=_tag_pairs(library),
        created_at=library.created_at,
    )


@router.get("/my", response_model=list[MediaLibrarySummary], status_code=status.HTTP_200_OK)
@handle_library_errors("list media libraries")
def get_my_media_libraries(
    current_user: CurrentUser,
    use_case: MediaLibraryQueryUseCase = Depends(query_use_case),
) -> list[MediaLibrarySummary]:
    """Get the current user's libraries, newest first, with item counts."""
    return [
        MediaLibrarySummary(
            id=summary.library.id.value,
            name=summary.library.name,
            description=summary.library.description,
            is_public=summary.library.is_public,
            is_system=summary.library.is_system,
            tags=_tag_pairs(summary.library),
            created_at=summary.library.created_at,
            updated_at=summary.library.updated_at,
            items_count=summary.items_count,
        )
        for summary in use_case.list_mine(current_user.id.value)
    ]


@router.get(
    "/virtual/my-uploaded",
    response_model=MediaLibraryDetail,
    response_model_exclude_unset=True,
    status_code=status.HTTP_200_OK,
)
@handle_library_errors("fetch uploaded books library")
def get_my_uploaded_library(
    current_user: CurrentUser,
    limit: int | None = Query(None, description="Page size; clamped to 1..100"),
    offset: int | None = Query(None, description="Items to skip; negative means 0"),
    use_case: MediaLibraryQueryUseCase = Depends(query_use_case),
) -> MediaLibraryDetail:
    """Get the computed library holding every book the current user uploaded."""
    return _detail_schema(use_case.get_virtual_uploaded(current_user.id.value, limit, offset))


@router.get(
    "/reading-record",
    response_model=MediaLibraryDetail,
    response_model_exclude_unset=True,
    status_code=status.HTTP_200_OK,
)
@handle_library_errors("fetch reading history library")
def get_reading_record_library(
    current_user: CurrentUser,
    limit: int | None = Query(None, description="Page size; clamped to 1..100"),
    offset: int | None = Query(None, description="Items to skip; negative means 0"),
    use_case: MediaLibraryQueryUseCase = Depends(query_use_case),
) -> MediaLibraryDetail:
    """Get the current user's reading-history system library."""
    return _detail_schema(use_case.get_reading_record(current_user.id.value, limit, offset))


@router.get(
    "/{library_id}",
    response_model=MediaLibraryDetail,
    response_model_exclude_unset=True,
    status_code=status.HTTP_200_OK,
)
@handle_library_errors("fetch media library")
def get_media_library(
    library_id: int,
    current_user: OptionalCurrentUser,
    limit: int | None = Query(None, description="Page size; clamped to 1..100"),
    offset: int | None = Query(None, description="Items to skip; negative means 0"),
    use_case: MediaLibraryQueryUseCase = Depends(query_use_case),
) -> MediaLibraryDetail:
    """
    Get a library with its items.

    Public libraries are readable anonymously. Without ``limit`` and
    ``offset`` every item is returned and no paging fields are included.
    """
    requester_id = current_user.id.value if current_user else None
    return _detail_schema(use_case.get_library(library_id, requester_id, limit, offset))


@router.post(
    "/{library_id}/books/{book_id}",
    response_model=LibraryBookAdded,
    status_code=status.HTTP_201_CREATED,
)
@handle_library_errors("add book to media library")
def add_book_to_media_library(
    library_id: int,
    book_id: int,
    current_user: CurrentUser,
    use_case: MediaLibraryMembershipUseCase = Depends(membership_use_case),
) -> LibraryBookAdded:
    """Add a book to a library the current user owns."""
    item = use_case.add_book(library_id, current_user.id.value, book_id)
    return LibraryBookAdded(
        id=item.id.value,
        library_id=library_id,
        book_id=book_id,
        added_at=item.added_at,
    )


@router.post(
    "/{library_id}/libraries/{child_library_id}",
    response_model=LibraryNested,
    status_code=status.HTTP_201_CREATED,
)
@handle_library_errors("nest media library")
def add_library_to_media_library(
    library_id: int,
    child_library_id: int,
    current_user: CurrentUser,
    use_case: MediaLibraryMembershipUseCase = Depends(membership_use_case),
) -> LibraryNested:
    """Nest another library inside a library the current user owns."""
    item = use_case.add_child_library(library_id, current_user.id.value, child_library_id)
    return LibraryNested(
        id=item.id.value,
        library_id=library_id,
        child_library_id=child_library_id,
        added_at=item.added_at,
    )


@router.delete(
    "/{library_id}/items/{item_id}",
    response_model=OkResponse,
    status_code=status.HTTP_200_OK,
)
@handle_library_errors("remove media library item")
def remove_media_library_item(
    library_id: int,
    item_id: int,
    current_user: CurrentUser,
    use_case: MediaLibraryMembershipUseCase = Depends(membership_use_case),
) -> OkResponse:
    """Remove an item from a library the current user owns."""
    use_case.remove_item(library_id, current_user.id.value, item_id)
    return OkResponse()


@router.patch("/{library_id}", response_model=MediaLibraryUpdated, status_code=status.HTTP_200_OK)
@handle_library_errors("update media library")
def update_media_library(
    library_id: int,
    request: MediaLibraryUpdateRequest,
    current_user: CurrentUser,
    use_case: MediaLibraryManagementUseCase = Depends(management_use_case),
) -> MediaLibraryUpdated:
    """
    Update a library's name, description, visibility or tags.

    System libraries are locked.
    """
    library = use_case.update_library(
        library_id,
        current_user.id.value,
        MediaLibraryUpdateData(
            name=request.name,
            description=request.description,
            description_provided="description" in request.model_fields_set,
            is_public=request.is_public,
            tags=[tag.to_spec() for tag in request.tags] if request.tags is not None else None,
        ),
    )
    return MediaLibraryUpdated(
        id=library.id.value,
        name=library.name,
        description=library.description,
        is_public=library.is_public,
        is_system=library.is_system,
        tags=_tag_pairs(library),
        updated_at=library.updated_at,
    )


@router.post(
    "/{library_id}/copy",
    response_model=MediaLibraryCopied,
    status_code=status.HTTP_201_CREATED,
)
@handle_library_errors("copy media library")
def copy_media_library(
    library_id: int,
    current_user: CurrentUser,
    use_case: MediaLibraryManagementUseCase = Depends(management_use_case),
) -> MediaLibraryCopied:
    """Copy an owned or public library into a new private library."""
    copied = use_case.copy_library(library_id, current_user.id.value)
    return MediaLibraryCopied(
        id=copied.library.id.value,
        name=copied.library.name,
        tags=_tag_pairs(copied.library),
        items_count=copied.items_count,
        is_public=copied.library.is_public,
        copied_from=copied.copied_from,
    )


@router.delete("/{library_id}", response_model=OkResponse, status_code=status.HTTP_200_OK)
@handle_library_errors("delete media library")
def delete_media_library(
    library_id: int,
    current_user: CurrentUser,
    use_case: MediaLibraryManagementUseCase = Depends(management_use_case),
) -> OkResponse:
    """Delete a library the current user owns. System libraries are locked."""
    use_case.delete_library(library_id, current_user.id.value)
    return OkResponse()
