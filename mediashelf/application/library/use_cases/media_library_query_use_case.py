"""Read-side views over media libraries."""

from dataclasses import dataclass
from datetime import UTC, datetime

import structlog

from mediashelf.application.common.pagination import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    PageWindow,
    resolve_page_window,
)
from mediashelf.application.library.protocols.book_repository import BookRepositoryProtocol
from mediashelf.application.library.protocols.media_library_repository import (
    MediaLibraryRepositoryProtocol,
)
from mediashelf.domain.common.value_objects.ids import MediaLibraryId, MediaLibraryItemId, UserId
from mediashelf.domain.library.entities.media_library import (
    SYSTEM_READING_LIBRARY_NAME,
    MediaLibrary,
)
from mediashelf.domain.library.entities.media_library_item import BookTarget, MediaLibraryItem
from mediashelf.domain.library.exceptions import (
    LibraryNotFoundError,
    ReadingRecordLibraryMissingError,
)
from mediashelf.domain.library.services.library_access_policy import LibraryAccessPolicy

logger = structlog.get_logger(__name__)

VIRTUAL_LIBRARY_ID = 0
VIRTUAL_UPLOADED_LIBRARY_NAME = "My Uploaded Books (virtual)"


@dataclass
class MediaLibrarySummary:
    """A library with its current item count."""

    library: MediaLibrary
    items_count: int


@dataclass
class MediaLibraryDetail:
    """
    A library with (a window of) its items.

    ``window`` is None for unpaged reads; ``items_count`` is always the total.
    """

    library: MediaLibrary
    items: list[MediaLibraryItem]
    items_count: int
    window: PageWindow | None = None
    is_virtual: bool = False


class MediaLibraryQueryUseCase:
    """Use case for listing and reading media libraries."""

    def __init__(
        self,
        library_repository: MediaLibraryRepositoryProtocol,
        book_repository: BookRepositoryProtocol,
        access_policy: LibraryAccessPolicy,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: int = MAX_PAGE_SIZE,
    ) -> None:
        self.library_repository = library_repository
        self.book_repository = book_repository
        self.access_policy = access_policy
        self.default_page_size = default_page_size
        self.max_page_size = max_page_size

    def list_mine(self, owner_id: int) -> list[MediaLibrarySummary]:
        """Get every library the user owns, newest first, with item counts."""
        libraries = self.library_repository.find_by_owner(UserId(owner_id))
        return [
            MediaLibrarySummary(
                library=library,
                items_count=self.library_repository.count_items(library.id),
            )
            for library in libraries
        ]

    def get_library(
        self,
        library_id: int,
        requester_id: int | None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> MediaLibraryDetail:
        """
        Get a library with its items.

        Without ``limit`` and ``offset`` every item is returned. With either
        one the items are windowed and the effective window is reported.

        Raises:
            LibraryNotFoundError: If the library does not exist
            LibraryPrivateError: If it is private and not owned by the requester
        """
        library = self.library_repository.find_by_id(MediaLibraryId(library_id))
        if not library:
            raise LibraryNotFoundError(library_id)

        requester = UserId(requester_id) if requester_id is not None else None
        self.access_policy.ensure_readable(library, requester)

        return self._detail(library, limit, offset)

    def get_reading_record(
        self, owner_id: int, limit: int | None = None, offset: int | None = None
    ) -> MediaLibraryDetail:
        """
        Get the user's reading-history system library.

        Raises:
            ReadingRecordLibraryMissingError: If it was never provisioned
        """
        library = self.library_repository.find_by_owner_and_name(
            UserId(owner_id), SYSTEM_READING_LIBRARY_NAME
        )
        if not library or not library.is_system:
            raise ReadingRecordLibraryMissingError(owner_id)

        return self._detail(library, limit, offset)

    def get_virtual_uploaded(
        self, owner_id: int, limit: int | None = None, offset: int | None = None
    ) -> MediaLibraryDetail:
        """
        Get the computed library holding every book the user uploaded.

        Nothing is persisted: each book becomes one synthetic item whose id is
        the book id. Timestamps follow the newest book (its ``created_at`` and
        ``updated_at``), or now when there is none.
        """
        owner = UserId(owner_id)
        window = self._window(limit, offset)

        books = self.book_repository.find_by_owner(owner, window)
        total = self.book_repository.count_by_owner(owner)
        newest = self.book_repository.find_latest_by_owner(owner)
        created_at = (newest.created_at if newest else None) or datetime.now(UTC)
        updated_at = (newest.updated_at if newest else None) or created_at

        library = MediaLibrary.create_with_id(
            id=MediaLibraryId(VIRTUAL_LIBRARY_ID),
            owner_id=owner,
            name=VIRTUAL_UPLOADED_LIBRARY_NAME,
            description=None,
            is_public=False,
            is_system=False,
            tags=[],
            created_at=created_at,
            updated_at=updated_at,
        )
        items = [
            MediaLibraryItem.create_with_id(
                id=MediaLibraryItemId(book.id.value),
                library_id=library.id,
                target=BookTarget(book.id),
                added_at=book.created_at or created_at,
            )
            for book in books
        ]

        return MediaLibraryDetail(
            library=library,
            items=items,
            items_count=total,
            window=window,
            is_virtual=True,
        )

    def _window(self, limit: int | None, offset: int | None) -> PageWindow | None:
        return resolve_page_window(limit, offset, self.default_page_size, self.max_page_size)

    def _detail(
        self, library: MediaLibrary, limit: int | None, offset: int | None
    ) -> MediaLibraryDetail:
        window = self._window(limit, offset)
        items = self.library_repository.find_items(library.id, window)
        total = (
            len(items) if window is None else self.library_repository.count_items(library.id)
        )
        return MediaLibraryDetail(library=library, items=items, items_count=total, window=window)
