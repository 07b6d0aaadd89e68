"""Protocol for the media library persistence boundary."""

from typing import Protocol

from mediashelf.application.common.pagination import PageWindow
from mediashelf.domain.common.value_objects.ids import (
    BookId,
    MediaLibraryId,
    MediaLibraryItemId,
    UserId,
)
from mediashelf.domain.library.entities.media_library import MediaLibrary
from mediashelf.domain.library.entities.media_library_item import MediaLibraryItem


class MediaLibraryRepositoryProtocol(Protocol):
    """Libraries and their membership items."""

    # Libraries
    def find_by_id(self, library_id: MediaLibraryId) -> MediaLibrary | None: ...

    def find_by_owner_and_name(self, owner_id: UserId, name: str) -> MediaLibrary | None: ...

    def name_exists(self, owner_id: UserId, name: str) -> bool: ...

    def find_by_owner(self, owner_id: UserId) -> list[MediaLibrary]:
        """Libraries owned by the user, newest first."""
        ...

    def save(self, library: MediaLibrary) -> MediaLibrary:
        """
        Insert or update a library, including its tag set.

        Raises:
            DuplicateLibraryNameError: If ``(owner_id, name)`` is already taken
        """
        ...

    def delete(self, library_id: MediaLibraryId) -> None:
        """Delete a library, its items and every item nesting it elsewhere."""
        ...

    # Items
    def count_items(self, library_id: MediaLibraryId) -> int: ...

    def find_items(
        self, library_id: MediaLibraryId, window: PageWindow | None = None
    ) -> list[MediaLibraryItem]:
        """Items of a library, newest added first. ``None`` returns all of them."""
        ...

    def find_item(self, item_id: MediaLibraryItemId) -> MediaLibraryItem | None: ...

    def contains_book(self, library_id: MediaLibraryId, book_id: BookId) -> bool: ...

    def contains_child_library(
        self, library_id: MediaLibraryId, child_library_id: MediaLibraryId
    ) -> bool: ...

    def find_book_ids(self, library_id: MediaLibraryId) -> list[BookId]: ...

    def add_item(self, item: MediaLibraryItem) -> MediaLibraryItem:
        """
        Persist a membership item.

        Raises:
            DuplicateLibraryBookError: If the book is already in the library
            DuplicateLibraryNestingError: If the child library is already nested
        """
        ...

    def add_items(self, items: list[MediaLibraryItem]) -> None: ...

    def delete_item(self, item_id: MediaLibraryItemId) -> None: ...
