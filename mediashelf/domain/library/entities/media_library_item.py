"""Membership of a media library: one book or one nested library."""

from dataclasses import dataclass
from datetime import UTC, datetime

from mediashelf.domain.common.entity import Entity
from mediashelf.domain.common.value_object import ValueObject
from mediashelf.domain.common.value_objects.ids import BookId, MediaLibraryId, MediaLibraryItemId


@dataclass(frozen=True)
class BookTarget(ValueObject):
    """Item points at a book."""

    book_id: BookId


@dataclass(frozen=True)
class ChildLibraryTarget(ValueObject):
    """Item nests another library. ``name`` is filled in on reads."""

    library_id: MediaLibraryId
    name: str | None = None


ItemTarget = BookTarget | ChildLibraryTarget


@dataclass
class MediaLibraryItem(Entity[MediaLibraryItemId]):
    """
    A library membership row.

    The target is a single tagged variant, so an item always references
    exactly one book or exactly one child library.
    """

    id: MediaLibraryItemId
    library_id: MediaLibraryId
    target: ItemTarget
    added_at: datetime | None = None

    @property
    def book_id(self) -> BookId | None:
        if isinstance(self.target, BookTarget):
            return self.target.book_id
        return None

    @property
    def child_library_id(self) -> MediaLibraryId | None:
        if isinstance(self.target, ChildLibraryTarget):
            return self.target.library_id
        return None

    def belongs_to(self, library_id: MediaLibraryId) -> bool:
        return self.library_id == library_id

    @classmethod
    def create(cls, library_id: MediaLibraryId, target: ItemTarget) -> "MediaLibraryItem":
        return cls(
            id=MediaLibraryItemId.generate(),
            library_id=library_id,
            target=target,
            added_at=datetime.now(UTC),
        )

    @classmethod
    def create_with_id(
        cls,
        id: MediaLibraryItemId,
        library_id: MediaLibraryId,
        target: ItemTarget,
        added_at: datetime,
    ) -> "MediaLibraryItem":
        return cls(id=id, library_id=library_id, target=target, added_at=added_at)
