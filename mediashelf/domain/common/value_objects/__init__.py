"""Common value objects shared across all domain modules."""

from .ids import (
    BookId,
    MediaLibraryId,
    MediaLibraryItemId,
    TagId,
    UserId,
)

__all__ = [
    "BookId",
    "MediaLibraryId",
    "MediaLibraryItemId",
    "TagId",
    "UserId",
]
