from mediashelf.domain.library.entities.book import Book
from mediashelf.domain.library.entities.media_library import (
    MAX_LIBRARY_NAME_LENGTH,
    SYSTEM_READING_LIBRARY_NAME,
    MediaLibrary,
)
from mediashelf.domain.library.entities.media_library_item import (
    BookTarget,
    ChildLibraryTarget,
    ItemTarget,
    MediaLibraryItem,
)
from mediashelf.domain.library.entities.tag import Tag

__all__ = [
    "MAX_LIBRARY_NAME_LENGTH",
    "SYSTEM_READING_LIBRARY_NAME",
    "Book",
    "BookTarget",
    "ChildLibraryTarget",
    "ItemTarget",
    "MediaLibrary",
    "MediaLibraryItem",
    "Tag",
]
