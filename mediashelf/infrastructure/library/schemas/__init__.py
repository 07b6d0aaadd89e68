"""Library context schemas."""

from mediashelf.infrastructure.library.schemas.book_schemas import (
    Book,
    BookCreate,
    BooksListResponse,
    BookUpdate,
)
from mediashelf.infrastructure.library.schemas.media_library_schemas import (
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
)
from mediashelf.infrastructure.library.schemas.tag_schemas import TagInput, TagPair

__all__ = [
    "Book",
    "BookCreate",
    "BookRef",
    "BooksListResponse",
    "BookUpdate",
    "ChildLibraryRef",
    "LibraryBookAdded",
    "LibraryNested",
    "MediaLibraryCopied",
    "MediaLibraryCreateRequest",
    "MediaLibraryCreated",
    "MediaLibraryDetail",
    "MediaLibraryItemResponse",
    "MediaLibrarySummary",
    "MediaLibraryUpdateRequest",
    "MediaLibraryUpdated",
    "TagInput",
    "TagPair",
]
