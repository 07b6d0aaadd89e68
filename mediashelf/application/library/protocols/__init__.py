from mediashelf.application.library.protocols.book_repository import BookRepositoryProtocol
from mediashelf.application.library.protocols.media_library_repository import (
    MediaLibraryRepositoryProtocol,
)
from mediashelf.application.library.protocols.tag_repository import TagRepositoryProtocol

__all__ = [
    "BookRepositoryProtocol",
    "MediaLibraryRepositoryProtocol",
    "TagRepositoryProtocol",
]
