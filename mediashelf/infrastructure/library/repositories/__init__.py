from mediashelf.infrastructure.library.repositories.book_repository import BookRepository
from mediashelf.infrastructure.library.repositories.media_library_repository import (
    MediaLibraryRepository,
)
from mediashelf.infrastructure.library.repositories.tag_repository import TagRepository

__all__ = ["BookRepository", "MediaLibraryRepository", "TagRepository"]
