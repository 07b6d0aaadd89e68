from mediashelf.infrastructure.library.mappers.book_mapper import BookMapper
from mediashelf.infrastructure.library.mappers.media_library_mapper import (
    MediaLibraryItemMapper,
    MediaLibraryMapper,
)
from mediashelf.infrastructure.library.mappers.tag_mapper import TagMapper

__all__ = ["BookMapper", "MediaLibraryItemMapper", "MediaLibraryMapper", "TagMapper"]
