"""Pydantic schemas for media library endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field

from mediashelf.infrastructure.library.schemas.tag_schemas import TagInput, TagPair


class MediaLibraryCreateRequest(BaseModel):
    """Schema for creating a media library."""

    name: str = Field(..., min_length=1, max_length=200, description="Library name")
    description: str | None = Field(None, max_length=2000, description="Library description")
    is_public: bool = Field(False, description="Whether other users may read and copy it")
    tags: list[TagInput] | None = Field(None, description="Key/value tags for the library")


class MediaLibraryUpdateRequest(BaseModel):
    """
    Schema for partially updating a media library.

    Omitted fields stay unchanged. ``description`` may be sent as null or
    empty to clear it; ``tags`` replaces the whole tag set.
    """

    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = Field(None, max_length=2000)
    is_public: bool | None = None
    tags: list[TagInput] | None = None


class MediaLibraryCreated(BaseModel):
    id: int
    name: str
    description: str | None
    is_public: bool
    is_system: bool
    tags: list[TagPair]
    created_at: datetime | None


class MediaLibraryUpdated(BaseModel):
    id: int
    name: str
    description: str | None
    is_public: bool
    is_system: bool
    tags: list[TagPair]
    updated_at: datetime | None


class MediaLibrarySummary(BaseModel):
    """Library entry in the owner's listing."""

    id: int
    name: str
    description: str | None
    is_public: bool
    is_system: bool
    tags: list[TagPair]
    created_at: datetime | None
    updated_at: datetime | None
    items_count: int


class BookRef(BaseModel):
    id: int


class ChildLibraryRef(BaseModel):
    id: int
    name: str | None = None


class MediaLibraryItemResponse(BaseModel):
    """One library item. Exactly one of ``book`` and ``child_library`` is set."""

    id: int
    book: BookRef | None = None
    child_library: ChildLibraryRef | None = None
    added_at: datetime | None = None


class MediaLibraryDetail(BaseModel):
    """
    Library with its items.

    ``limit`` and ``offset`` are only present for paged requests and hold
    the effective, clamped values.
    """

    id: int
    name: str
    description: str | None
    is_public: bool
    is_system: bool
    is_virtual: bool = False
    tags: list[TagPair]
    owner_id: int | None
    created_at: datetime | None
    updated_at: datetime | None
    items: list[MediaLibraryItemResponse]
    items_count: int
    limit: int | None = None
    offset: int | None = None


class LibraryBookAdded(BaseModel):
    id: int
    library_id: int
    book_id: int
    added_at: datetime | None


class LibraryNested(BaseModel):
    id: int
    library_id: int
    child_library_id: int
    added_at: datetime | None


class MediaLibraryCopied(BaseModel):
    id: int
    name: str
    tags: list[TagPair]
    items_count: int
    is_public: bool
    copied_from: int
