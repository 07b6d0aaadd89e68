"""Pydantic schemas for Book API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field

from mediashelf.infrastructure.library.schemas.tag_schemas import TagInput, TagPair


class BookCreate(BaseModel):
    """Schema for registering a Book."""

    title: str = Field(..., min_length=1, max_length=500, description="Book title")
    content_hash: str | None = Field(
        None, min_length=1, max_length=64, description="Hash of the book file contents"
    )
    description: str | None = Field(None, description="Book description")
    tags: list[TagInput] | None = Field(None, description="Key/value tags for this book")


class BookUpdate(BaseModel):
    """
    Schema for partially updating a Book.

    Omitted fields stay unchanged; ``description`` may be null to clear it.
    """

    title: str | None = Field(None, min_length=1, max_length=500)
    description: str | None = None
    tags: list[TagInput] | None = None


class Book(BaseModel):
    """Schema for Book response."""

    id: int
    user_id: int | None
    title: str
    content_hash: str | None = None
    description: str | None = None
    tags: list[TagPair] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class BooksListResponse(BaseModel):
    """Schema for the current user's uploaded books."""

    books: list[Book]
    total: int
