"""Book entity."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from mediashelf.domain.common.entity import Entity
from mediashelf.domain.common.exceptions import DomainError
from mediashelf.domain.common.value_objects.ids import BookId, UserId
from mediashelf.domain.library.entities.tag import Tag

MAX_CONTENT_HASH_LENGTH = 64


@dataclass
class Book(Entity[BookId]):
    """
    Book entity.

    Books are uploaded by a user (``user_id``) and may carry a client-supplied
    content hash identifying the underlying file. Media libraries reference
    books by id only; the book store is the source of truth for existence.
    """

    # Identity
    id: BookId
    user_id: UserId | None

    # Core metadata
    title: str
    content_hash: str | None = None
    description: str | None = None
    tags: list[Tag] = field(default_factory=list)

    # Timestamps
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.title or not self.title.strip():
            raise DomainError("Book title cannot be empty")
        if self.content_hash is not None and len(self.content_hash) > MAX_CONTENT_HASH_LENGTH:
            raise DomainError("Book content hash is too long")

    def is_owned_by(self, user_id: UserId) -> bool:
        """Books whose uploader was removed belong to nobody."""
        return self.user_id is not None and self.user_id == user_id

    # Command methods
    def retitle(self, title: str) -> None:
        if not title or not title.strip():
            raise DomainError("Book title cannot be empty")
        self.title = title.strip()
        self._touch()

    def change_description(self, description: str | None) -> None:
        self.description = description
        self._touch()

    def replace_tags(self, tags: list[Tag]) -> None:
        self.tags = list(tags)
        self._touch()

    def _touch(self) -> None:
        self.updated_at = datetime.now(UTC)

    # Factory methods
    @classmethod
    def create(
        cls,
        user_id: UserId,
        title: str,
        content_hash: str | None = None,
        description: str | None = None,
        tags: list[Tag] | None = None,
    ) -> "Book":
        """Factory for creating new book."""
        now = datetime.now(UTC)
        return cls(
            id=BookId.generate(),
            user_id=user_id,
            title=title.strip(),
            content_hash=content_hash.strip() if content_hash else None,
            description=description,
            tags=list(tags or []),
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def create_with_id(
        cls,
        id: BookId,
        user_id: UserId | None,
        title: str,
        content_hash: str | None,
        description: str | None,
        tags: list[Tag],
        created_at: datetime,
        updated_at: datetime,
    ) -> "Book":
        """Factory for reconstituting book from persistence."""
        return cls(
            id=id,
            user_id=user_id,
            title=title,
            content_hash=content_hash,
            description=description,
            tags=tags,
            created_at=created_at,
            updated_at=updated_at,
        )
