"""Tag entity for labelling books and media libraries."""

from dataclasses import dataclass
from datetime import UTC, datetime

from mediashelf.domain.common.entity import Entity
from mediashelf.domain.common.exceptions import DomainError
from mediashelf.domain.common.value_objects.ids import TagId

MAX_TAG_KEY_LENGTH = 64
MAX_TAG_VALUE_LENGTH = 128


@dataclass
class Tag(Entity[TagId]):
    """
    Tag entity for categorizing books and media libraries.

    A tag is a free-form ``key``/``value`` pair shared by every book and
    library that carries it. The pair is unique across the store, so two
    owners tagging ``genre=science_fiction`` reference the same row.
    """

    # Identity
    id: TagId

    # Content
    key: str
    value: str
    shown: bool

    # Timestamps
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.key or not self.key.strip():
            raise DomainError("Tag key cannot be empty")
        if not self.value or not self.value.strip():
            raise DomainError("Tag value cannot be empty")
        if len(self.key) > MAX_TAG_KEY_LENGTH or len(self.value) > MAX_TAG_VALUE_LENGTH:
            raise DomainError("Tag key or value is too long")

    @property
    def pair(self) -> tuple[str, str]:
        """The ``(key, value)`` identity used for deduplication."""
        return self.key, self.value

    # Factory methods
    @classmethod
    def create(cls, key: str, value: str, shown: bool = True) -> "Tag":
        """Factory for creating new tag."""
        now = datetime.now(UTC)
        return cls(
            id=TagId.generate(),
            key=key,
            value=value,
            shown=shown,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def create_with_id(
        cls,
        id: TagId,
        key: str,
        value: str,
        shown: bool,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Tag":
        """Factory for reconstituting tag from persistence."""
        return cls(
            id=id,
            key=key,
            value=value,
            shown=shown,
            created_at=created_at,
            updated_at=updated_at,
        )
