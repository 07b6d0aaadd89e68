from dataclasses import dataclass, field
from datetime import UTC, datetime

from mediashelf.domain.common.entity import Entity
from mediashelf.domain.common.exceptions import ValidationError
from mediashelf.domain.common.value_objects.ids import MediaLibraryId, UserId
from mediashelf.domain.library.entities.tag import Tag

MAX_LIBRARY_NAME_LENGTH = 200
MAX_LIBRARY_DESCRIPTION_LENGTH = 2000

# Reserved name of the per-user system library that records reading history.
SYSTEM_READING_LIBRARY_NAME = "Reading History"


def normalize_description(description: str | None) -> str | None:
    """Trim a description, collapsing blank values to ``None``."""
    if description is None:
        return None
    stripped = description.strip()
    return stripped or None


@dataclass
class MediaLibrary(Entity[MediaLibraryId]):
    """
    Media library aggregate root.

    A named collection owned by one user, holding books and nested libraries
    through ``MediaLibraryItem`` rows. ``(owner_id, name)`` is unique among
    persisted libraries; the repository's constraint is authoritative.

    System libraries (``is_system``) are provisioned by the application and
    keep their metadata: they cannot be renamed, re-described, re-tagged,
    made public or deleted. Their membership can still change.
    """

    # Identity
    id: MediaLibraryId
    owner_id: UserId | None

    # Metadata
    name: str
    description: str | None = None
    is_public: bool = False
    is_system: bool = False
    tags: list[Tag] = field(default_factory=list)

    # Timestamps
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        self.name = self._validated_name(self.name)
        if (
            self.description is not None
            and len(self.description) > MAX_LIBRARY_DESCRIPTION_LENGTH
        ):
            raise ValidationError(
                f"Library description cannot exceed {MAX_LIBRARY_DESCRIPTION_LENGTH} characters",
                field="description",
            )

    @staticmethod
    def _validated_name(name: str) -> str:
        stripped = (name or "").strip()
        if not stripped:
            raise ValidationError("Library name cannot be empty", field="name")
        if len(stripped) > MAX_LIBRARY_NAME_LENGTH:
            raise ValidationError(
                f"Library name cannot exceed {MAX_LIBRARY_NAME_LENGTH} characters",
                field="name",
                value=stripped,
            )
        return stripped

    # Query methods
    def is_owned_by(self, user_id: UserId | None) -> bool:
        """Check ownership. Anonymous requesters own nothing."""
        return user_id is not None and self.owner_id == user_id

    def tag_pairs(self) -> list[tuple[str, str]]:
        return [tag.pair for tag in self.tags]

    # Command methods
    def rename(self, new_name: str) -> None:
        self.name = self._validated_name(new_name)
        self._touch()

    def change_description(self, description: str | None) -> None:
        self.description = normalize_description(description)
        self._touch()

    def set_visibility(self, is_public: bool) -> None:
        self.is_public = is_public
        self._touch()

    def replace_tags(self, tags: list[Tag]) -> None:
        """Replace the whole tag set; tags are never merged."""
        self.tags = list(tags)
        self._touch()

    def _touch(self) -> None:
        self.updated_at = datetime.now(UTC)

    # Factory methods
    @classmethod
    def create(
        cls,
        owner_id: UserId,
        name: str,
        description: str | None = None,
        is_public: bool = False,
        tags: list[Tag] | None = None,
    ) -> "MediaLibrary":
        """Factory for creating a new user library. Never a system library."""
        now = datetime.now(UTC)
        return cls(
            id=MediaLibraryId.generate(),
            owner_id=owner_id,
            name=name,
            description=normalize_description(description),
            is_public=is_public,
            is_system=False,
            tags=list(tags or []),
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def create_system_reading_history(cls, owner_id: UserId) -> "MediaLibrary":
        """Factory for the reserved reading-history library provisioned at registration."""
        now = datetime.now(UTC)
        return cls(
            id=MediaLibraryId.generate(),
            owner_id=owner_id,
            name=SYSTEM_READING_LIBRARY_NAME,
            description=None,
            is_public=False,
            is_system=True,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def create_with_id(
        cls,
        id: MediaLibraryId,
        owner_id: UserId | None,
        name: str,
        description: str | None,
        is_public: bool,
        is_system: bool,
        tags: list[Tag],
        created_at: datetime,
        updated_at: datetime,
    ) -> "MediaLibrary":
        """Factory for reconstituting a library from persistence."""
        return cls(
            id=id,
            owner_id=owner_id,
            name=name,
            description=description,
            is_public=is_public,
            is_system=is_system,
            tags=tags,
            created_at=created_at,
            updated_at=updated_at,
        )
