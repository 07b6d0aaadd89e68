from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class UserId(EntityId):
    """Strongly-typed user identifier."""


@dataclass(frozen=True)
class BookId(EntityId):
    """Strongly-typed book identifier."""


@dataclass(frozen=True)
class TagId(EntityId):
    """Strongly-typed tag identifier."""


@dataclass(frozen=True)
class MediaLibraryId(EntityId):
    """
    Strongly-typed media library identifier.

    ``MediaLibraryId(0)`` doubles as the fixed id of the virtual library view.
    """


@dataclass(frozen=True)
class MediaLibraryItemId(EntityId):
    """Strongly-typed media library item identifier."""
