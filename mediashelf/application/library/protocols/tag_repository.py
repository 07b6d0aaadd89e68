"""Protocol for Tag repository in library context."""

from typing import Protocol

from mediashelf.domain.library.entities.tag import Tag


class TagRepositoryProtocol(Protocol):
    """Protocol for Tag repository operations in library context."""

    def find_by_pairs(self, pairs: list[tuple[str, str]]) -> list[Tag]:
        """
        Get every tag matching one of the given ``(key, value)`` pairs.

        Args:
            pairs: Exact ``(key, value)`` pairs to look up

        Returns:
            List of tag entities, in no particular order
        """
        ...

    def save(self, tag: Tag) -> Tag:
        """
        Persist a new tag.

        Args:
            tag: Tag entity with a placeholder id

        Returns:
            Tag entity with its database id
        """
        ...
