"""
Access checks for media libraries.

Pure predicates over a loaded library and an optional requester. The
``ensure_*`` helpers raise the matching forbidden error so use cases can
apply them in a fixed order before any mutation.
"""

from mediashelf.domain.common.value_objects.ids import UserId
from mediashelf.domain.library.entities.media_library import MediaLibrary
from mediashelf.domain.library.exceptions import (
    LibraryPrivateError,
    NotLibraryOwnerError,
    SystemLibraryLockedError,
)


class LibraryAccessPolicy:
    """
    Domain service deciding who may read or change a media library.

    Membership changes (add book, nest library, remove item) only need
    ``ensure_owner``. Metadata updates and deletion additionally need
    ``ensure_not_system``, checked after ownership so a non-owner always
    sees "Not owner".
    """

    def is_readable(self, library: MediaLibrary, requester_id: UserId | None) -> bool:
        return library.is_public or library.is_owned_by(requester_id)

    def is_owner_mutable(self, library: MediaLibrary, requester_id: UserId | None) -> bool:
        return library.is_owned_by(requester_id)

    def is_system_locked(self, library: MediaLibrary) -> bool:
        return library.is_system

    def ensure_readable(self, library: MediaLibrary, requester_id: UserId | None) -> None:
        if not self.is_readable(library, requester_id):
            raise LibraryPrivateError()

    def ensure_owner(self, library: MediaLibrary, requester_id: UserId | None) -> None:
        if not self.is_owner_mutable(library, requester_id):
            raise NotLibraryOwnerError()

    def ensure_not_system(self, library: MediaLibrary) -> None:
        if self.is_system_locked(library):
            raise SystemLibraryLockedError()

    def ensure_metadata_mutable(
        self, library: MediaLibrary, requester_id: UserId | None
    ) -> None:
        """Owner check first, then the system lock."""
        self.ensure_owner(library, requester_id)
        self.ensure_not_system(library)
