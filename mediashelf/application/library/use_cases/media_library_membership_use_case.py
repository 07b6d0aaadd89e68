"""Use case for adding and removing media library items."""

import structlog

from mediashelf.application.common.unit_of_work import UnitOfWork
from mediashelf.application.library.protocols.book_repository import BookRepositoryProtocol
from mediashelf.application.library.protocols.media_library_repository import (
    MediaLibraryRepositoryProtocol,
)
from mediashelf.domain.common.value_objects.ids import (
    BookId,
    MediaLibraryId,
    MediaLibraryItemId,
    UserId,
)
from mediashelf.domain.library.entities.media_library import MediaLibrary
from mediashelf.domain.library.entities.media_library_item import (
    BookTarget,
    ChildLibraryTarget,
    MediaLibraryItem,
)
from mediashelf.domain.library.exceptions import (
    BookNotFoundError,
    ChildLibraryNotFoundError,
    DuplicateLibraryBookError,
    DuplicateLibraryNestingError,
    LibraryItemNotFoundError,
    LibraryNotFoundError,
    SelfNestingError,
)
from mediashelf.domain.library.services.library_access_policy import LibraryAccessPolicy

logger = structlog.get_logger(__name__)


class MediaLibraryMembershipUseCase:
    """
    Use case for library membership.

    Only ownership is checked here: the owner may change the contents of a
    system library even though its metadata is locked.
    """

    def __init__(
        self,
        library_repository: MediaLibraryRepositoryProtocol,
        book_repository: BookRepositoryProtocol,
        access_policy: LibraryAccessPolicy,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.library_repository = library_repository
        self.book_repository = book_repository
        self.access_policy = access_policy
        self.unit_of_work = unit_of_work

    def add_book(self, library_id: int, requester_id: int, book_id: int) -> MediaLibraryItem:
        """
        Add a book to a library.

        Raises:
            LibraryNotFoundError: If the library does not exist
            NotLibraryOwnerError: If the requester does not own it
            BookNotFoundError: If the book does not exist
            DuplicateLibraryBookError: If the book is already in the library
        """
        library = self._get_owned_library(library_id, requester_id)

        book_id_vo = BookId(book_id)
        if not self.book_repository.exists(book_id_vo):
            raise BookNotFoundError(book_id)
        if self.library_repository.contains_book(library.id, book_id_vo):
            raise DuplicateLibraryBookError(library_id, book_id)

        with self.unit_of_work:
            item = self.library_repository.add_item(
                MediaLibraryItem.create(library.id, BookTarget(book_id_vo))
            )
            self.unit_of_work.commit()

        logger.info("library_book_added", library_id=library_id, book_id=book_id)
        return item

    def add_child_library(
        self, library_id: int, requester_id: int, child_library_id: int
    ) -> MediaLibraryItem:
        """
        Nest one library inside another.

        Self-nesting is rejected before anything is looked up.

        Raises:
            SelfNestingError: If both ids are the same
            LibraryNotFoundError: If the parent does not exist
            NotLibraryOwnerError: If the requester does not own the parent
            ChildLibraryNotFoundError: If the child does not exist
            DuplicateLibraryNestingError: If the child is already nested
        """
        if library_id == child_library_id:
            raise SelfNestingError(library_id)

        library = self._get_owned_library(library_id, requester_id)

        child = self.library_repository.find_by_id(MediaLibraryId(child_library_id))
        if not child:
            raise ChildLibraryNotFoundError(child_library_id)
        if self.library_repository.contains_child_library(library.id, child.id):
            raise DuplicateLibraryNestingError(library_id, child_library_id)

        with self.unit_of_work:
            item = self.library_repository.add_item(
                MediaLibraryItem.create(library.id, ChildLibraryTarget(child.id, child.name))
            )
            self.unit_of_work.commit()

        logger.info(
            "library_nested", library_id=library_id, child_library_id=child_library_id
        )
        return item

    def remove_item(self, library_id: int, requester_id: int, item_id: int) -> None:
        """
        Remove an item from a library.

        Raises:
            LibraryNotFoundError: If the library does not exist
            NotLibraryOwnerError: If the requester does not own it
            LibraryItemNotFoundError: If the item is missing or belongs elsewhere
        """
        library = self._get_owned_library(library_id, requester_id)

        item = self.library_repository.find_item(MediaLibraryItemId(item_id))
        if not item or not item.belongs_to(library.id):
            raise LibraryItemNotFoundError(item_id)

        with self.unit_of_work:
            self.library_repository.delete_item(item.id)
            self.unit_of_work.commit()

        logger.info("library_item_removed", library_id=library_id, item_id=item_id)

    def _get_owned_library(self, library_id: int, requester_id: int) -> MediaLibrary:
        library = self.library_repository.find_by_id(MediaLibraryId(library_id))
        if not library:
            raise LibraryNotFoundError(library_id)
        self.access_policy.ensure_owner(library, UserId(requester_id))
        return library
