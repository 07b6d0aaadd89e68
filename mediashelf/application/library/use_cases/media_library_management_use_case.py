"""Use case for creating, updating, copying and deleting media libraries."""

from dataclasses import dataclass

import structlog

from mediashelf.application.common.unit_of_work import UnitOfWork
from mediashelf.application.library.protocols.media_library_repository import (
    MediaLibraryRepositoryProtocol,
)
from mediashelf.application.library.services.tag_resolver import TagResolver, TagSpec
from mediashelf.domain.common.value_objects.ids import MediaLibraryId, UserId
from mediashelf.domain.library.entities.media_library import MediaLibrary
from mediashelf.domain.library.entities.media_library_item import BookTarget, MediaLibraryItem
from mediashelf.domain.library.exceptions import DuplicateLibraryNameError, LibraryNotFoundError
from mediashelf.domain.library.services.library_access_policy import LibraryAccessPolicy
from mediashelf.domain.library.services.library_name_generator import LibraryCopyNameGenerator

logger = structlog.get_logger(__name__)


@dataclass
class MediaLibraryCreateData:
    name: str
    description: str | None = None
    is_public: bool = False
    tags: list[TagSpec] | None = None


@dataclass
class MediaLibraryUpdateData:
    """
    Partial update.

    ``None`` means "leave unchanged" for every field except ``description``,
    which is only applied when ``description_provided`` is set so that an
    explicit null clears it.
    """

    name: str | None = None
    description: str | None = None
    description_provided: bool = False
    is_public: bool | None = None
    tags: list[TagSpec] | None = None


@dataclass
class CopiedMediaLibrary:
    library: MediaLibrary
    items_count: int
    copied_from: int


class MediaLibraryManagementUseCase:
    """Use case for media library lifecycle operations."""

    def __init__(
        self,
        library_repository: MediaLibraryRepositoryProtocol,
        tag_resolver: TagResolver,
        access_policy: LibraryAccessPolicy,
        name_generator: LibraryCopyNameGenerator,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize use case with dependencies."""
        self.library_repository = library_repository
        self.tag_resolver = tag_resolver
        self.access_policy = access_policy
        self.name_generator = name_generator
        self.unit_of_work = unit_of_work

    def create_library(self, owner_id: int, data: MediaLibraryCreateData) -> MediaLibrary:
        """
        Create a library for the owner.

        Args:
            owner_id: ID of the owning user
            data: Library metadata and tag specs

        Returns:
            The persisted library

        Raises:
            DuplicateLibraryNameError: If the owner already has a library with this name
            ValidationError: If the name is blank or too long
        """
        owner = UserId(owner_id)
        name = data.name.strip()
        if self.library_repository.name_exists(owner, name):
            raise DuplicateLibraryNameError(name)

        with self.unit_of_work:
            tags = self.tag_resolver.resolve(data.tags or [])
            library = MediaLibrary.create(
                owner_id=owner,
                name=name,
                description=data.description,
                is_public=data.is_public,
                tags=tags,
            )
            library = self.library_repository.save(library)
            self.unit_of_work.commit()

        logger.info("media_library_created", library_id=library.id.value, owner_id=owner_id)
        return library

    def update_library(
        self, library_id: int, requester_id: int, data: MediaLibraryUpdateData
    ) -> MediaLibrary:
        """
        Apply a partial update to a library the requester owns.

        Raises:
            LibraryNotFoundError: If the library does not exist
            NotLibraryOwnerError: If the requester does not own it
            SystemLibraryLockedError: If it is a system library
            DuplicateLibraryNameError: If the new name is already taken by the owner
        """
        library = self._get_library(library_id)
        self.access_policy.ensure_metadata_mutable(library, UserId(requester_id))

        if data.name is not None:
            new_name = data.name.strip()
            if new_name != library.name:
                if self.library_repository.name_exists(UserId(requester_id), new_name):
                    raise DuplicateLibraryNameError(new_name)
                library.rename(new_name)

        with self.unit_of_work:
            if data.description_provided:
                library.change_description(data.description)
            if data.is_public is not None:
                library.set_visibility(data.is_public)
            if data.tags is not None:
                library.replace_tags(self.tag_resolver.resolve(data.tags))

            library = self.library_repository.save(library)
            self.unit_of_work.commit()

        logger.info("media_library_updated", library_id=library_id, owner_id=requester_id)
        return library

    def copy_library(self, library_id: int, requester_id: int) -> CopiedMediaLibrary:
        """
        Copy a readable library into a new private library of the requester.

        Tags and description are inherited. Only book items are copied;
        nested libraries are not.

        Raises:
            LibraryNotFoundError: If the source does not exist
            LibraryPrivateError: If the source is private and not owned by the requester
        """
        source = self._get_library(library_id)
        requester = UserId(requester_id)
        self.access_policy.ensure_readable(source, requester)

        with self.unit_of_work:
            name = self.name_generator.generate(
                source.name,
                lambda candidate: self.library_repository.name_exists(requester, candidate),
            )
            copy = MediaLibrary.create(
                owner_id=requester,
                name=name,
                description=source.description,
                is_public=False,
                tags=source.tags,
            )
            copy = self.library_repository.save(copy)

            book_ids = self.library_repository.find_book_ids(source.id)
            self.library_repository.add_items(
                [MediaLibraryItem.create(copy.id, BookTarget(book_id)) for book_id in book_ids]
            )
            items_count = self.library_repository.count_items(copy.id)
            self.unit_of_work.commit()

        logger.info(
            "media_library_copied",
            source_id=library_id,
            library_id=copy.id.value,
            owner_id=requester_id,
            items_count=items_count,
        )
        return CopiedMediaLibrary(library=copy, items_count=items_count, copied_from=library_id)

    def delete_library(self, library_id: int, requester_id: int) -> None:
        """
        Delete a library the requester owns, together with its items.

        Raises:
            LibraryNotFoundError: If the library does not exist
            NotLibraryOwnerError: If the requester does not own it
            SystemLibraryLockedError: If it is a system library
        """
        library = self._get_library(library_id)
        self.access_policy.ensure_metadata_mutable(library, UserId(requester_id))

        with self.unit_of_work:
            self.library_repository.delete(library.id)
            self.unit_of_work.commit()

        logger.info("media_library_deleted", library_id=library_id, owner_id=requester_id)

    def _get_library(self, library_id: int) -> MediaLibrary:
        library = self.library_repository.find_by_id(MediaLibraryId(library_id))
        if not library:
            raise LibraryNotFoundError(library_id)
        return library
