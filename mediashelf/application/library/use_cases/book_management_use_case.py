"""Use case for managing catalog books."""

from dataclasses import dataclass

import structlog

from mediashelf.application.common.unit_of_work import UnitOfWork
from mediashelf.application.library.protocols.book_repository import BookRepositoryProtocol
from mediashelf.application.library.services.tag_resolver import TagResolver, TagSpec
from mediashelf.domain.common.value_objects.ids import BookId, UserId
from mediashelf.domain.library.entities.book import Book
from mediashelf.domain.library.exceptions import (
    BookNotFoundError,
    DuplicateContentHashError,
    NotBookOwnerError,
)

logger = structlog.get_logger(__name__)


@dataclass
class BookCreateData:
    """Input for registering a book in the catalog."""

    title: str
    content_hash: str | None = None
    description: str | None = None
    tags: list[TagSpec] | None = None


@dataclass
class BookUpdateData:
    """
    Partial book update. ``None`` leaves a field unchanged.

    ``description`` is applied only when ``description_provided`` is set, so an
    explicit null clears it. ``tags`` replaces the whole tag set.
    """

    title: str | None = None
    description: str | None = None
    description_provided: bool = False
    tags: list[TagSpec] | None = None


class BookManagementUseCase:
    """Use case for book catalog operations."""

    def __init__(
        self,
        book_repository: BookRepositoryProtocol,
        tag_resolver: TagResolver,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize use case with dependencies."""
        self.book_repository = book_repository
        self.tag_resolver = tag_resolver
        self.unit_of_work = unit_of_work

    def create_book(self, data: BookCreateData, user_id: int) -> Book:
        """
        Register a new book uploaded by the user.

        Args:
            data: Book metadata and tag specs
            user_id: ID of the uploading user

        Returns:
            The persisted book

        Raises:
            DuplicateContentHashError: If another book already carries the same content hash
        """
        if data.content_hash and self.book_repository.find_by_content_hash(data.content_hash):
            raise DuplicateContentHashError(data.content_hash)

        with self.unit_of_work:
            tags = self.tag_resolver.resolve(data.tags or [])
            book = Book.create(
                user_id=UserId(user_id),
                title=data.title,
                content_hash=data.content_hash,
                description=data.description,
                tags=tags,
            )
            book = self.book_repository.save(book)
            self.unit_of_work.commit()

        logger.info("book_created", book_id=book.id.value, user_id=user_id)
        return book

    def get_book(self, book_id: int) -> Book:
        """
        Get a book by ID.

        Raises:
            BookNotFoundError: If book not found
        """
        book = self.book_repository.find_by_id(BookId(book_id))
        if not book:
            raise BookNotFoundError(book_id)
        return book

    def get_user_books(self, user_id: int) -> list[Book]:
        """Get every book the user uploaded, newest first."""
        return self.book_repository.find_by_owner(UserId(user_id))

    def update_book(self, book_id: int, requester_id: int, data: BookUpdateData) -> Book:
        """
        Apply a partial update to a book the requester uploaded.

        Raises:
            BookNotFoundError: If the book does not exist
            NotBookOwnerError: If the requester did not upload it
        """
        book = self._get_owned_book(book_id, requester_id)

        with self.unit_of_work:
            if data.title is not None:
                book.retitle(data.title)
            if data.description_provided:
                book.change_description(data.description)
            if data.tags is not None:
                book.replace_tags(self.tag_resolver.resolve(data.tags))

            book = self.book_repository.save(book)
            self.unit_of_work.commit()

        logger.info("book_updated", book_id=book_id, user_id=requester_id)
        return book

    def delete_book(self, book_id: int, requester_id: int) -> None:
        """
        Delete a book the requester uploaded.

        The book disappears from every media library that held it and from
        the uploader's virtual library.

        Raises:
            BookNotFoundError: If the book does not exist
            NotBookOwnerError: If the requester did not upload it
        """
        book = self._get_owned_book(book_id, requester_id)

        with self.unit_of_work:
            self.book_repository.delete(book.id)
            self.unit_of_work.commit()

        logger.info("book_deleted", book_id=book_id, user_id=requester_id)

    def _get_owned_book(self, book_id: int, requester_id: int) -> Book:
        book = self.get_book(book_id)
        if not book.is_owned_by(UserId(requester_id)):
            raise NotBookOwnerError
        return book
