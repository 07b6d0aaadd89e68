"""Repository for Book domain entities."""

import logging

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from mediashelf.application.common.pagination import PageWindow
from mediashelf.domain.common.value_objects.ids import BookId, UserId
from mediashelf.domain.library.entities.book import Book
from mediashelf.domain.library.exceptions import BookNotFoundError, DuplicateContentHashError
from mediashelf.infrastructure.common.integrity import is_unique_violation
from mediashelf.infrastructure.library.mappers.book_mapper import BookMapper
from mediashelf.models import Book as BookORM
from mediashelf.models import MediaLibraryItem as MediaLibraryItemORM
from mediashelf.models import Tag as TagORM

logger = logging.getLogger(__name__)


class BookRepository:
    """Repository for Book domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = BookMapper()

    def find_by_id(self, book_id: BookId) -> Book | None:
        """
        Find a book by ID.

        Args:
            book_id: The book ID

        Returns:
            Book entity if found, None otherwise
        """
        orm_model = self.db.get(BookORM, book_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def exists(self, book_id: BookId) -> bool:
        stmt = select(BookORM.id).where(BookORM.id == book_id.value)
        return self.db.execute(stmt).scalar_one_or_none() is not None

    def find_by_content_hash(self, content_hash: str) -> Book | None:
        stmt = select(BookORM).where(BookORM.content_hash == content_hash)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_owner(self, owner_id: UserId, window: PageWindow | None = None) -> list[Book]:
        """
        Get books uploaded by a user, newest first.

        Args:
            owner_id: The uploading user
            window: Optional limit/offset window; None returns every book

        Returns:
            List of book entities
        """
        stmt = (
            select(BookORM)
            .where(BookORM.user_id == owner_id.value)
            .order_by(BookORM.created_at.desc(), BookORM.id.desc())
        )
        if window is not None:
            stmt = stmt.offset(window.skip).limit(window.take)
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def count_by_owner(self, owner_id: UserId) -> int:
        stmt = select(func.count(BookORM.id)).where(BookORM.user_id == owner_id.value)
        return self.db.execute(stmt).scalar_one()

    def find_latest_by_owner(self, owner_id: UserId) -> Book | None:
        stmt = (
            select(BookORM)
            .where(BookORM.user_id == owner_id.value)
            .order_by(BookORM.created_at.desc(), BookORM.id.desc())
            .limit(1)
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def save(self, book: Book) -> Book:
        """
        Insert a new book or update an existing one, replacing its tags.

        The caller's unit of work commits.

        Raises:
            BookNotFoundError: If updating a book that no longer exists
            DuplicateContentHashError: If the content hash is already taken
        """
        if book.id.value == 0:
            orm_model = self.mapper.to_orm(book)
            self.db.add(orm_model)
        else:
            existing = self.db.get(BookORM, book.id.value)
            if not existing:
                raise BookNotFoundError(book.id.value)
            orm_model = self.mapper.to_orm(book, existing)

        tag_ids = list(dict.fromkeys(tag.id.value for tag in book.tags))
        orm_model.tags = (
            list(self.db.execute(select(TagORM).where(TagORM.id.in_(tag_ids))).scalars().all())
            if tag_ids
            else []
        )

        try:
            self.db.flush()
        except IntegrityError as e:
            self.db.rollback()
            if is_unique_violation(e, "books_content_hash_key", "books.content_hash"):
                raise DuplicateContentHashError(book.content_hash or "") from e
            raise

        logger.info(f"Saved book '{book.title}' (id={orm_model.id})")
        return self.mapper.to_domain(orm_model)

    def delete(self, book_id: BookId) -> None:
        """Delete a book and every library item pointing at it."""
        self.db.execute(
            delete(MediaLibraryItemORM).where(MediaLibraryItemORM.book_id == book_id.value)
        )
        orm_model = self.db.get(BookORM, book_id.value)
        if orm_model is not None:
            self.db.delete(orm_model)
        self.db.flush()
        logger.info(f"Deleted book {book_id.value}")
