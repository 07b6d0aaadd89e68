"""Repository for MediaLibrary aggregates and their items."""

import logging

from sqlalchemy import delete, func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from mediashelf.application.common.pagination import PageWindow
from mediashelf.domain.common.value_objects.ids import (
    BookId,
    MediaLibraryId,
    MediaLibraryItemId,
    UserId,
)
from mediashelf.domain.library.entities.media_library import MediaLibrary
from mediashelf.domain.library.entities.media_library_item import MediaLibraryItem
from mediashelf.domain.library.entities.tag import Tag
from mediashelf.domain.library.exceptions import (
    DuplicateLibraryBookError,
    DuplicateLibraryNameError,
    DuplicateLibraryNestingError,
    LibraryNotFoundError,
)
from mediashelf.infrastructure.common.integrity import is_unique_violation
from mediashelf.infrastructure.library.mappers.media_library_mapper import (
    MediaLibraryItemMapper,
    MediaLibraryMapper,
)
from mediashelf.models import MediaLibrary as MediaLibraryORM
from mediashelf.models import MediaLibraryItem as MediaLibraryItemORM
from mediashelf.models import Tag as TagORM

logger = logging.getLogger(__name__)


class MediaLibraryRepository:
    """
    Repository for media libraries and their membership items.

    Writes are flushed, never committed: the unit of work owns the
    transaction. Unique-constraint violations surface as the matching
    conflict error after the transaction is rolled back.
    """

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = MediaLibraryMapper()
        self.item_mapper = MediaLibraryItemMapper()

    # Libraries

    def find_by_id(self, library_id: MediaLibraryId) -> MediaLibrary | None:
        """
        Find a library by ID.

        Args:
            library_id: The library ID

        Returns:
            MediaLibrary entity if found, None otherwise
        """
        orm_model = self.db.get(MediaLibraryORM, library_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_owner_and_name(self, owner_id: UserId, name: str) -> MediaLibrary | None:
        stmt = select(MediaLibraryORM).where(
            MediaLibraryORM.user_id == owner_id.value,
            MediaLibraryORM.name == name,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def name_exists(self, owner_id: UserId, name: str) -> bool:
        stmt = select(MediaLibraryORM.id).where(
            MediaLibraryORM.user_id == owner_id.value,
            MediaLibraryORM.name == name,
        )
        return self.db.execute(stmt).scalar_one_or_none() is not None

    def find_by_owner(self, owner_id: UserId) -> list[MediaLibrary]:
        """Get a user's libraries, newest first."""
        stmt = (
            select(MediaLibraryORM)
            .where(MediaLibraryORM.user_id == owner_id.value)
            .order_by(MediaLibraryORM.created_at.desc(), MediaLibraryORM.id.desc())
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def save(self, library: MediaLibrary) -> MediaLibrary:
        """
        Insert or update a library and replace its tag associations.

        Raises:
            LibraryNotFoundError: If updating a library that no longer exists
            DuplicateLibraryNameError: If ``(owner, name)`` is already taken
        """
        if library.id.value == 0:
            orm_model = self.mapper.to_orm(library)
            self.db.add(orm_model)
        else:
            existing = self.db.get(MediaLibraryORM, library.id.value)
            if not existing:
                raise LibraryNotFoundError(library.id.value)
            orm_model = self.mapper.to_orm(library, existing)

        orm_model.tags = self._tag_rows(library.tags)

        try:
            self.db.flush()
        except IntegrityError as e:
            self.db.rollback()
            if is_unique_violation(
                e, "uq_media_library_owner_name", "media_libraries.user_id", "media_libraries.name"
            ):
                raise DuplicateLibraryNameError(library.name) from e
            raise

        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def delete(self, library_id: MediaLibraryId) -> None:
        """
        Delete a library together with its own items and any item nesting it.

        Both steps run in the caller's transaction.
        """
        self.db.execute(
            delete(MediaLibraryItemORM).where(
                or_(
                    MediaLibraryItemORM.library_id == library_id.value,
                    MediaLibraryItemORM.child_library_id == library_id.value,
                )
            )
        )
        orm_model = self.db.get(MediaLibraryORM, library_id.value)
        if orm_model:
            self.db.delete(orm_model)
        self.db.flush()
        logger.info(f"Deleted media library {library_id.value}")

    # Items

    def count_items(self, library_id: MediaLibraryId) -> int:
        stmt = select(func.count(MediaLibraryItemORM.id)).where(
            MediaLibraryItemORM.library_id == library_id.value
        )
        return self.db.execute(stmt).scalar_one()

    def find_items(
        self, library_id: MediaLibraryId, window: PageWindow | None = None
    ) -> list[MediaLibraryItem]:
        """
        Get a library's items, newest added first.

        Args:
            library_id: The library ID
            window: Optional limit/offset window; None returns every item

        Returns:
            List of item entities
        """
        stmt = (
            select(MediaLibraryItemORM)
            .where(MediaLibraryItemORM.library_id == library_id.value)
            .order_by(MediaLibraryItemORM.added_at.desc(), MediaLibraryItemORM.id.desc())
        )
        if window is not None:
            stmt = stmt.offset(window.skip).limit(window.take)
        orm_models = self.db.execute(stmt).unique().scalars().all()
        return [self.item_mapper.to_domain(orm) for orm in orm_models]

    def find_item(self, item_id: MediaLibraryItemId) -> MediaLibraryItem | None:
        orm_model = self.db.get(MediaLibraryItemORM, item_id.value)
        return self.item_mapper.to_domain(orm_model) if orm_model else None

    def contains_book(self, library_id: MediaLibraryId, book_id: BookId) -> bool:
        stmt = select(MediaLibraryItemORM.id).where(
            MediaLibraryItemORM.library_id == library_id.value,
            MediaLibraryItemORM.book_id == book_id.value,
        )
        return self.db.execute(stmt).scalar_one_or_none() is not None

    def contains_child_library(
        self, library_id: MediaLibraryId, child_library_id: MediaLibraryId
    ) -> bool:
        stmt = select(MediaLibraryItemORM.id).where(
            MediaLibraryItemORM.library_id == library_id.value,
            MediaLibraryItemORM.child_library_id == child_library_id.value,
        )
        return self.db.execute(stmt).scalar_one_or_none() is not None

    def find_book_ids(self, library_id: MediaLibraryId) -> list[BookId]:
        stmt = (
            select(MediaLibraryItemORM.book_id)
            .where(
                MediaLibraryItemORM.library_id == library_id.value,
                MediaLibraryItemORM.book_id.is_not(None),
            )
            .order_by(MediaLibraryItemORM.added_at, MediaLibraryItemORM.id)
        )
        return [BookId(book_id) for book_id in self.db.execute(stmt).scalars().all()]

    def add_item(self, item: MediaLibraryItem) -> MediaLibraryItem:
        """
        Insert a membership item.

        Raises:
            DuplicateLibraryBookError: If the book is already in the library
            DuplicateLibraryNestingError: If the child library is already nested
        """
        orm_model = self.item_mapper.to_orm(item)
        self.db.add(orm_model)

        try:
            self.db.flush()
        except IntegrityError as e:
            self.db.rollback()
            if item.book_id is not None and is_unique_violation(
                e,
                "uq_media_library_item_book",
                "media_library_items.library_id",
                "media_library_items.book_id",
            ):
                raise DuplicateLibraryBookError(item.library_id.value, item.book_id.value) from e
            if item.child_library_id is not None and is_unique_violation(
                e,
                "uq_media_library_item_child_library",
                "media_library_items.library_id",
                "media_library_items.child_library_id",
            ):
                raise DuplicateLibraryNestingError(
                    item.library_id.value, item.child_library_id.value
                ) from e
            raise

        self.db.refresh(orm_model)
        return self.item_mapper.to_domain(orm_model)

    def add_items(self, items: list[MediaLibraryItem]) -> None:
        if not items:
            return
        self.db.add_all([self.item_mapper.to_orm(item) for item in items])
        self.db.flush()

    def delete_item(self, item_id: MediaLibraryItemId) -> None:
        self.db.execute(
            delete(MediaLibraryItemORM).where(MediaLibraryItemORM.id == item_id.value)
        )
        self.db.flush()

    def _tag_rows(self, tags: list[Tag]) -> list[TagORM]:
        tag_ids = list(dict.fromkeys(tag.id.value for tag in tags))
        if not tag_ids:
            return []
        rows = self.db.execute(select(TagORM).where(TagORM.id.in_(tag_ids))).scalars().all()
        by_id = {row.id: row for row in rows}
        return [by_id[tag_id] for tag_id in tag_ids if tag_id in by_id]
