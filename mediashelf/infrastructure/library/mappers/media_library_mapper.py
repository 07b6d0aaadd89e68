"""Mapper for MediaLibrary and MediaLibraryItem ORM ↔ Domain conversion."""

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
    ItemTarget,
    MediaLibraryItem,
)
from mediashelf.infrastructure.library.mappers.tag_mapper import TagMapper
from mediashelf.models import MediaLibrary as MediaLibraryORM
from mediashelf.models import MediaLibraryItem as MediaLibraryItemORM


class MediaLibraryMapper:
    """Mapper for MediaLibrary ORM ↔ Domain conversion."""

    def __init__(self) -> None:
        self.tag_mapper = TagMapper()

    def to_domain(self, orm_model: MediaLibraryORM) -> MediaLibrary:
        """Convert ORM model to domain entity."""
        return MediaLibrary.create_with_id(
            id=MediaLibraryId(orm_model.id),
            owner_id=UserId(orm_model.user_id) if orm_model.user_id is not None else None,
            name=orm_model.name,
            description=orm_model.description,
            is_public=orm_model.is_public,
            is_system=orm_model.is_system,
            tags=[self.tag_mapper.to_domain(tag) for tag in orm_model.tags],
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(
        self, domain_entity: MediaLibrary, orm_model: MediaLibraryORM | None = None
    ) -> MediaLibraryORM:
        """Convert domain entity to ORM model. Tags are attached by the repository."""
        if orm_model:
            # Update existing
            orm_model.name = domain_entity.name
            orm_model.description = domain_entity.description
            orm_model.is_public = domain_entity.is_public
            if domain_entity.updated_at is not None:
                orm_model.updated_at = domain_entity.updated_at
            return orm_model

        # Create new
        return MediaLibraryORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            user_id=domain_entity.owner_id.value if domain_entity.owner_id else None,
            name=domain_entity.name,
            description=domain_entity.description,
            is_public=domain_entity.is_public,
            is_system=domain_entity.is_system,
            created_at=domain_entity.created_at,
            updated_at=domain_entity.updated_at,
        )


class MediaLibraryItemMapper:
    """Mapper between item rows and the tagged item target."""

    def to_domain(self, orm_model: MediaLibraryItemORM) -> MediaLibraryItem:
        target: ItemTarget
        if orm_model.book_id is not None:
            target = BookTarget(BookId(orm_model.book_id))
        else:
            child = orm_model.child_library
            target = ChildLibraryTarget(
                MediaLibraryId(orm_model.child_library_id),
                child.name if child is not None else None,
            )
        return MediaLibraryItem.create_with_id(
            id=MediaLibraryItemId(orm_model.id),
            library_id=MediaLibraryId(orm_model.library_id),
            target=target,
            added_at=orm_model.added_at,
        )

    def to_orm(self, domain_entity: MediaLibraryItem) -> MediaLibraryItemORM:
        book_id = domain_entity.book_id
        child_library_id = domain_entity.child_library_id
        return MediaLibraryItemORM(
            library_id=domain_entity.library_id.value,
            book_id=book_id.value if book_id else None,
            child_library_id=child_library_id.value if child_library_id else None,
            added_at=domain_entity.added_at,
        )
