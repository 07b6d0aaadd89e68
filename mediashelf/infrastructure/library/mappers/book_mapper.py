from mediashelf.domain.common.value_objects.ids import BookId, UserId
from mediashelf.domain.library.entities.book import Book
from mediashelf.infrastructure.library.mappers.tag_mapper import TagMapper
from mediashelf.models import Book as BookORM


class BookMapper:
    """Mapper for Book ORM ↔ Domain conversion."""

    def __init__(self) -> None:
        self.tag_mapper = TagMapper()

    def to_domain(self, orm_model: BookORM) -> Book:
        """Convert ORM model to domain entity."""
        return Book.create_with_id(
            id=BookId(orm_model.id),
            user_id=UserId(orm_model.user_id) if orm_model.user_id is not None else None,
            title=orm_model.title,
            content_hash=orm_model.content_hash,
            description=orm_model.description,
            tags=[self.tag_mapper.to_domain(tag) for tag in orm_model.tags],
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(self, domain_entity: Book, orm_model: BookORM | None = None) -> BookORM:
        """
        Convert to an ORM model, updating ``orm_model`` in place when given.

        Tags are attached by the repository.
        """
        if orm_model is None:
            return BookORM(
                id=domain_entity.id.value if domain_entity.id.value != 0 else None,
                user_id=domain_entity.user_id.value if domain_entity.user_id else None,
                title=domain_entity.title,
                content_hash=domain_entity.content_hash,
                description=domain_entity.description,
                created_at=domain_entity.created_at,
                updated_at=domain_entity.updated_at,
            )

        orm_model.title = domain_entity.title
        orm_model.description = domain_entity.description
        orm_model.updated_at = domain_entity.updated_at
        return orm_model
