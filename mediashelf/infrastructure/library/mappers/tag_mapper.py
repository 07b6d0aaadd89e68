"""Mapper for Tag ORM ↔ Domain conversion."""

from mediashelf.domain.common.value_objects.ids import TagId
from mediashelf.domain.library.entities.tag import Tag
from mediashelf.models import Tag as TagORM


class TagMapper:
    """Mapper for Tag ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: TagORM) -> Tag:
        """Convert ORM model to domain entity."""
        return Tag.create_with_id(
            id=TagId(orm_model.id),
            key=orm_model.key,
            value=orm_model.value,
            shown=orm_model.shown,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(self, domain_entity: Tag) -> TagORM:
        """Convert a new domain entity to an ORM model."""
        return TagORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            key=domain_entity.key,
            value=domain_entity.value,
            shown=domain_entity.shown,
            created_at=domain_entity.created_at,
            updated_at=domain_entity.updated_at,
        )
