"""Repository for Tag domain entity."""

from sqlalchemy import and_, or_, select
from sqlalchemy.orm import Session

from mediashelf.domain.library.entities.tag import Tag
from mediashelf.infrastructure.library.mappers.tag_mapper import TagMapper
from mediashelf.models import Tag as TagORM


class TagRepository:
    """Repository for Tag domain entity."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = TagMapper()

    def find_by_pairs(self, pairs: list[tuple[str, str]]) -> list[Tag]:
        """
        Get every tag matching one of the given ``(key, value)`` pairs in a single query.

        Args:
            pairs: Exact ``(key, value)`` pairs to look up

        Returns:
            List of tag entities
        """
        if not pairs:
            return []

        stmt = select(TagORM).where(
            or_(*(and_(TagORM.key == key, TagORM.value == value) for key, value in pairs))
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def save(self, tag: Tag) -> Tag:
        """
        Persist a new tag and flush to obtain its id.

        Args:
            tag: Tag entity with a placeholder id

        Returns:
            Tag entity with database-generated values
        """
        orm_model = self.mapper.to_orm(tag)
        self.db.add(orm_model)
        self.db.flush()
        return self.mapper.to_domain(orm_model)
