"""Repository for User domain entities."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from mediashelf.domain.common.value_objects.ids import UserId
from mediashelf.domain.identity.entities.user import User
from mediashelf.domain.identity.exceptions import AccountAlreadyExistsError
from mediashelf.infrastructure.identity.mappers.user_mapper import UserMapper
from mediashelf.models import User as UserORM

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for User domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = UserMapper()

    def find_by_id(self, user_id: UserId) -> User | None:
        """
        Find a user by ID.

        Args:
            user_id: The user ID

        Returns:
            User entity if found, None otherwise
        """
        stmt = select(UserORM).where(UserORM.id == user_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_username(self, username: str) -> User | None:
        stmt = select(UserORM).where(UserORM.username == username)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_email(self, email: str) -> User | None:
        """
        Find a user by email.

        Args:
            email: The user's email address

        Returns:
            User entity if found, None otherwise
        """
        stmt = select(UserORM).where(UserORM.email == email)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def save(self, user: User) -> User:
        """
        Save a user entity. The caller's unit of work commits.

        Returns:
            Saved user entity with database-generated values

        Raises:
            AccountAlreadyExistsError: If username or email is already registered
        """
        if user.id.value == 0:
            orm_model = self.mapper.to_orm(user)
            self.db.add(orm_model)
        else:
            stmt = select(UserORM).where(UserORM.id == user.id.value)
            existing = self.db.execute(stmt).scalar_one_or_none()
            if not existing:
                raise ValueError(f"User with id {user.id.value} not found")
            orm_model = self.mapper.to_orm(user, existing)

        try:
            self.db.flush()
        except IntegrityError as e:
            self.db.rollback()
            raise AccountAlreadyExistsError(user.username, user.email) from e

        self.db.refresh(orm_model)
        logger.info(f"Saved user {user.username} (id={orm_model.id})")
        return self.mapper.to_domain(orm_model)
