"""User entity for identity management."""

from dataclasses import dataclass
from datetime import datetime

from mediashelf.domain.common.entity import Entity
from mediashelf.domain.common.exceptions import ValidationError
from mediashelf.domain.common.value_objects.ids import UserId

# Domain constraints
MAX_USERNAME_LENGTH = 50
MAX_EMAIL_LENGTH = 100


@dataclass
class User(Entity[UserId]):
    """
    User entity representing an authenticated user in the system.

    Business Rules:
    - Username and email must be unique (enforced at repository level)
    - Username and email must be non-empty and fit their column lengths
    - Password hashing is an infrastructure concern (not stored as plain text)
    """

    id: UserId
    username: str
    email: str
    hashed_password: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.username or not self.username.strip():
            raise ValidationError("Username cannot be empty", field="username")
        if len(self.username) > MAX_USERNAME_LENGTH:
            raise ValidationError(
                f"Username cannot exceed {MAX_USERNAME_LENGTH} characters",
                field="username",
                value=self.username,
            )
        if not self.email:
            raise ValidationError("Email cannot be empty", field="email", value=self.email)
        if len(self.email) > MAX_EMAIL_LENGTH:
            raise ValidationError(
                f"Email cannot exceed {MAX_EMAIL_LENGTH} characters",
                field="email",
                value=self.email,
            )

    @classmethod
    def create(cls, username: str, email: str, hashed_password: str | None = None) -> "User":
        """
        Create a new user.

        Raises:
            ValidationError: If username or email is invalid
        """
        return cls(
            id=UserId.generate(),
            username=username.strip(),
            email=email,
            hashed_password=hashed_password,
        )

    @classmethod
    def create_with_id(
        cls,
        id: UserId,
        username: str,
        email: str,
        hashed_password: str | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        """Reconstitute a user from persistence."""
        return cls(
            id=id,
            username=username,
            email=email,
            hashed_password=hashed_password,
            created_at=created_at,
            updated_at=updated_at,
        )
