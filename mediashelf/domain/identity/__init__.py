"""Identity domain layer."""

from mediashelf.domain.identity.entities.user import User
from mediashelf.domain.identity.exceptions import (
    AccountAlreadyExistsError,
    InvalidCredentialsError,
    UserNotFoundError,
)

__all__ = [
    "AccountAlreadyExistsError",
    "InvalidCredentialsError",
    "User",
    "UserNotFoundError",
]
