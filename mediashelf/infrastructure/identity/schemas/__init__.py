"""Identity context schemas."""

from mediashelf.infrastructure.identity.schemas.user_schemas import (
    UserDetailsResponse,
    UserRegisterRequest,
)

__all__ = [
    "UserDetailsResponse",
    "UserRegisterRequest",
]
