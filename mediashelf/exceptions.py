"""Custom exception hierarchy for the mediashelf application."""

from fastapi import HTTPException
from starlette import status


class MediaShelfError(Exception):
    """Base exception for all application-level errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class RegistrationClosedError(MediaShelfError):
    """Raised by the HTTP layer when the registration feature flag is off."""

    def __init__(self) -> None:
        """Initialize with 403 status code."""
        super().__init__("User registration is currently disabled", status_code=403)


CredentialsException = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
    headers={"WWW-Authenticate": "Bearer"},
)
