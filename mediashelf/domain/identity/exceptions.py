"""Identity domain exceptions."""

from mediashelf.domain.common.exceptions import ConflictError, DomainError, EntityNotFoundError


class UserNotFoundError(EntityNotFoundError):
    """Raised when a user cannot be found."""

    def __init__(self, user_id: int) -> None:
        super().__init__("User", user_id)


class AccountAlreadyExistsError(ConflictError):
    """Raised when attempting to register with a username or email that already exists."""

    def __init__(self, username: str, email: str) -> None:
        super().__init__(
            "Username or email already exists", {"username": username, "email": email}
        )
        self.username = username
        self.email = email


class InvalidCredentialsError(DomainError):
    """Raised when authentication fails due to invalid credentials."""

    def __init__(self) -> None:
        super().__init__("Invalid username or password")
