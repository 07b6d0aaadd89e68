"""Use case for user registration."""

import structlog

from mediashelf.application.common.unit_of_work import UnitOfWork
from mediashelf.application.identity.protocols.password_service import PasswordServiceProtocol
from mediashelf.application.identity.protocols.token_service import TokenServiceProtocol
from mediashelf.application.identity.protocols.user_repository import UserRepositoryProtocol
from mediashelf.application.library.protocols.media_library_repository import (
    MediaLibraryRepositoryProtocol,
)
from mediashelf.domain.identity.entities.user import User
from mediashelf.domain.identity.exceptions import AccountAlreadyExistsError
from mediashelf.domain.library.entities.media_library import MediaLibrary
from mediashelf.infrastructure.identity.services.token_service import TokenWithRefresh

logger = structlog.get_logger(__name__)


class RegisterUserUseCase:
    """Use case for user registration operations."""

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        library_repository: MediaLibraryRepositoryProtocol,
        password_service: PasswordServiceProtocol,
        token_service: TokenServiceProtocol,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize use case with dependencies."""
        self.user_repository = user_repository
        self.library_repository = library_repository
        self.password_service = password_service
        self.token_service = token_service
        self.unit_of_work = unit_of_work

    def register_user(
        self, username: str, email: str, password: str
    ) -> tuple[User, TokenWithRefresh]:
        """
        Register a new user account.

        The user's reading-history system library is provisioned in the same
        transaction, so an account never exists without it.

        Args:
            username: Unique username
            email: User's email address
            password: User's plain text password (will be hashed)

        Returns:
            Tuple of (created user, token pair for immediate login)

        Raises:
            AccountAlreadyExistsError: If username or email is already registered
        """
        username = username.strip()
        if self.user_repository.find_by_username(username) or self.user_repository.find_by_email(
            email
        ):
            raise AccountAlreadyExistsError(username, email)

        hashed_password = self.password_service.hash_password(password)

        with self.unit_of_work:
            user = self.user_repository.save(
                User.create(username=username, email=email, hashed_password=hashed_password)
            )
            self.library_repository.save(MediaLibrary.create_system_reading_history(user.id))
            self.unit_of_work.commit()

        token_pair = self.token_service.create_token_pair(user.id.value)

        logger.info("user_registered", user_id=user.id.value, username=username)

        return user, token_pair
