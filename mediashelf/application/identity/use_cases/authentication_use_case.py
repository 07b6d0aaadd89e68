"""Login, token rotation and bearer-token user lookup."""

import structlog

from mediashelf.application.identity.protocols.password_service import PasswordServiceProtocol
from mediashelf.application.identity.protocols.token_service import TokenServiceProtocol
from mediashelf.application.identity.protocols.user_repository import UserRepositoryProtocol
from mediashelf.domain.common.value_objects.ids import UserId
from mediashelf.domain.identity.entities.user import User
from mediashelf.domain.identity.exceptions import InvalidCredentialsError, UserNotFoundError
from mediashelf.infrastructure.identity.services.token_service import TokenWithRefresh

logger = structlog.get_logger(__name__)


class AuthenticationUseCase:
    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        password_service: PasswordServiceProtocol,
        token_service: TokenServiceProtocol,
    ) -> None:
        self.user_repository = user_repository
        self.password_service = password_service
        self.token_service = token_service

    def login(self, identifier: str, password: str) -> TokenWithRefresh:
        """
        Issue a token pair for a username or email plus password.

        An unknown identifier still pays for one hash verification, so the
        response time does not reveal which accounts exist.

        Raises:
            InvalidCredentialsError: On an unknown account or a wrong password
        """
        user = self.user_repository.find_by_username(identifier)
        if user is None:
            user = self.user_repository.find_by_email(identifier)

        stored_hash = user.hashed_password if user else None
        matches = self.password_service.verify_password(
            password, stored_hash or self.password_service.get_dummy_hash()
        )
        if user is None or stored_hash is None or not matches:
            raise InvalidCredentialsError

        logger.info("user_logged_in", user_id=user.id.value)
        return self.token_service.create_token_pair(user.id.value)

    def refresh(self, refresh_token: str) -> TokenWithRefresh:
        """
        Rotate a refresh token into a fresh token pair.

        Raises:
            InvalidCredentialsError: If the token is invalid or its user is gone
        """
        user_id = self.token_service.verify_refresh_token(refresh_token)
        if user_id is None or self.user_repository.find_by_id(UserId(user_id)) is None:
            raise InvalidCredentialsError

        logger.info("token_pair_refreshed", user_id=user_id)
        return self.token_service.create_token_pair(user_id)

    def get_user_by_id(self, user_id: int) -> User:
        """Raises UserNotFoundError when the id from a token no longer resolves."""
        user = self.user_repository.find_by_id(UserId(user_id))
        if not user:
            raise UserNotFoundError(user_id)
        return user
