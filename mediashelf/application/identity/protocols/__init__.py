from mediashelf.application.identity.protocols.password_service import PasswordServiceProtocol
from mediashelf.application.identity.protocols.token_service import TokenServiceProtocol
from mediashelf.application.identity.protocols.user_repository import UserRepositoryProtocol

__all__ = [
    "PasswordServiceProtocol",
    "TokenServiceProtocol",
    "UserRepositoryProtocol",
]
