from .password_service import PepperedPasswordHasher
from .token_service import JWTTokenService

__all__ = [
    "JWTTokenService",
    "PepperedPasswordHasher",
]
