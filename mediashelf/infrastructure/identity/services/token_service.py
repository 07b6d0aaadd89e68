"""JWT access and refresh tokens."""

from datetime import UTC, datetime, timedelta
from typing import Literal

import jwt
from jwt import InvalidTokenError
from pydantic import BaseModel

from mediashelf.config import get_settings

settings = get_settings()
ALGORITHM = "HS256"
REFRESH_TOKEN_EXPIRE_DAYS = settings.REFRESH_TOKEN_EXPIRE_DAYS

TokenKind = Literal["access", "refresh"]


class TokenWithRefresh(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str
    expires_in: int


class JWTTokenService:
    """
    Issues and checks HS256 tokens carrying the user id in ``sub``.

    Access and refresh tokens are signed with separate secrets when a refresh
    secret is configured, and each carries a ``type`` claim so one can never be
    replayed as the other.
    """

    def __init__(
        self,
        secret_key: str,
        refresh_secret_key: str | None = None,
        access_ttl: timedelta = timedelta(minutes=15),
        refresh_ttl: timedelta = timedelta(days=30),
    ) -> None:
        self._secrets: dict[TokenKind, str] = {
            "access": secret_key,
            "refresh": refresh_secret_key or secret_key,
        }
        self._ttls: dict[TokenKind, timedelta] = {"access": access_ttl, "refresh": refresh_ttl}

    @classmethod
    def from_settings(cls) -> "JWTTokenService":
        return cls(
            secret_key=settings.SECRET_KEY,
            refresh_secret_key=settings.REFRESH_TOKEN_SECRET_KEY,
            access_ttl=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
            refresh_ttl=timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS),
        )

    def _issue(self, user_id: int, kind: TokenKind) -> str:
        claims = {
            "sub": str(user_id),
            "exp": datetime.now(UTC) + self._ttls[kind],
            "type": kind,
        }
        return jwt.encode(claims, self._secrets[kind], algorithm=ALGORITHM)

    def _read(self, token: str, kind: TokenKind) -> int | None:
        try:
            payload = jwt.decode(token, self._secrets[kind], algorithms=[ALGORITHM])
            if payload.get("type") != kind:
                return None
            return int(payload["sub"])
        except (InvalidTokenError, KeyError, ValueError):
            return None

    def create_token_pair(self, user_id: int) -> TokenWithRefresh:
        return TokenWithRefresh(
            access_token=self._issue(user_id, "access"),
            refresh_token=self._issue(user_id, "refresh"),
            token_type="bearer",  # noqa: S106
            expires_in=int(self._ttls["access"].total_seconds()),
        )

    def verify_access_token(self, token: str) -> int | None:
        return self._read(token, "access")

    def verify_refresh_token(self, token: str) -> int | None:
        return self._read(token, "refresh")


default_token_service = JWTTokenService.from_settings()


def verify_access_token(token: str) -> int | None:
    """User id from a valid access token, or ``None``."""
    return default_token_service.verify_access_token(token)
