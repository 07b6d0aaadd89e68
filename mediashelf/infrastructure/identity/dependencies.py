"""FastAPI dependencies for identity and authentication."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from mediashelf.config import get_settings
from mediashelf.core import container
from mediashelf.database import DatabaseSession
from mediashelf.domain.identity.entities.user import User
from mediashelf.domain.identity.exceptions import UserNotFoundError
from mediashelf.exceptions import CredentialsException
from mediashelf.infrastructure.common.di import bound_session
from mediashelf.infrastructure.identity.services.token_service import verify_access_token

settings = get_settings()

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_V1_PREFIX}/auth/login")
optional_oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl=f"{settings.API_V1_PREFIX}/auth/login", auto_error=False
)


def _resolve_user(token: str, db: DatabaseSession) -> User:
    user_id = verify_access_token(token)
    if user_id is None:
        raise CredentialsException

    with bound_session(db):
        use_case = container.authentication_use_case()
    try:
        return use_case.get_user_by_id(user_id)
    except UserNotFoundError:
        raise CredentialsException from None


async def get_current_user(
    token: Annotated[str, Depends(oauth2_scheme)], db: DatabaseSession
) -> User:
    """
    Get the current authenticated user from the access token.

    Raises:
        CredentialsException: If token is invalid or user not found
    """
    return _resolve_user(token, db)


async def get_optional_current_user(
    token: Annotated[str | None, Depends(optional_oauth2_scheme)], db: DatabaseSession
) -> User | None:
    """
    Get the current user when a bearer token is present.

    Anonymous requests resolve to ``None``; a present but invalid token
    still fails with 401.
    """
    if not token:
        return None
    return _resolve_user(token, db)


CurrentUser = Annotated[User, Depends(get_current_user)]
OptionalCurrentUser = Annotated[User | None, Depends(get_optional_current_user)]
