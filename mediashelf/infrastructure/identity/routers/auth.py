import logging
from typing import Annotated

from fastapi import APIRouter, Cookie, Depends, HTTPException, Request, Response
from fastapi.security import OAuth2PasswordRequestForm
from pydantic import BaseModel
from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette import status

from mediashelf.application.identity.use_cases.authentication_use_case import (
    AuthenticationUseCase,
)
from mediashelf.config import get_settings
from mediashelf.core import container
from mediashelf.domain.identity.exceptions import InvalidCredentialsError
from mediashelf.infrastructure.common.di import inject_use_case
from mediashelf.infrastructure.common.schemas import MessageResponse
from mediashelf.infrastructure.identity.services.token_service import (
    REFRESH_TOKEN_EXPIRE_DAYS,
    TokenWithRefresh,
)

logger = logging.getLogger(__name__)
settings = get_settings()
router = APIRouter(prefix="/auth", tags=["auth"])
limiter = Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)

REFRESH_COOKIE = "refresh_token"
# Browser clients only ever send the refresh cookie back to the auth routes.
REFRESH_COOKIE_OPTIONS = {
    "httponly": True,
    "secure": settings.COOKIE_SECURE,
    "samesite": "strict",
    "path": f"{settings.API_V1_PREFIX}/auth",
}


class RefreshTokenRequest(BaseModel):
    refresh_token: str | None = None


def set_refresh_cookie(response: Response, refresh_token: str) -> None:
    response.set_cookie(
        REFRESH_COOKIE,
        refresh_token,
        max_age=REFRESH_TOKEN_EXPIRE_DAYS * 24 * 60 * 60,
        **REFRESH_COOKIE_OPTIONS,  # type: ignore[arg-type]
    )


def _clear_refresh_cookie(response: Response) -> None:
    response.delete_cookie(REFRESH_COOKIE, **REFRESH_COOKIE_OPTIONS)  # type: ignore[arg-type]


@router.post("/login")
@limiter.limit("5/minute")  # type: ignore[misc]
async def login(
    request: Request,
    response: Response,
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
    use_case: AuthenticationUseCase = Depends(inject_use_case(container.authentication_use_case)),
) -> TokenWithRefresh:
    """Log in with username (or email) and password."""
    try:
        token_pair = use_case.login(form_data.username, form_data.password)
        set_refresh_cookie(response, token_pair.refresh_token)
        return token_pair
    except InvalidCredentialsError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        ) from None


@router.post("/refresh")
@limiter.limit("10/minute")  # type: ignore[misc]
async def refresh(
    request: Request,
    response: Response,
    body: RefreshTokenRequest | None = None,
    refresh_token: Annotated[str | None, Cookie()] = None,
    use_case: AuthenticationUseCase = Depends(inject_use_case(container.authentication_use_case)),
) -> TokenWithRefresh:
    """Rotate the token pair. The refresh token comes from the cookie or, failing that, the body."""
    token = refresh_token or (body.refresh_token if body else None)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Refresh token required",
        )

    try:
        token_pair = use_case.refresh(token)
        set_refresh_cookie(response, token_pair.refresh_token)
        return token_pair
    except InvalidCredentialsError:
        _clear_refresh_cookie(response)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired refresh token",
        ) from None


@router.post("/logout")
async def logout(response: Response) -> MessageResponse:
    """Drop the refresh cookie. Issued access tokens stay valid until they expire."""
    _clear_refresh_cookie(response)
    return MessageResponse(message="Logged out successfully")
