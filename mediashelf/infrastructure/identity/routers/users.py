import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from slowapi import Limiter
from slowapi.util import get_remote_address

from mediashelf.application.identity.use_cases.register_user_use_case import RegisterUserUseCase
from mediashelf.config import get_settings
from mediashelf.core import container
from mediashelf.dependencies import ensure_registrations_open
from mediashelf.domain.common.exceptions import ConflictError, DomainError
from mediashelf.exceptions import MediaShelfError
from mediashelf.infrastructure.common.di import inject_use_case
from mediashelf.infrastructure.identity.dependencies import CurrentUser
from mediashelf.infrastructure.identity.routers.auth import set_refresh_cookie
from mediashelf.infrastructure.identity.schemas import UserDetailsResponse, UserRegisterRequest
from mediashelf.infrastructure.identity.services.token_service import TokenWithRefresh

logger = logging.getLogger(__name__)
settings = get_settings()
router = APIRouter(prefix="/users", tags=["users"])
limiter = Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)


@router.post("/register", dependencies=[Depends(ensure_registrations_open)])
@limiter.limit("5/minute")  # type: ignore[misc]
async def register(
    request: Request,
    response: Response,
    register_data: UserRegisterRequest,
    use_case: RegisterUserUseCase = Depends(inject_use_case(container.register_user_use_case)),
) -> TokenWithRefresh:
    """
    Register a new user account.

    Also provisions the user's reading-history library. Returns a token
    pair for immediate login after registration.
    """
    try:
        _, token_pair = use_case.register_user(
            register_data.username, register_data.email, register_data.password
        )
        set_refresh_cookie(response, token_pair.refresh_token)
        return token_pair
    except (ConflictError, MediaShelfError):
        # Handled by exception handlers
        raise
    except DomainError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
    except Exception as e:
        logger.error(f"Failed to register user: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/me")
async def get_me(current_user: CurrentUser) -> UserDetailsResponse:
    """Get the current user's profile information."""
    return UserDetailsResponse(
        id=current_user.id.value,
        username=current_user.username,
        email=current_user.email,
        created_at=current_user.created_at,
    )
