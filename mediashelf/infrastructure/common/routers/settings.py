from typing import Annotated

from fastapi import APIRouter, Depends

from mediashelf.feature_flags import (
    FeatureFlags,
    PagingLimits,
    get_feature_flags,
    get_paging_limits,
)
from mediashelf.infrastructure.common.schemas import AppSettingsResponse

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("")
async def get_app_settings(
    flags: Annotated[FeatureFlags, Depends(get_feature_flags)],
    paging: Annotated[PagingLimits, Depends(get_paging_limits)],
) -> AppSettingsResponse:
    """Feature flags and paging limits. No authentication required."""
    return AppSettingsResponse(feature_flags=flags, paging=paging)
