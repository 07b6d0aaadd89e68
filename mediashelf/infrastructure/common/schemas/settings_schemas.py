from pydantic import BaseModel, Field

from mediashelf.feature_flags import FeatureFlags, PagingLimits


class AppSettingsResponse(BaseModel):
    """Public, non user-specific configuration for clients."""

    feature_flags: FeatureFlags
    paging: PagingLimits = Field(..., description="Media library page sizes")
