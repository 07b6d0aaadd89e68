"""Runtime toggles and public limits derived from configuration."""

from pydantic import BaseModel, Field

from mediashelf.config import Settings, get_settings


class FeatureFlags(BaseModel):
    user_registrations: bool = Field(..., description="Whether new accounts can be created")

    @classmethod
    def from_settings(cls, settings: Settings) -> "FeatureFlags":
        return cls(user_registrations=settings.ALLOW_USER_REGISTRATIONS)


class PagingLimits(BaseModel):
    """Page sizes applied to media library detail views."""

    default_page_size: int
    max_page_size: int

    @classmethod
    def from_settings(cls, settings: Settings) -> "PagingLimits":
        return cls(
            default_page_size=settings.MEDIA_LIBRARY_DEFAULT_PAGE_SIZE,
            max_page_size=settings.MEDIA_LIBRARY_MAX_PAGE_SIZE,
        )


def get_feature_flags() -> FeatureFlags:
    return FeatureFlags.from_settings(get_settings())


def get_paging_limits() -> PagingLimits:
    return PagingLimits.from_settings(get_settings())
