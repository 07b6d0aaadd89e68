"""Common infrastructure schemas."""

from mediashelf.infrastructure.common.schemas.response_wrappers import (
    MessageResponse,
    OkResponse,
)
from mediashelf.infrastructure.common.schemas.settings_schemas import AppSettingsResponse

__all__ = [
    "AppSettingsResponse",
    "MessageResponse",
    "OkResponse",
]
