"""Common response wrapper schemas for API responses."""

from typing import Literal

from pydantic import BaseModel


class OkResponse(BaseModel):
    """Acknowledgment returned by removal endpoints."""

    ok: Literal[True] = True


class MessageResponse(BaseModel):
    """Plain message response."""

    message: str
