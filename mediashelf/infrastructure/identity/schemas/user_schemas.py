"""Pydantic schemas for user accounts."""

from datetime import datetime

from pydantic import BaseModel, Field


class UserRegisterRequest(BaseModel):
    """Schema for user registration."""

    username: str = Field(..., min_length=1, max_length=50, description="Unique username")
    email: str = Field(
        ..., max_length=100, pattern=r"^[^@\s]+@[^@\s]+$", description="User's email address"
    )
    password: str = Field(..., min_length=8, max_length=128, description="Plain text password")


class UserDetailsResponse(BaseModel):
    """Schema for returning the current user's profile."""

    id: int
    username: str
    email: str
    created_at: datetime | None = None
