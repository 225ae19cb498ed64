"""Pydantic DTOs (Data Transfer Objects) for the User feature."""

from datetime import datetime

from pydantic import Field

from opstrack.application.schemas.common import CamelModel, MutationRequest, PartialUpdateRequest


class UserCreate(MutationRequest):
    """Schema for creating a new user."""

    username: str = Field(..., min_length=1, max_length=150, examples=["jdoe"])
    password: str = Field(..., min_length=6, max_length=128)
    full_name: str = Field(..., min_length=1, max_length=255, examples=["Jane Doe"])
    email: str = Field(..., min_length=3, max_length=255, examples=["jane@example.com"])
    role: str = Field("user", max_length=50)
    avatar_url: str | None = None
    active: bool = True


class UserUpdate(PartialUpdateRequest):
    """Schema for updating an existing user — all fields optional."""

    clearable_fields = frozenset({"avatar_url"})

    username: str | None = Field(None, min_length=1, max_length=150)
    password: str | None = Field(None, min_length=6, max_length=128)
    full_name: str | None = Field(None, min_length=1, max_length=255)
    email: str | None = Field(None, min_length=3, max_length=255)
    role: str | None = Field(None, max_length=50)
    avatar_url: str | None = None
    active: bool | None = None


class UserResponse(CamelModel):
    """Schema returned to the client. The password hash is never exposed."""

    id: int
    username: str
    full_name: str
    email: str
    role: str
    avatar_url: str | None
    active: bool
    created_at: datetime
    updated_at: datetime
