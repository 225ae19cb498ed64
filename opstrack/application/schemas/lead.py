"""Pydantic DTOs (Data Transfer Objects) for the Lead feature."""

from datetime import datetime

from pydantic import Field

from opstrack.application.schemas.common import CamelModel, MutationRequest, PartialUpdateRequest
from opstrack.domain.entities import LeadStatus


class LeadCreate(MutationRequest):
    """Schema for creating a new lead."""

    name: str = Field(..., min_length=1, max_length=255, examples=["Jane Smith"])
    company: str = Field(..., min_length=1, max_length=255, examples=["Acme Corp"])
    email: str | None = None
    phone: str | None = None
    source: str | None = Field(None, examples=["Website"])
    status: LeadStatus = LeadStatus.NEW
    value: int | None = Field(None, ge=0)
    assigned_to_id: int | None = None
    notes: str | None = None


class LeadUpdate(PartialUpdateRequest):
    """Schema for updating an existing lead — all fields optional."""

    clearable_fields = frozenset(
        {"email", "phone", "source", "value", "assigned_to_id", "notes"}
    )

    name: str | None = Field(None, min_length=1, max_length=255)
    company: str | None = Field(None, min_length=1, max_length=255)
    email: str | None = None
    phone: str | None = None
    source: str | None = None
    status: LeadStatus | None = None
    value: int | None = Field(None, ge=0)
    assigned_to_id: int | None = None
    notes: str | None = None


class LeadResponse(CamelModel):
    """Schema returned to the client."""

    id: int
    name: str
    company: str
    email: str | None
    phone: str | None
    source: str | None
    status: LeadStatus
    value: int | None
    assigned_to_id: int | None
    notes: str | None
    created_at: datetime
    updated_at: datetime
