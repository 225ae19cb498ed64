"""Pydantic DTOs (Data Transfer Objects) for the Tender feature."""

from datetime import datetime

from pydantic import Field

from opstrack.application.schemas.common import CamelModel, MutationRequest, PartialUpdateRequest
from opstrack.domain.entities import TenderStatus


class TenderCreate(MutationRequest):
    """Schema for creating a new tender."""

    title: str = Field(..., min_length=1, max_length=255, examples=["City Hall Renovation"])
    reference: str = Field(..., min_length=1, max_length=100, examples=["T-2024-001"])
    client: str = Field(..., min_length=1, max_length=255, examples=["City Council"])
    description: str | None = None
    value: int | None = Field(None, ge=0)
    submission_date: datetime | None = None
    deadline: datetime
    status: TenderStatus = TenderStatus.DRAFT
    probability: int | None = Field(50, ge=0, le=100)
    assigned_to_id: int | None = None
    notes: str | None = None
    requirements: list[str] | None = None


class TenderUpdate(PartialUpdateRequest):
    """Schema for updating an existing tender — all fields optional."""

    clearable_fields = frozenset(
        {
            "description",
            "value",
            "submission_date",
            "probability",
            "assigned_to_id",
            "notes",
            "requirements",
        }
    )

    title: str | None = Field(None, min_length=1, max_length=255)
    reference: str | None = Field(None, min_length=1, max_length=100)
    client: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    value: int | None = Field(None, ge=0)
    submission_date: datetime | None = None
    deadline: datetime | None = None
    status: TenderStatus | None = None
    probability: int | None = Field(None, ge=0, le=100)
    assigned_to_id: int | None = None
    notes: str | None = None
    requirements: list[str] | None = None


class TenderResponse(CamelModel):
    """Schema returned to the client."""

    id: int
    title: str
    reference: str
    client: str
    description: str | None
    value: int | None
    submission_date: datetime | None
    deadline: datetime
    status: TenderStatus
    probability: int | None
    assigned_to_id: int | None
    notes: str | None
    requirements: list[str] | None
    created_at: datetime
    updated_at: datetime
