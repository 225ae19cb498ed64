"""Pydantic DTOs (Data Transfer Objects) for the Milestone feature."""

from datetime import datetime

from pydantic import Field

from opstrack.application.schemas.common import CamelModel, MutationRequest, PartialUpdateRequest
from opstrack.domain.entities import MilestoneStatus


class MilestoneCreate(MutationRequest):
    """Schema for creating a new milestone."""

    project_id: int
    title: str = Field(..., min_length=1, max_length=255, examples=["Foundation poured"])
    description: str | None = None
    due_date: datetime
    completed_date: datetime | None = None
    status: MilestoneStatus = MilestoneStatus.PENDING


class MilestoneUpdate(PartialUpdateRequest):
    """Schema for updating an existing milestone — all fields optional."""

    clearable_fields = frozenset({"description", "completed_date"})

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    due_date: datetime | None = None
    completed_date: datetime | None = None
    status: MilestoneStatus | None = None


class MilestoneResponse(CamelModel):
    """Schema returned to the client."""

    id: int
    project_id: int
    title: str
    description: str | None
    due_date: datetime
    completed_date: datetime | None
    status: MilestoneStatus
    created_at: datetime
    updated_at: datetime
