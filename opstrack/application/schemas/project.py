"""Pydantic DTOs (Data Transfer Objects) for the Project feature."""

from datetime import datetime

from pydantic import Field

from opstrack.application.schemas.common import CamelModel, MutationRequest, PartialUpdateRequest
from opstrack.domain.entities import ProjectStatus


class ProjectCreate(MutationRequest):
    """Schema for creating a new project."""

    name: str = Field(..., min_length=1, max_length=255, examples=["City Hall Renovation"])
    client: str = Field(..., min_length=1, max_length=255, examples=["City Council"])
    description: str | None = None
    status: ProjectStatus = ProjectStatus.PLANNING
    start_date: datetime
    end_date: datetime
    value: int = Field(..., ge=0)
    progress: int = Field(0, ge=0, le=100)
    project_manager_id: int | None = None
    tender_id: int | None = None
    notes: str | None = None


class ProjectUpdate(PartialUpdateRequest):
    """Schema for updating an existing project — all fields optional."""

    clearable_fields = frozenset({"description", "project_manager_id", "notes"})

    name: str | None = Field(None, min_length=1, max_length=255)
    client: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    status: ProjectStatus | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    value: int | None = Field(None, ge=0)
    progress: int | None = Field(None, ge=0, le=100)
    project_manager_id: int | None = None
    notes: str | None = None


class ProjectResponse(CamelModel):
    """Schema returned to the client."""

    id: int
    name: str
    client: str
    description: str | None
    status: ProjectStatus
    start_date: datetime
    end_date: datetime
    value: int
    progress: int
    project_manager_id: int | None
    tender_id: int | None
    notes: str | None
    created_at: datetime
    updated_at: datetime
