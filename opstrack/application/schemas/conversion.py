"""Pydantic DTOs for converting a tender into a project."""

from datetime import datetime
from typing import Any

from pydantic import Field

from opstrack.application.schemas.common import CamelModel, MutationRequest
from opstrack.application.schemas.project import ProjectResponse
from opstrack.application.schemas.tender import TenderResponse


class TenderConversionRequest(MutationRequest):
    """Project details for a conversion.

    ``name``, ``client``, ``value`` and ``description`` default to the tender's
    own values when omitted.
    """

    name: str | None = Field(None, min_length=1, max_length=255)
    client: str | None = Field(None, min_length=1, max_length=255)
    value: int | None = Field(None, ge=0)
    description: str | None = None
    notes: str | None = None
    start_date: datetime
    end_date: datetime
    project_manager_id: int

    def to_fields(self) -> dict[str, Any]:
        fields = super().to_fields()
        return {key: value for key, value in fields.items() if value is not None}


class TenderConversionResponse(CamelModel):
    project: ProjectResponse
    tender: TenderResponse
