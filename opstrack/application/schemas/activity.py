"""Pydantic DTOs for the read-only audit trail."""

from datetime import datetime

from opstrack.application.schemas.common import CamelModel, RelatedToResponseMixin


class ActivityResponse(RelatedToResponseMixin, CamelModel):
    id: int
    title: str
    description: str | None
    type: str
    action_type: str
    performed_by_id: int
    created_at: datetime
