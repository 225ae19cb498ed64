"""Pydantic DTOs (Data Transfer Objects) for the Document feature.

Multipart upload handling happens outside this service; documents are
registered from the file metadata the uploader produced.
"""

from datetime import datetime
from typing import Any

from pydantic import Field

from opstrack.application.schemas.common import (
    CamelModel,
    MutationRequest,
    PartialUpdateRequest,
    RelatedToRequestMixin,
    RelatedToResponseMixin,
)
from opstrack.domain.entities import DocumentStatus


class DocumentCreate(RelatedToRequestMixin, MutationRequest):
    """Schema for registering a new document."""

    title: str = Field(..., min_length=1, max_length=255, examples=["Company KYC"])
    description: str | None = None
    type: str = Field(..., min_length=1, max_length=50, examples=["KYC"])
    file_path: str = Field(..., min_length=1, examples=["uploads/file-1712345.pdf"])
    file_size: int = Field(..., ge=0)
    file_type: str = Field(..., min_length=1, examples=["application/pdf"])
    status: DocumentStatus = DocumentStatus.PENDING
    uploaded_by_id: int

    def to_fields(self) -> dict[str, Any]:
        fields = self.model_dump(exclude={"performed_by_id", "related_to_id", "related_to_type"})
        fields["related_to"] = self.related_ref()
        return fields


class DocumentUpdate(RelatedToRequestMixin, PartialUpdateRequest):
    """Schema for updating a document — all fields optional.

    The related-to pair is replaced as a whole: send both halves to re-attach,
    or both as ``null`` to detach.
    """

    clearable_fields = frozenset({"description"})

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    type: str | None = Field(None, min_length=1, max_length=50)
    status: DocumentStatus | None = None

    def to_changes(self) -> dict[str, Any]:
        changes = super().to_changes()
        changes.pop("related_to_id", None)
        changes.pop("related_to_type", None)
        if self.model_fields_set & {"related_to_id", "related_to_type"}:
            changes["related_to"] = self.related_ref()
        return changes


class DocumentResponse(RelatedToResponseMixin, CamelModel):
    """Schema returned to the client."""

    id: int
    title: str
    description: str | None
    type: str
    file_path: str
    file_size: int
    file_type: str
    status: DocumentStatus
    uploaded_by_id: int
    created_at: datetime
    updated_at: datetime
