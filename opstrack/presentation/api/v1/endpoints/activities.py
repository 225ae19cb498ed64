"""Read-only access to the audit trail."""

from fastapi import APIRouter, Depends, Query

from opstrack.application.schemas import ActivityResponse
from opstrack.application.services import AuditTrailRecorder, RelatedReferenceIndex
from opstrack.domain.entities import EntityKind
from opstrack.domain.exceptions import InvalidReferenceError
from opstrack.infrastructure.dependencies import get_audit_trail, get_reference_index
from opstrack.presentation.api.v1.endpoints.errors import bad_request, not_found

router = APIRouter(prefix="/activities", tags=["Activities"])


@router.get("", response_model=list[ActivityResponse])
async def list_activities(
    limit: int | None = Query(None, ge=1),
    related_to_id: int | None = Query(None, alias="relatedToId"),
    related_to_type: str | None = Query(None, alias="relatedToType"),
    trail: AuditTrailRecorder = Depends(get_audit_trail),
    index: RelatedReferenceIndex = Depends(get_reference_index),
) -> list[ActivityResponse]:
    """Newest first. Filtering by the related pair ignores ``limit``."""
    if related_to_id is None and related_to_type is None:
        activities = await trail.list_recent(limit)
    elif related_to_id is None or related_to_type is None:
        raise bad_request(InvalidReferenceError("relatedToId and relatedToType must be provided together"))
    else:
        activities = await index.find_by_related(EntityKind.ACTIVITY, related_to_type, related_to_id)
    return [ActivityResponse.model_validate(a) for a in activities]


@router.get("/{activity_id}", response_model=ActivityResponse)
async def get_activity(
    activity_id: int,
    trail: AuditTrailRecorder = Depends(get_audit_trail),
) -> ActivityResponse:
    activity = await trail.get(activity_id)
    if activity is None:
        raise not_found(EntityKind.ACTIVITY, activity_id)
    return ActivityResponse.model_validate(activity)
