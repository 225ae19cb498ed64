"""Audit trail recorder — appends immutable activities to the activity log."""

import logging
from enum import Enum

from opstrack.application.interfaces import ActivityRepository
from opstrack.domain.entities import Activity, EntityKind, RelatedRef
from opstrack.domain.exceptions import InvalidReferenceError

logger = logging.getLogger(__name__)


class AuditTrailRecorder:
    """Writes and reads the audit trail.

    ``record`` always appends a new activity, even when an identical one
    already exists for the same subject; the trail is a log, not a
    current-state cache. It has no validation failure path: a related-to
    pair that cannot form a reference is stored as unattached and logged.
    """

    def __init__(self, activities: ActivityRepository):
        self._activities = activities

    async def record(
        self,
        title: str,
        type: EntityKind | str,
        action_type: str,
        performed_by_id: int,
        description: str | None = None,
        related_to_id: int | None = None,
        related_to_type: EntityKind | str | None = None,
    ) -> Activity:
        try:
            related_to = RelatedRef.from_pair(related_to_id, related_to_type)
        except InvalidReferenceError as exc:
            logger.warning(
                "Recording activity %r without a related-to reference: %s", title, exc
            )
            related_to = None

        activity = await self._activities.append(
            {
                "title": title,
                "description": description,
                "type": _plain(type),
                "action_type": _plain(action_type),
                "performed_by_id": performed_by_id,
                "related_to": related_to,
            }
        )
        logger.info(
            "Activity %d: %s (by user %d)", activity.id, activity.title, activity.performed_by_id
        )
        return activity

    async def get(self, activity_id: int) -> Activity | None:
        return await self._activities.get_by_id(activity_id)

    async def list_recent(self, limit: int | None = None) -> list[Activity]:
        """Newest first, optionally capped at ``limit``."""
        return await self._activities.get_all(limit=limit)

    async def history(self, related_to_type: EntityKind, related_to_id: int) -> list[Activity]:
        """Every activity recorded against one record, newest first."""
        return await self._activities.find_by_related(related_to_type, related_to_id)


def _plain(value: Enum | str) -> str:
    return value.value if isinstance(value, Enum) else str(value)
