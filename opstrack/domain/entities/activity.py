"""Domain entity for audit-trail activities."""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Self

from opstrack.domain.entities.base import UNASSIGNED_ID, strip_protected
from opstrack.domain.entities.related import RelatedRef


@dataclass(frozen=True, kw_only=True)
class Activity:
    """Immutable record describing one action performed in the system.

    Activities are append-only: they carry no ``updated_at`` and the store
    offers no way to change or remove them.
    """

    title: str
    type: str  # entity kind the action concerns
    action_type: str  # create, update, delete, approve, reject, ...
    performed_by_id: int
    created_at: datetime
    description: str | None = None
    related_to: RelatedRef | None = None
    id: int = UNASSIGNED_ID

    @classmethod
    def new(cls, fields: Mapping[str, Any], now: datetime) -> Self:
        """Build an unsaved activity timestamped at ``now``."""
        return cls(created_at=now, **strip_protected(fields))
