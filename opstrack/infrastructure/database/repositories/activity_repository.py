"""Concrete append-only activity repository backed by SQLAlchemy."""

from collections.abc import Mapping
from typing import Any

from opstrack.application.interfaces import ActivityRepository
from opstrack.domain.entities import Activity, EntityKind
from opstrack.infrastructure.database.models import ActivityModel
from opstrack.infrastructure.database.repositories.base import SQLAlchemyTable

_NEWEST_FIRST = (ActivityModel.created_at.desc(), ActivityModel.id.desc())


class SQLAlchemyActivityRepository(SQLAlchemyTable[Activity, ActivityModel], ActivityRepository):
    """Implements the ActivityRepository port. Rows are only ever inserted."""

    model = ActivityModel
    record_type = Activity

    async def get_by_id(self, activity_id: int) -> Activity | None:
        return await self._get(activity_id)

    async def get_all(self, limit: int | None = None) -> list[Activity]:
        return await self._select(order_by=_NEWEST_FIRST, limit=limit)

    async def append(self, fields: Mapping[str, Any]) -> Activity:
        return await self._insert(fields)

    async def find_by_related(
        self, related_to_type: EntityKind, related_to_id: int
    ) -> list[Activity]:
        return await self._select(
            *self._attached_to(related_to_type, related_to_id), order_by=_NEWEST_FIRST
        )
