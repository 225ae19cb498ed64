"""Abstract repository interface (port) for the append-only activity log."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from opstrack.domain.entities import Activity, EntityKind


class ActivityRepository(ABC):
    """Port for activity persistence. There is no update and no delete."""

    @abstractmethod
    async def get_by_id(self, activity_id: int) -> Activity | None:
        """Retrieve a single activity by its ID."""
        ...

    @abstractmethod
    async def get_all(self, limit: int | None = None) -> list[Activity]:
        """Retrieve activities, newest first, optionally capped at ``limit``."""
        ...

    @abstractmethod
    async def append(self, fields: Mapping[str, Any]) -> Activity:
        """Allocate an ID, stamp created_at and persist a new activity."""
        ...

    @abstractmethod
    async def find_by_related(
        self, related_to_type: EntityKind, related_to_id: int
    ) -> list[Activity]:
        """Activities attached to the given record, newest first."""
        ...
