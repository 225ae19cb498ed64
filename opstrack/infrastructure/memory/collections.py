"""Memory-resident implementations of the repository ports.

Each collection keeps its records in a dict guarded by its own lock, so one
create / update / delete is fully applied before the next operation on the
same collection starts, and readers never observe a partial write. Records
are deep-copied on the way in and out; callers never hold a reference into
the store.
"""

import threading
from collections.abc import Callable, Mapping
from copy import deepcopy
from dataclasses import replace
from typing import Any, Generic, TypeVar

from opstrack.application.interfaces import (
    ActivityRepository,
    DocumentRepository,
    LeadRepository,
    MilestoneRepository,
    ProjectRepository,
    TenderRepository,
    UserRepository,
)
from opstrack.domain.entities import (
    Activity,
    Document,
    Entity,
    EntityKind,
    Lead,
    Milestone,
    Project,
    RelatedRef,
    Tender,
    User,
)
from opstrack.infrastructure.clock import Clock
from opstrack.infrastructure.memory.id_allocator import IdAllocator

T = TypeVar("T")
E = TypeVar("E", bound=Entity)


class _InMemoryTable(Generic[T]):
    """Keyed record storage shared by the mutable collections and the activity log."""

    def __init__(
        self,
        kind: EntityKind,
        record_type: type[T],
        allocator: IdAllocator,
        clock: Clock,
    ):
        self._kind = kind
        self._record_type = record_type
        self._allocator = allocator
        self._clock = clock
        self._records: dict[int, T] = {}
        self._lock = threading.Lock()

    def _insert(self, fields: Mapping[str, Any]) -> T:
        with self._lock:
            # Build before allocating so a malformed field set consumes no ID.
            draft = self._record_type.new(deepcopy(dict(fields)), self._clock())
            record = replace(draft, id=self._allocator.next_id(self._kind))
            self._records[record.id] = record
            return deepcopy(record)

    def _get(self, record_id: int) -> T | None:
        with self._lock:
            record = self._records.get(record_id)
            return deepcopy(record) if record is not None else None

    def _select(self, predicate: Callable[[T], bool] | None = None) -> list[T]:
        with self._lock:
            return [
                deepcopy(record)
                for record in self._records.values()
                if predicate is None or predicate(record)
            ]


class InMemoryCollection(_InMemoryTable[E]):
    """get / list / create / update over a dict of entities."""

    async def get_by_id(self, entity_id: int) -> E | None:
        return self._get(entity_id)

    async def get_all(self) -> list[E]:
        return self._select()

    async def create(self, fields: Mapping[str, Any]) -> E:
        return self._insert(fields)

    async def update(self, entity_id: int, changes: Mapping[str, Any]) -> E | None:
        with self._lock:
            existing = self._records.get(entity_id)
            if existing is None:
                return None
            updated = existing.merged(deepcopy(dict(changes)), self._clock())
            self._records[entity_id] = updated
            return deepcopy(updated)


class InMemoryDeletableCollection(InMemoryCollection[E]):
    """Adds delete. Removed IDs stay consumed in the allocator."""

    async def delete(self, entity_id: int) -> bool:
        with self._lock:
            return self._records.pop(entity_id, None) is not None


class InMemoryUserRepository(InMemoryDeletableCollection[User], UserRepository):
    def __init__(self, allocator: IdAllocator, clock: Clock):
        super().__init__(EntityKind.USER, User, allocator, clock)

    async def get_by_username(self, username: str) -> User | None:
        matches = self._select(lambda user: user.username == username)
        return matches[0] if matches else None


class InMemoryDocumentRepository(InMemoryDeletableCollection[Document], DocumentRepository):
    def __init__(self, allocator: IdAllocator, clock: Clock):
        super().__init__(EntityKind.DOCUMENT, Document, allocator, clock)

    async def find_by_related(
        self, related_to_type: EntityKind, related_to_id: int
    ) -> list[Document]:
        return self._select(_attached_to(related_to_type, related_to_id))


class InMemoryLeadRepository(InMemoryDeletableCollection[Lead], LeadRepository):
    def __init__(self, allocator: IdAllocator, clock: Clock):
        super().__init__(EntityKind.LEAD, Lead, allocator, clock)


class InMemoryTenderRepository(InMemoryDeletableCollection[Tender], TenderRepository):
    def __init__(self, allocator: IdAllocator, clock: Clock):
        super().__init__(EntityKind.TENDER, Tender, allocator, clock)


class InMemoryProjectRepository(InMemoryDeletableCollection[Project], ProjectRepository):
    def __init__(self, allocator: IdAllocator, clock: Clock):
        super().__init__(EntityKind.PROJECT, Project, allocator, clock)

    async def find_by_tender(self, tender_id: int) -> list[Project]:
        return self._select(lambda project: project.tender_id == tender_id)


class InMemoryMilestoneRepository(InMemoryCollection[Milestone], MilestoneRepository):
    def __init__(self, allocator: IdAllocator, clock: Clock):
        super().__init__(EntityKind.MILESTONE, Milestone, allocator, clock)

    async def list_by_project(self, project_id: int) -> list[Milestone]:
        return self._select(lambda milestone: milestone.project_id == project_id)


class InMemoryActivityRepository(_InMemoryTable[Activity], ActivityRepository):
    """Append-only activity log, listed newest first."""

    def __init__(self, allocator: IdAllocator, clock: Clock):
        super().__init__(EntityKind.ACTIVITY, Activity, allocator, clock)

    async def get_by_id(self, activity_id: int) -> Activity | None:
        return self._get(activity_id)

    async def get_all(self, limit: int | None = None) -> list[Activity]:
        activities = _newest_first(self._select())
        return activities[:limit] if limit else activities

    async def append(self, fields: Mapping[str, Any]) -> Activity:
        return self._insert(fields)

    async def find_by_related(
        self, related_to_type: EntityKind, related_to_id: int
    ) -> list[Activity]:
        return _newest_first(self._select(_attached_to(related_to_type, related_to_id)))


def _newest_first(activities: list[Activity]) -> list[Activity]:
    return sorted(activities, key=lambda a: (a.created_at, a.id), reverse=True)


def _attached_to(related_to_type: EntityKind | str, related_to_id: int) -> Callable[[Any], bool]:
    """Exact match on both halves of the pair; unattached records never match."""

    def matches(record: Document | Activity) -> bool:
        related: RelatedRef | None = record.related_to
        return (
            related is not None
            and related.kind == related_to_type
            and related.id == related_to_id
        )

    return matches
