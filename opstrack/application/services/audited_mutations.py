"""Audited mutations — one entity change plus exactly one activity describing it.

Routes and workflows mutate entities only through ``AuditedMutations`` so
that every successful create / update / delete is followed by its audit
record. A not-found outcome writes no activity.

The two writes are not atomic: a failure between them leaves the entity
changed without an activity. With the SQL backend both writes share one
session and are committed together at the end of the request.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from opstrack.application.services.audit_trail import AuditTrailRecorder
from opstrack.application.services.mutation_facade import MutationFacade
from opstrack.domain.entities import DELETABLE_KINDS, ActionType, Activity, Entity, EntityKind
from opstrack.domain.exceptions import OperationNotSupportedError

logger = logging.getLogger(__name__)

# (title, description) per kind and action; ``e`` is the mutated entity.
_MESSAGES: dict[tuple[EntityKind, ActionType], tuple[str, str]] = {
    (EntityKind.USER, ActionType.CREATE): ("User created", "User {e.username} was created"),
    (EntityKind.USER, ActionType.UPDATE): ("User updated", "User {e.username} was updated"),
    (EntityKind.USER, ActionType.DELETE): ("User deleted", "User {e.username} was deleted"),
    (EntityKind.DOCUMENT, ActionType.CREATE): ("Document uploaded", 'Document "{e.title}" was uploaded'),
    (EntityKind.DOCUMENT, ActionType.UPDATE): ("Document updated", 'Document "{e.title}" was updated'),
    (EntityKind.DOCUMENT, ActionType.DELETE): ("Document deleted", 'Document "{e.title}" was deleted'),
    (EntityKind.LEAD, ActionType.CREATE): ("Lead created", 'Lead "{e.name}" from {e.company} was created'),
    (EntityKind.LEAD, ActionType.UPDATE): ("Lead updated", 'Lead "{e.name}" was updated'),
    (EntityKind.LEAD, ActionType.DELETE): ("Lead deleted", 'Lead "{e.name}" was deleted'),
    (EntityKind.TENDER, ActionType.CREATE): ("Tender created", 'Tender "{e.title}" for {e.client} was created'),
    (EntityKind.TENDER, ActionType.UPDATE): ("Tender updated", 'Tender "{e.title}" was updated'),
    (EntityKind.TENDER, ActionType.DELETE): ("Tender deleted", 'Tender "{e.title}" was deleted'),
    (EntityKind.PROJECT, ActionType.CREATE): ("Project created", 'Project "{e.name}" for {e.client} was created'),
    (EntityKind.PROJECT, ActionType.UPDATE): ("Project updated", 'Project "{e.name}" was updated'),
    (EntityKind.PROJECT, ActionType.DELETE): ("Project deleted", 'Project "{e.name}" was deleted'),
    (EntityKind.MILESTONE, ActionType.CREATE): (
        "Milestone created",
        'Milestone "{e.title}" was created for project ID {e.project_id}',
    ),
    (EntityKind.MILESTONE, ActionType.UPDATE): ("Milestone updated", 'Milestone "{e.title}" was updated'),
}

# Entity attribute naming the user responsible when no actor is supplied.
_ACTOR_FALLBACK: dict[EntityKind, str] = {
    EntityKind.DOCUMENT: "uploaded_by_id",
    EntityKind.LEAD: "assigned_to_id",
    EntityKind.TENDER: "assigned_to_id",
    EntityKind.PROJECT: "project_manager_id",
}


@dataclass(frozen=True)
class AuditedChange:
    """Outcome of an audited mutation: the entity as written and its activity."""

    entity: Entity
    activity: Activity


class AuditedMutations:
    """Unit of work pairing a mutation façade call with an audit trail append."""

    def __init__(
        self,
        facade: MutationFacade,
        recorder: AuditTrailRecorder,
        default_actor_id: int = 1,
    ):
        self._facade = facade
        self._recorder = recorder
        self._default_actor_id = default_actor_id

    async def create(
        self, kind: EntityKind, fields: Mapping[str, Any], actor_id: int | None = None
    ) -> AuditedChange:
        entity = await self._facade.create(kind, fields)
        activity = await self._audit(kind, ActionType.CREATE, entity, actor_id)
        return AuditedChange(entity=entity, activity=activity)

    async def update(
        self,
        kind: EntityKind,
        entity_id: int,
        changes: Mapping[str, Any],
        actor_id: int | None = None,
    ) -> AuditedChange | None:
        entity = await self._facade.update(kind, entity_id, changes)
        if entity is None:
            return None
        activity = await self._audit(kind, ActionType.UPDATE, entity, actor_id)
        return AuditedChange(entity=entity, activity=activity)

    async def delete(
        self, kind: EntityKind, entity_id: int, actor_id: int | None = None
    ) -> AuditedChange | None:
        if EntityKind(kind) not in DELETABLE_KINDS:
            raise OperationNotSupportedError("delete", EntityKind(kind).value)
        # Load first so the activity can describe what was removed.
        entity = await self._facade.get(kind, entity_id)
        if entity is None or not await self._facade.delete(kind, entity_id):
            return None
        activity = await self._audit(kind, ActionType.DELETE, entity, actor_id)
        return AuditedChange(entity=entity, activity=activity)

    async def _audit(
        self,
        kind: EntityKind,
        action: ActionType,
        entity: Entity,
        actor_id: int | None,
    ) -> Activity:
        kind = EntityKind(kind)
        title, template = _MESSAGES[(kind, action)]
        return await self._recorder.record(
            title=title,
            description=template.format(e=entity),
            type=kind,
            action_type=action,
            performed_by_id=self.resolve_actor(kind, entity, actor_id),
            related_to_id=entity.id,
            related_to_type=kind,
        )

    def resolve_actor(self, kind: EntityKind, entity: Entity, actor_id: int | None) -> int:
        """Explicit actor, else the entity's responsible user, else the default actor."""
        if actor_id:
            return actor_id
        attribute = _ACTOR_FALLBACK.get(EntityKind(kind))
        fallback = getattr(entity, attribute, None) if attribute else None
        return fallback or self._default_actor_id
