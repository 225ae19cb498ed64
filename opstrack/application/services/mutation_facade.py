"""Mutation façade — the single path through which entities are created or changed."""

import logging
from collections.abc import Mapping
from typing import Any

from opstrack.application.interfaces import CollectionRepository, DeletableRepository, EntityStore
from opstrack.domain.entities import DELETABLE_KINDS, Entity, EntityKind
from opstrack.domain.exceptions import OperationNotSupportedError

logger = logging.getLogger(__name__)


class MutationFacade:
    """Create / update / delete entry points for every mutable entity kind.

    Field sets are expected to be shape-validated already (see the pydantic
    schemas); the façade only allocates, merges and stamps. A missing record
    is reported as ``None`` (update) or ``False`` (delete), never raised.
    Activities are not created here — use the audit trail recorder.
    """

    def __init__(self, store: EntityStore):
        self._store = store

    async def get(self, kind: EntityKind, entity_id: int) -> Entity | None:
        return await self._collection(kind, "get").get_by_id(entity_id)

    async def list_all(self, kind: EntityKind) -> list[Entity]:
        return await self._collection(kind, "list").get_all()

    async def create(self, kind: EntityKind, fields: Mapping[str, Any]) -> Entity:
        entity = await self._collection(kind, "create").create(fields)
        logger.debug("Created %s %d", entity_label(kind), entity.id)
        return entity

    async def update(
        self, kind: EntityKind, entity_id: int, changes: Mapping[str, Any]
    ) -> Entity | None:
        entity = await self._collection(kind, "update").update(entity_id, changes)
        if entity is None:
            logger.debug("Update skipped: %s %d not found", entity_label(kind), entity_id)
        return entity

    async def delete(self, kind: EntityKind, entity_id: int) -> bool:
        if EntityKind(kind) not in DELETABLE_KINDS:
            raise OperationNotSupportedError("delete", EntityKind(kind).value)
        collection: DeletableRepository = self._collection(kind, "delete")  # type: ignore[assignment]
        deleted = await collection.delete(entity_id)
        logger.debug("Delete %s %d: %s", entity_label(kind), entity_id, "done" if deleted else "not found")
        return deleted

    def _collection(self, kind: EntityKind, operation: str) -> CollectionRepository:
        if EntityKind(kind) is EntityKind.ACTIVITY:
            raise OperationNotSupportedError(operation, EntityKind.ACTIVITY.value)
        return self._store.collection(kind)


def entity_label(kind: EntityKind) -> str:
    return EntityKind(kind).label
