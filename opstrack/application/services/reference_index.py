"""Polymorphic reference index over documents and activities."""

import logging

from opstrack.application.interfaces import EntityStore
from opstrack.domain.entities import ATTACHABLE_KINDS, Activity, Document, EntityKind

logger = logging.getLogger(__name__)

INDEXED_KINDS = frozenset({EntityKind.DOCUMENT, EntityKind.ACTIVITY})


class RelatedReferenceIndex:
    """Answers "which documents / activities are attached to this record?".

    The view is derived from the collections on every call, so a read that
    follows a write always observes it. Matching is exact on both the kind
    and the ID; unattached records never match, and a reference to a record
    that does not exist simply yields an empty result.
    """

    def __init__(self, store: EntityStore):
        self._store = store

    async def find_by_related(
        self,
        collection_kind: EntityKind,
        related_to_type: EntityKind | str,
        related_to_id: int,
    ) -> list[Document] | list[Activity]:
        collection_kind = EntityKind(collection_kind)
        if collection_kind not in INDEXED_KINDS:
            raise ValueError(
                f"'{collection_kind.value}' records carry no related-to reference"
            )

        try:
            related_kind = EntityKind(related_to_type)
        except ValueError:
            logger.debug("Unknown related-to type %r, nothing attached", related_to_type)
            return []
        if related_kind not in ATTACHABLE_KINDS:
            return []

        if collection_kind is EntityKind.DOCUMENT:
            return await self._store.documents.find_by_related(related_kind, related_to_id)
        return await self._store.activities.find_by_related(related_kind, related_to_id)
