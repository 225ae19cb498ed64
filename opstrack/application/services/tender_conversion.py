"""Tender → project conversion workflow."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from opstrack.application.interfaces import EntityStore
from opstrack.application.services.audited_mutations import AuditedChange, AuditedMutations
from opstrack.domain.entities import EntityKind, Project, Tender, TenderStatus
from opstrack.domain.exceptions import EntityNotFoundError, TenderConversionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TenderConversion:
    project: Project
    tender: Tender


class TenderConversionService:
    """Creates a project from a tender, then marks the tender as won.

    The two writes are separate audited mutations. The tender is only moved
    to ``won`` after the project was created; if project creation raises, the
    exception propagates and the tender keeps its previous status.
    """

    def __init__(self, store: EntityStore, mutations: AuditedMutations):
        self._store = store
        self._mutations = mutations

    async def convert(
        self,
        tender_id: int,
        project_fields: Mapping[str, Any],
        actor_id: int | None = None,
    ) -> TenderConversion:
        tender = await self._store.tenders.get_by_id(tender_id)
        if tender is None:
            raise EntityNotFoundError("Tender", tender_id)
        if not tender.is_convertible:
            raise TenderConversionError(tender_id, f"status is '{tender.status.value}'")
        if await self._store.projects.find_by_tender(tender_id):
            raise TenderConversionError(tender_id, "a project already exists for it")

        fields = {
            "name": tender.title,
            "client": tender.client,
            "value": tender.value or 0,
            "description": tender.description,
            **project_fields,
            "tender_id": tender.id,
        }
        created: AuditedChange = await self._mutations.create(
            EntityKind.PROJECT, fields, actor_id=actor_id
        )
        logger.info("Tender %d converted into project %d", tender_id, created.entity.id)

        if tender.status is not TenderStatus.WON:
            marked = await self._mutations.update(
                EntityKind.TENDER, tender_id, {"status": TenderStatus.WON}, actor_id=actor_id
            )
            if marked is None:
                # Deleted between the read and the write; the project stands.
                logger.warning("Tender %d disappeared before it could be marked won", tender_id)
            else:
                tender = marked.entity

        return TenderConversion(project=created.entity, tender=tender)
