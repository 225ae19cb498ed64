"""Concrete Document repository backed by SQLAlchemy."""

from opstrack.application.interfaces import DocumentRepository
from opstrack.domain.entities import Document, EntityKind
from opstrack.infrastructure.database.models import DocumentModel
from opstrack.infrastructure.database.repositories.base import SQLAlchemyDeletableCollection


class SQLAlchemyDocumentRepository(
    SQLAlchemyDeletableCollection[Document, DocumentModel], DocumentRepository
):
    """Implements the DocumentRepository port using SQLAlchemy async sessions."""

    model = DocumentModel
    record_type = Document

    async def find_by_related(
        self, related_to_type: EntityKind, related_to_id: int
    ) -> list[Document]:
        return await self._select(*self._attached_to(related_to_type, related_to_id))
