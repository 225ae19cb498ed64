"""Abstract repository interface (port) for Document persistence."""

from abc import abstractmethod

from opstrack.application.interfaces.entity_repository import DeletableRepository
from opstrack.domain.entities import Document, EntityKind


class DocumentRepository(DeletableRepository[Document]):
    """Port for document persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def find_by_related(
        self, related_to_type: EntityKind, related_to_id: int
    ) -> list[Document]:
        """Documents whose related-to pair matches both values exactly.

        Unattached documents are never returned.
        """
        ...
