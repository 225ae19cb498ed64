"""Abstract repository interface (port) for Project persistence."""

from abc import abstractmethod

from opstrack.application.interfaces.entity_repository import DeletableRepository
from opstrack.domain.entities import Project


class ProjectRepository(DeletableRepository[Project]):
    """Port for project persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def find_by_tender(self, tender_id: int) -> list[Project]:
        """Projects that originated from the given tender."""
        ...
