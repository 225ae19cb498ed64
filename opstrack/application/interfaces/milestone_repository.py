"""Abstract repository interface (port) for Milestone persistence."""

from abc import abstractmethod

from opstrack.application.interfaces.entity_repository import CollectionRepository
from opstrack.domain.entities import Milestone


class MilestoneRepository(CollectionRepository[Milestone]):
    """Port for milestone persistence. Milestones cannot be deleted."""

    @abstractmethod
    async def list_by_project(self, project_id: int) -> list[Milestone]:
        """Milestones scoped to one project."""
        ...
