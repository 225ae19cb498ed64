"""Concrete Milestone repository backed by SQLAlchemy."""

from opstrack.application.interfaces import MilestoneRepository
from opstrack.domain.entities import Milestone
from opstrack.infrastructure.database.models import MilestoneModel
from opstrack.infrastructure.database.repositories.base import SQLAlchemyCollection


class SQLAlchemyMilestoneRepository(
    SQLAlchemyCollection[Milestone, MilestoneModel], MilestoneRepository
):
    """Implements the MilestoneRepository port. There is no delete."""

    model = MilestoneModel
    record_type = Milestone

    async def list_by_project(self, project_id: int) -> list[Milestone]:
        return await self._select(
            MilestoneModel.project_id == project_id,
            order_by=(MilestoneModel.due_date, MilestoneModel.id),
        )
