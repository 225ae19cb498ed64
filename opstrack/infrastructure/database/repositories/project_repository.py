"""Concrete Project repository backed by SQLAlchemy."""

from opstrack.application.interfaces import ProjectRepository
from opstrack.domain.entities import Project
from opstrack.infrastructure.database.models import ProjectModel
from opstrack.infrastructure.database.repositories.base import SQLAlchemyDeletableCollection


class SQLAlchemyProjectRepository(
    SQLAlchemyDeletableCollection[Project, ProjectModel], ProjectRepository
):
    """Implements the ProjectRepository port using SQLAlchemy async sessions."""

    model = ProjectModel
    record_type = Project

    async def find_by_tender(self, tender_id: int) -> list[Project]:
        return await self._select(ProjectModel.tender_id == tender_id)
