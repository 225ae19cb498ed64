"""Domain entity for delivery projects."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from opstrack.domain.entities.base import Entity


class ProjectStatus(str, Enum):
    PLANNING = "planning"
    IN_PROGRESS = "in_progress"
    ON_HOLD = "on_hold"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass(kw_only=True)
class Project(Entity):
    """A project, usually originating from a won tender (``tender_id``)."""

    name: str
    client: str
    value: int
    start_date: datetime
    end_date: datetime
    description: str | None = None
    status: ProjectStatus = ProjectStatus.PLANNING
    progress: int = 0  # percent complete
    project_manager_id: int | None = None
    tender_id: int | None = None
    notes: str | None = None

    def __post_init__(self) -> None:
        self.status = ProjectStatus(self.status)

    @property
    def is_active(self) -> bool:
        return self.status not in (ProjectStatus.COMPLETED, ProjectStatus.CANCELLED)
