"""Domain entity for project milestones."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from opstrack.domain.entities.base import Entity


class MilestoneStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    DELAYED = "delayed"


@dataclass(kw_only=True)
class Milestone(Entity):
    """A dated checkpoint that always belongs to exactly one project."""

    project_id: int
    title: str
    due_date: datetime
    description: str | None = None
    completed_date: datetime | None = None
    status: MilestoneStatus = MilestoneStatus.PENDING

    def __post_init__(self) -> None:
        self.status = MilestoneStatus(self.status)
