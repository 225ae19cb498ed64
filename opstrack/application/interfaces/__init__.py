from .entity_repository import (
    CollectionRepository,
    DeletableRepository,
    LeadRepository,
    TenderRepository,
)
from .user_repository import UserRepository
from .document_repository import DocumentRepository
from .project_repository import ProjectRepository
from .milestone_repository import MilestoneRepository
from .activity_repository import ActivityRepository
from .entity_store import EntityStore

__all__ = [
    "CollectionRepository",
    "DeletableRepository",
    "LeadRepository",
    "TenderRepository",
    "UserRepository",
    "DocumentRepository",
    "ProjectRepository",
    "MilestoneRepository",
    "ActivityRepository",
    "EntityStore",
]
