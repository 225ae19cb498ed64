"""The entity store — the seven collections owned by one store instance."""

from dataclasses import dataclass

from opstrack.application.interfaces.activity_repository import ActivityRepository
from opstrack.application.interfaces.document_repository import DocumentRepository
from opstrack.application.interfaces.entity_repository import (
    CollectionRepository,
    LeadRepository,
    TenderRepository,
)
from opstrack.application.interfaces.milestone_repository import MilestoneRepository
from opstrack.application.interfaces.project_repository import ProjectRepository
from opstrack.application.interfaces.user_repository import UserRepository
from opstrack.domain.entities import EntityKind


@dataclass
class EntityStore:
    """Bundle of repositories sharing one backend (memory or a database session).

    Cross-entity relationships are held by ID only; no record is shared
    between collections.
    """

    users: UserRepository
    documents: DocumentRepository
    leads: LeadRepository
    tenders: TenderRepository
    projects: ProjectRepository
    milestones: MilestoneRepository
    activities: ActivityRepository

    def collection(self, kind: EntityKind) -> CollectionRepository:
        """Mutable collection for ``kind``. Activities are not a mutable collection."""
        collections: dict[EntityKind, CollectionRepository] = {
            EntityKind.USER: self.users,
            EntityKind.DOCUMENT: self.documents,
            EntityKind.LEAD: self.leads,
            EntityKind.TENDER: self.tenders,
            EntityKind.PROJECT: self.projects,
            EntityKind.MILESTONE: self.milestones,
        }
        try:
            return collections[EntityKind(kind)]
        except KeyError:
            raise ValueError(f"'{kind}' has no mutable collection") from None
