from .user_repository import SQLAlchemyUserRepository
from .document_repository import SQLAlchemyDocumentRepository
from .lead_repository import SQLAlchemyLeadRepository
from .tender_repository import SQLAlchemyTenderRepository
from .project_repository import SQLAlchemyProjectRepository
from .milestone_repository import SQLAlchemyMilestoneRepository
from .activity_repository import SQLAlchemyActivityRepository

__all__ = [
    "SQLAlchemyUserRepository",
    "SQLAlchemyDocumentRepository",
    "SQLAlchemyLeadRepository",
    "SQLAlchemyTenderRepository",
    "SQLAlchemyProjectRepository",
    "SQLAlchemyMilestoneRepository",
    "SQLAlchemyActivityRepository",
]
