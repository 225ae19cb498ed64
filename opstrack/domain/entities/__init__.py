from .kinds import ATTACHABLE_KINDS, DELETABLE_KINDS, ActionType, EntityKind
from .related import RelatedRef
from .base import Entity
from .user import User
from .document import Document, DocumentStatus
from .lead import Lead, LeadStatus
from .tender import CONVERTIBLE_STATUSES, Tender, TenderStatus
from .project import Project, ProjectStatus
from .milestone import Milestone, MilestoneStatus
from .activity import Activity
from .stats import DashboardStats

__all__ = [
    "ATTACHABLE_KINDS",
    "DELETABLE_KINDS",
    "ActionType",
    "EntityKind",
    "RelatedRef",
    "Entity",
    "User",
    "Document",
    "DocumentStatus",
    "Lead",
    "LeadStatus",
    "CONVERTIBLE_STATUSES",
    "Tender",
    "TenderStatus",
    "Project",
    "ProjectStatus",
    "Milestone",
    "MilestoneStatus",
    "Activity",
    "DashboardStats",
]
