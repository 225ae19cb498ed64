from .user import UserModel
from .document import DocumentModel
from .lead import LeadModel
from .tender import TenderModel
from .project import ProjectModel
from .milestone import MilestoneModel
from .activity import ActivityModel

__all__ = [
    "UserModel",
    "DocumentModel",
    "LeadModel",
    "TenderModel",
    "ProjectModel",
    "MilestoneModel",
    "ActivityModel",
]
