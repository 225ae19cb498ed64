from .common import CamelModel, MutationRequest, PartialUpdateRequest
from .user import UserCreate, UserResponse, UserUpdate
from .document import DocumentCreate, DocumentResponse, DocumentUpdate
from .lead import LeadCreate, LeadResponse, LeadUpdate
from .tender import TenderCreate, TenderResponse, TenderUpdate
from .project import ProjectCreate, ProjectResponse, ProjectUpdate
from .milestone import MilestoneCreate, MilestoneResponse, MilestoneUpdate
from .activity import ActivityResponse
from .conversion import TenderConversionRequest, TenderConversionResponse
from .stats import DashboardStatsResponse

__all__ = [
    "CamelModel",
    "MutationRequest",
    "PartialUpdateRequest",
    "UserCreate",
    "UserResponse",
    "UserUpdate",
    "DocumentCreate",
    "DocumentResponse",
    "DocumentUpdate",
    "LeadCreate",
    "LeadResponse",
    "LeadUpdate",
    "TenderCreate",
    "TenderResponse",
    "TenderUpdate",
    "ProjectCreate",
    "ProjectResponse",
    "ProjectUpdate",
    "MilestoneCreate",
    "MilestoneResponse",
    "MilestoneUpdate",
    "ActivityResponse",
    "TenderConversionRequest",
    "TenderConversionResponse",
    "DashboardStatsResponse",
]
