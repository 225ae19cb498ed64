from .mutation_facade import MutationFacade
from .reference_index import RelatedReferenceIndex
from .audit_trail import AuditTrailRecorder
from .audited_mutations import AuditedChange, AuditedMutations
from .tender_conversion import TenderConversion, TenderConversionService
from .dashboard_service import DashboardService
from .user_service import UserService

__all__ = [
    "MutationFacade",
    "RelatedReferenceIndex",
    "AuditTrailRecorder",
    "AuditedChange",
    "AuditedMutations",
    "TenderConversion",
    "TenderConversionService",
    "DashboardService",
    "UserService",
]
