"""Concrete Lead repository backed by SQLAlchemy."""

from opstrack.application.interfaces import LeadRepository
from opstrack.domain.entities import Lead
from opstrack.infrastructure.database.models import LeadModel
from opstrack.infrastructure.database.repositories.base import SQLAlchemyDeletableCollection


class SQLAlchemyLeadRepository(SQLAlchemyDeletableCollection[Lead, LeadModel], LeadRepository):
    model = LeadModel
    record_type = Lead
