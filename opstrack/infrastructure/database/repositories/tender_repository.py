"""Concrete Tender repository backed by SQLAlchemy."""

from opstrack.application.interfaces import TenderRepository
from opstrack.domain.entities import Tender
from opstrack.infrastructure.database.models import TenderModel
from opstrack.infrastructure.database.repositories.base import SQLAlchemyDeletableCollection


class SQLAlchemyTenderRepository(
    SQLAlchemyDeletableCollection[Tender, TenderModel], TenderRepository
):
    model = TenderModel
    record_type = Tender
