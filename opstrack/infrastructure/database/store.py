"""Builds an entity store whose collections share one database session."""

from sqlalchemy.ext.asyncio import AsyncSession

from opstrack.application.interfaces import EntityStore
from opstrack.infrastructure.clock import Clock, MonotonicClock
from opstrack.infrastructure.database.repositories import (
    SQLAlchemyActivityRepository,
    SQLAlchemyDocumentRepository,
    SQLAlchemyLeadRepository,
    SQLAlchemyMilestoneRepository,
    SQLAlchemyProjectRepository,
    SQLAlchemyTenderRepository,
    SQLAlchemyUserRepository,
)


def build_sql_store(session: AsyncSession, clock: Clock | None = None) -> EntityStore:
    """Store for one unit of work. IDs come from the tables' AUTOINCREMENT keys."""
    clock = clock or MonotonicClock()
    return EntityStore(
        users=SQLAlchemyUserRepository(session, clock),
        documents=SQLAlchemyDocumentRepository(session, clock),
        leads=SQLAlchemyLeadRepository(session, clock),
        tenders=SQLAlchemyTenderRepository(session, clock),
        projects=SQLAlchemyProjectRepository(session, clock),
        milestones=SQLAlchemyMilestoneRepository(session, clock),
        activities=SQLAlchemyActivityRepository(session, clock),
    )
