"""Builds a memory-resident entity store."""

import logging

from opstrack.application.interfaces import EntityStore
from opstrack.infrastructure.clock import Clock, MonotonicClock
from opstrack.infrastructure.memory.collections import (
    InMemoryActivityRepository,
    InMemoryDocumentRepository,
    InMemoryLeadRepository,
    InMemoryMilestoneRepository,
    InMemoryProjectRepository,
    InMemoryTenderRepository,
    InMemoryUserRepository,
)
from opstrack.infrastructure.memory.id_allocator import IdAllocator

logger = logging.getLogger(__name__)


def build_memory_store(
    clock: Clock | None = None, allocator: IdAllocator | None = None
) -> EntityStore:
    """Create an empty store whose collections share one allocator and one clock."""
    clock = clock or MonotonicClock()
    allocator = allocator or IdAllocator()
    logger.debug("Building in-memory entity store")
    return EntityStore(
        users=InMemoryUserRepository(allocator, clock),
        documents=InMemoryDocumentRepository(allocator, clock),
        leads=InMemoryLeadRepository(allocator, clock),
        tenders=InMemoryTenderRepository(allocator, clock),
        projects=InMemoryProjectRepository(allocator, clock),
        milestones=InMemoryMilestoneRepository(allocator, clock),
        activities=InMemoryActivityRepository(allocator, clock),
    )
