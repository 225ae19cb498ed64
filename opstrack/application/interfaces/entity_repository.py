"""Abstract repository interfaces (ports) — define the contract, not the implementation.

Every collection offers get / list / create / update. Collections whose
records may be removed additionally offer delete. A missing id is a normal
outcome (``None`` / ``False``), never an exception.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from opstrack.domain.entities import Entity, Lead, Tender

E = TypeVar("E", bound=Entity)


class CollectionRepository(ABC, Generic[E]):
    """Port for one keyed entity collection — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, entity_id: int) -> E | None:
        """Retrieve a single record by its ID."""
        ...

    @abstractmethod
    async def get_all(self) -> list[E]:
        """Full scan. No ordering is promised."""
        ...

    @abstractmethod
    async def create(self, fields: Mapping[str, Any]) -> E:
        """Allocate an ID, stamp created_at/updated_at with one instant, persist and return."""
        ...

    @abstractmethod
    async def update(self, entity_id: int, changes: Mapping[str, Any]) -> E | None:
        """Shallow-merge ``changes`` and re-stamp updated_at. Returns None if not found."""
        ...


class DeletableRepository(CollectionRepository[E]):
    """Collection whose records may be removed. Deleted IDs are never reissued."""

    @abstractmethod
    async def delete(self, entity_id: int) -> bool:
        """Delete a record. Returns True if deleted, False if not found.

        Raises EntityInUseError when the backend refuses the delete because
        other records still reference this one.
        """
        ...


class LeadRepository(DeletableRepository[Lead]):
    """Port for lead persistence."""


class TenderRepository(DeletableRepository[Tender]):
    """Port for tender persistence."""
