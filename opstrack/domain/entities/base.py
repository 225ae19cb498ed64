"""Fields and merge semantics shared by every mutable entity."""

from collections.abc import Mapping
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Self

# Assigned by the store, never by callers.
PROTECTED_FIELDS = frozenset({"id", "created_at", "updated_at"})

UNASSIGNED_ID = 0


def strip_protected(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Drop store-managed keys from a caller-supplied field set."""
    return {key: value for key, value in fields.items() if key not in PROTECTED_FIELDS}


@dataclass(kw_only=True)
class Entity:
    """Base for entities created and updated through the mutation façade.

    ``id`` and ``created_at`` are fixed at creation; ``updated_at`` is
    re-stamped on every merge.
    """

    id: int = UNASSIGNED_ID
    created_at: datetime
    updated_at: datetime

    @classmethod
    def new(cls, fields: Mapping[str, Any], now: datetime) -> Self:
        """Build an unsaved entity with both timestamps set to ``now``."""
        return cls(created_at=now, updated_at=now, **strip_protected(fields))

    def merged(self, changes: Mapping[str, Any], now: datetime) -> Self:
        """Return a copy with ``changes`` shallow-merged over this entity.

        Keys absent from ``changes`` are left untouched. Unknown keys raise
        ``TypeError``.
        """
        return replace(self, **strip_protected(changes), updated_at=now)
