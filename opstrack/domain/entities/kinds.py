"""Entity kinds and the action vocabulary used by the audit trail."""

from enum import Enum


class EntityKind(str, Enum):
    """Every collection managed by the entity store."""

    USER = "user"
    DOCUMENT = "document"
    LEAD = "lead"
    TENDER = "tender"
    PROJECT = "project"
    MILESTONE = "milestone"
    ACTIVITY = "activity"

    @property
    def label(self) -> str:
        return self.value.capitalize()


# Kinds a document or activity may be attached to.
ATTACHABLE_KINDS = frozenset(kind for kind in EntityKind if kind is not EntityKind.ACTIVITY)

# Kinds whose records may be removed. Milestones and activities have no delete.
DELETABLE_KINDS = frozenset({
    EntityKind.USER,
    EntityKind.DOCUMENT,
    EntityKind.LEAD,
    EntityKind.TENDER,
    EntityKind.PROJECT,
})


class ActionType(str, Enum):
    """Well-known audit actions. Activity.action_type stays an open string."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
