"""Polymorphic "related-to" reference shared by documents and activities."""

from dataclasses import dataclass

from opstrack.domain.entities.kinds import ATTACHABLE_KINDS, EntityKind
from opstrack.domain.exceptions import InvalidReferenceError


@dataclass(frozen=True)
class RelatedRef:
    """Discriminated ``(kind, id)`` pair pointing at a record of any attachable kind.

    The pair is stored as a single value so a record is either attached
    (``RelatedRef``) or unattached (``None``); it can never be half-attached.
    Whether ``id`` resolves to an existing record is not checked here.
    """

    kind: EntityKind
    id: int

    def __post_init__(self) -> None:
        try:
            kind = EntityKind(self.kind)
        except ValueError:
            raise InvalidReferenceError(f"'{self.kind}' is not an entity kind") from None
        if kind not in ATTACHABLE_KINDS:
            raise InvalidReferenceError(f"records cannot be attached to '{kind.value}'")
        object.__setattr__(self, "kind", kind)

    @classmethod
    def from_pair(
        cls, related_to_id: int | None, related_to_type: EntityKind | str | None
    ) -> "RelatedRef | None":
        """Build a reference from the flat column pair used on the wire and in tables."""
        if related_to_id is None and related_to_type is None:
            return None
        if related_to_id is None or related_to_type is None:
            raise InvalidReferenceError(
                "relatedToId and relatedToType must be provided together"
            )
        return cls(kind=related_to_type, id=related_to_id)

    def as_pair(self) -> tuple[int, str]:
        return self.id, self.kind.value
