"""Shared pydantic base classes — camelCase on the wire, snake_case in Python."""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from opstrack.domain.entities import EntityKind, RelatedRef


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MutationRequest(CamelModel):
    """Body of a create request. ``performedById`` names the actor for the audit trail."""

    performed_by_id: int | None = None

    def to_fields(self) -> dict[str, Any]:
        """Field set for the mutation façade (defaults included, actor excluded)."""
        return self.model_dump(exclude={"performed_by_id"})


class PartialUpdateRequest(CamelModel):
    """Body of a partial update. Only the fields the caller sent are merged.

    An explicit ``null`` clears a field only when it is listed in
    ``clearable_fields``; for any other field it is ignored.
    """

    clearable_fields: ClassVar[frozenset[str]] = frozenset()

    performed_by_id: int | None = None

    def to_changes(self) -> dict[str, Any]:
        changes = self.model_dump(exclude_unset=True, exclude={"performed_by_id"})
        return {
            key: value
            for key, value in changes.items()
            if value is not None or key in self.clearable_fields
        }


class RelatedToRequestMixin(BaseModel):
    """Flat ``relatedToId`` / ``relatedToType`` pair, validated as all-or-nothing."""

    related_to_id: int | None = Field(None, alias="relatedToId")
    related_to_type: EntityKind | None = Field(None, alias="relatedToType")

    @model_validator(mode="after")
    def _check_pair(self):
        # Raises InvalidReferenceError (a ValueError) for half pairs and activity targets.
        RelatedRef.from_pair(self.related_to_id, self.related_to_type)
        return self

    def related_ref(self) -> RelatedRef | None:
        return RelatedRef.from_pair(self.related_to_id, self.related_to_type)


class RelatedToResponseMixin(BaseModel):
    """Unpacks an entity's ``related_to`` reference into the flat response pair."""

    related_to_id: int | None = Field(None, alias="relatedToId")
    related_to_type: EntityKind | None = Field(None, alias="relatedToType")

    @model_validator(mode="before")
    @classmethod
    def _unpack_related(cls, data: Any) -> Any:
        if isinstance(data, dict) or not hasattr(data, "related_to"):
            return data
        values = {
            name: getattr(data, name)
            for name in cls.model_fields
            if hasattr(data, name)
        }
        related: RelatedRef | None = data.related_to
        values["related_to_id"] = related.id if related else None
        values["related_to_type"] = related.kind if related else None
        return values
