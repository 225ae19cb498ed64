"""Generic SQLAlchemy collection shared by the per-kind repositories.

Rows and domain entities are mapped field by field using the entity's
dataclass fields: the related-to reference is split into its two columns,
enum members are written as their values, and datetimes read back without
a zone (SQLite) are treated as UTC.
"""

import dataclasses
from collections.abc import Mapping
from datetime import datetime, timezone
from enum import Enum
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import ColumnElement

from opstrack.domain.entities import RelatedRef
from opstrack.domain.exceptions import EntityInUseError
from opstrack.infrastructure.clock import Clock
from opstrack.infrastructure.database.base import Base

R = TypeVar("R")
M = TypeVar("M", bound=Base)


class SQLAlchemyTable(Generic[R, M]):
    """Row ↔ record mapping plus the queries every collection needs."""

    model: ClassVar[type[Base]]
    record_type: ClassVar[type]

    def __init__(self, session: AsyncSession, clock: Clock):
        self._session = session
        self._clock = clock

    def _to_entity(self, model: M) -> R:
        """Map ORM model → domain entity."""
        values: dict[str, Any] = {}
        for field in dataclasses.fields(self.record_type):
            if field.name == "related_to":
                values["related_to"] = RelatedRef.from_pair(
                    model.related_to_id, model.related_to_type
                )
            else:
                values[field.name] = _as_utc(getattr(model, field.name))
        return self.record_type(**values)

    def _to_columns(self, entity: R) -> dict[str, Any]:
        """Map domain entity → column values (the ID is assigned by the database)."""
        columns: dict[str, Any] = {}
        for field in dataclasses.fields(self.record_type):
            value = getattr(entity, field.name)
            if field.name == "id":
                continue
            if field.name == "related_to":
                columns["related_to_id"] = value.id if value else None
                columns["related_to_type"] = value.kind.value if value else None
            elif isinstance(value, Enum):
                columns[field.name] = value.value
            else:
                columns[field.name] = value
        return columns

    async def _insert(self, fields: Mapping[str, Any]) -> R:
        entity = self.record_type.new(dict(fields), self._clock())
        model = self.model(**self._to_columns(entity))
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def _get(self, record_id: int) -> R | None:
        result = await self._session.get(self.model, record_id)
        return self._to_entity(result) if result else None

    async def _select(self, *criteria: ColumnElement[bool], order_by=None, limit=None) -> list[R]:
        stmt = select(self.model).where(*criteria)
        stmt = stmt.order_by(*(order_by if order_by is not None else (self.model.id,)))
        if limit:
            stmt = stmt.limit(limit)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    def _attached_to(self, related_to_type: Any, related_to_id: int) -> tuple[ColumnElement[bool], ...]:
        kind = related_to_type.value if isinstance(related_to_type, Enum) else str(related_to_type)
        return (
            self.model.related_to_type == kind,
            self.model.related_to_id == related_to_id,
        )


class SQLAlchemyCollection(SQLAlchemyTable[R, M]):
    """get / list / create / update backed by one table."""

    async def get_by_id(self, entity_id: int) -> R | None:
        return await self._get(entity_id)

    async def get_all(self) -> list[R]:
        return await self._select()

    async def create(self, fields: Mapping[str, Any]) -> R:
        return await self._insert(fields)

    async def update(self, entity_id: int, changes: Mapping[str, Any]) -> R | None:
        model = await self._session.get(self.model, entity_id)
        if model is None:
            return None
        updated = self._to_entity(model).merged(dict(changes), self._clock())
        for column, value in self._to_columns(updated).items():
            setattr(model, column, value)
        await self._session.flush()
        return self._to_entity(model)


class SQLAlchemyDeletableCollection(SQLAlchemyCollection[R, M]):
    async def delete(self, entity_id: int) -> bool:
        model = await self._session.get(self.model, entity_id)
        if model is None:
            return False
        await self._session.delete(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            raise EntityInUseError(self.record_type.__name__, entity_id) from exc
        return True


def _as_utc(value: Any) -> Any:
    if isinstance(value, datetime) and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
