"""SQLAlchemy ORM base and shared column mixins."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""

    pass


class TimestampMixin:
    """created_at / updated_at columns.

    Both are written by the repositories from the store clock, never by
    column defaults, so the two backends stamp records the same way.
    """

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)


class RelatedToMixin:
    """Flat polymorphic related-to pair. Both columns are NULL or neither is."""

    related_to_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    related_to_type: Mapped[str | None] = mapped_column(String(20), nullable=True)
