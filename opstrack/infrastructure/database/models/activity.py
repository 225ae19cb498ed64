"""SQLAlchemy ORM model for the append-only activity log."""

from datetime import datetime

from sqlalchemy import DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from opstrack.infrastructure.database.base import Base, RelatedToMixin


class ActivityModel(RelatedToMixin, Base):
    """ORM model — maps to the 'activities' table. Rows are never updated."""

    __tablename__ = "activities"
    __table_args__ = (
        Index("ix_activities_related_to", "related_to_type", "related_to_id"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    type: Mapped[str] = mapped_column(String(50), nullable=False)
    action_type: Mapped[str] = mapped_column(String(50), nullable=False)
    performed_by_id: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<ActivityModel(id={self.id}, title='{self.title}')>"
