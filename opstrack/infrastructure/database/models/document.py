"""SQLAlchemy ORM model for the Document entity."""

from sqlalchemy import Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from opstrack.infrastructure.database.base import Base, RelatedToMixin, TimestampMixin


class DocumentModel(TimestampMixin, RelatedToMixin, Base):
    """ORM model — maps to the 'documents' table."""

    __tablename__ = "documents"
    __table_args__ = (
        Index("ix_documents_related_to", "related_to_type", "related_to_id"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    type: Mapped[str] = mapped_column(String(50), nullable=False)
    file_path: Mapped[str] = mapped_column(String(1024), nullable=False)
    file_size: Mapped[int] = mapped_column(Integer, nullable=False)
    file_type: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="pending")
    uploaded_by_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<DocumentModel(id={self.id}, title='{self.title}')>"
