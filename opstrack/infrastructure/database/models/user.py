"""SQLAlchemy ORM model for the User entity."""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from opstrack.infrastructure.database.base import Base, TimestampMixin


class UserModel(TimestampMixin, Base):
    """ORM model — maps to the 'users' table."""

    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(150), nullable=False, unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(50), nullable=False, default="user")
    avatar_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, username='{self.username}')>"
