"""Concrete User repository backed by SQLAlchemy."""

from opstrack.application.interfaces import UserRepository
from opstrack.domain.entities import User
from opstrack.infrastructure.database.models import UserModel
from opstrack.infrastructure.database.repositories.base import SQLAlchemyDeletableCollection


class SQLAlchemyUserRepository(SQLAlchemyDeletableCollection[User, UserModel], UserRepository):
    """Implements the UserRepository port using SQLAlchemy async sessions."""

    model = UserModel
    record_type = User

    async def get_by_username(self, username: str) -> User | None:
        matches = await self._select(UserModel.username == username)
        return matches[0] if matches else None
