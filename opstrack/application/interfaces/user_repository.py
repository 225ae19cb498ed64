"""Abstract repository interface (port) for User persistence."""

from abc import abstractmethod

from opstrack.application.interfaces.entity_repository import DeletableRepository
from opstrack.domain.entities import User


class UserRepository(DeletableRepository[User]):
    """Port for user persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_username(self, username: str) -> User | None:
        """Retrieve a user by exact username match."""
        ...
