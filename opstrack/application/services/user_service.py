"""Application service (use case) for User operations."""

import logging
from collections.abc import Mapping
from typing import Any

from opstrack.application.interfaces import UserRepository
from opstrack.application.services.audited_mutations import AuditedChange, AuditedMutations
from opstrack.application.services.password_hashing import hash_password, verify_password
from opstrack.domain.entities import EntityKind, User
from opstrack.domain.exceptions import DuplicateEntityError

logger = logging.getLogger(__name__)


class UserService:
    """Username uniqueness and credential handling around audited user mutations.

    Callers pass a plain ``password``; only its bcrypt hash is stored.
    """

    def __init__(
        self,
        users: UserRepository,
        mutations: AuditedMutations,
        bcrypt_rounds: int = 12,
    ):
        self._users = users
        self._mutations = mutations
        self._bcrypt_rounds = bcrypt_rounds

    async def get_by_username(self, username: str) -> User | None:
        return await self._users.get_by_username(username)

    async def create_user(
        self, fields: Mapping[str, Any], actor_id: int | None = None
    ) -> AuditedChange:
        fields = dict(fields)
        await self._ensure_username_free(fields["username"])
        fields["password_hash"] = hash_password(fields.pop("password"), self._bcrypt_rounds)
        return await self._mutations.create(EntityKind.USER, fields, actor_id=actor_id)

    async def update_user(
        self, user_id: int, changes: Mapping[str, Any], actor_id: int | None = None
    ) -> AuditedChange | None:
        changes = dict(changes)
        if "username" in changes:
            await self._ensure_username_free(changes["username"], allow_id=user_id)
        if "password" in changes:
            changes["password_hash"] = hash_password(changes.pop("password"), self._bcrypt_rounds)
        return await self._mutations.update(EntityKind.USER, user_id, changes, actor_id=actor_id)

    async def authenticate(self, username: str, password: str) -> User | None:
        """Return the user when the credentials match an active account."""
        user = await self._users.get_by_username(username)
        if user is None or not user.active:
            return None
        if not verify_password(password, user.password_hash):
            return None
        return user

    async def ensure_admin(
        self,
        username: str,
        password: str,
        email: str,
        full_name: str = "System Administrator",
    ) -> User:
        """Create the administrator account unless it already exists. Idempotent."""
        existing = await self._users.get_by_username(username)
        if existing is not None:
            logger.debug("Administrator '%s' already exists", username)
            return existing

        created = await self.create_user(
            {
                "username": username,
                "password": password,
                "full_name": full_name,
                "email": email,
                "role": "admin",
                "active": True,
            }
        )
        logger.info("Seeded administrator '%s' with id %d", username, created.entity.id)
        return created.entity

    async def _ensure_username_free(self, username: str, allow_id: int | None = None) -> None:
        existing = await self._users.get_by_username(username)
        if existing is not None and existing.id != allow_id:
            raise DuplicateEntityError("User", "username", username)
