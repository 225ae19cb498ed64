"""Domain entity for application users."""

from dataclasses import dataclass

from opstrack.domain.entities.base import Entity


@dataclass(kw_only=True)
class User(Entity):
    """A person who uploads documents, manages projects and performs audited actions."""

    username: str
    password_hash: str
    full_name: str
    email: str
    role: str = "user"  # admin, manager, user
    avatar_url: str | None = None
    active: bool = True
