"""Unit tests for the UserService."""

import pytest

from opstrack.application.services import UserService
from opstrack.domain.exceptions import DuplicateEntityError


@pytest.fixture
def service(store, mutations) -> UserService:
    return UserService(store.users, mutations, bcrypt_rounds=4)


def _fields(**overrides) -> dict:
    fields = {
        "username": "jdoe",
        "password": "s3cret-pw",
        "full_name": "Jane Doe",
        "email": "jane@example.com",
    }
    fields.update(overrides)
    return fields


@pytest.mark.asyncio
async def test_create_user_stores_only_a_hash(service):
    created = await service.create_user(_fields())

    user = created.entity
    assert user.password_hash != "s3cret-pw"
    assert user.password_hash.startswith("$2")
    assert not hasattr(user, "password")
    assert created.activity.description == "User jdoe was created"


@pytest.mark.asyncio
async def test_duplicate_username_is_rejected(service, store):
    await service.create_user(_fields())

    with pytest.raises(DuplicateEntityError):
        await service.create_user(_fields(email="other@example.com"))

    assert len(await store.users.get_all()) == 1


@pytest.mark.asyncio
async def test_rename_to_taken_username_is_rejected(service):
    await service.create_user(_fields())
    other = await service.create_user(_fields(username="other"))

    with pytest.raises(DuplicateEntityError):
        await service.update_user(other.entity.id, {"username": "jdoe"})

    same = await service.update_user(other.entity.id, {"username": "other", "role": "manager"})
    assert same.entity.role == "manager"


@pytest.mark.asyncio
async def test_authenticate(service):
    created = await service.create_user(_fields())

    assert await service.authenticate("jdoe", "s3cret-pw") == created.entity
    assert await service.authenticate("jdoe", "wrong") is None
    assert await service.authenticate("nobody", "s3cret-pw") is None

    await service.update_user(created.entity.id, {"active": False})
    assert await service.authenticate("jdoe", "s3cret-pw") is None


@pytest.mark.asyncio
async def test_password_change_rehashes(service):
    created = await service.create_user(_fields())

    await service.update_user(created.entity.id, {"password": "n3w-password"})

    assert await service.authenticate("jdoe", "n3w-password") is not None
    assert await service.authenticate("jdoe", "s3cret-pw") is None


@pytest.mark.asyncio
async def test_ensure_admin_is_idempotent(service, store):
    first = await service.ensure_admin("admin", "admin123", "admin@example.com")
    second = await service.ensure_admin("admin", "other", "admin@example.com")

    assert first.id == second.id
    assert first.role == "admin"
    assert len(await store.users.get_all()) == 1
    assert len(await store.activities.get_all()) == 1
