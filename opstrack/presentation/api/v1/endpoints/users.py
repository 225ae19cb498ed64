"""User endpoints. Usernames are unique; password hashes are never returned."""

from fastapi import APIRouter, Depends, Query, status

from opstrack.application.schemas import UserCreate, UserResponse, UserUpdate
from opstrack.application.services import AuditedMutations, MutationFacade, UserService
from opstrack.domain.entities import EntityKind
from opstrack.domain.exceptions import DuplicateEntityError
from opstrack.infrastructure.dependencies import (
    get_audited_mutations,
    get_mutation_facade,
    get_user_service,
)
from opstrack.presentation.api.v1.endpoints.errors import bad_request, not_found

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=list[UserResponse])
async def list_users(
    facade: MutationFacade = Depends(get_mutation_facade),
) -> list[UserResponse]:
    users = await facade.list_all(EntityKind.USER)
    return [UserResponse.model_validate(u) for u in users]


@router.get("/by-username/{username}", response_model=UserResponse)
async def get_user_by_username(
    username: str,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    user = await service.get_by_username(username)
    if user is None:
        raise not_found(EntityKind.USER, username)
    return UserResponse.model_validate(user)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int,
    facade: MutationFacade = Depends(get_mutation_facade),
) -> UserResponse:
    user = await facade.get(EntityKind.USER, user_id)
    if user is None:
        raise not_found(EntityKind.USER, user_id)
    return UserResponse.model_validate(user)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    data: UserCreate,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Create a user; the password is stored as a bcrypt hash."""
    try:
        created = await service.create_user(data.to_fields(), actor_id=data.performed_by_id)
    except DuplicateEntityError as e:
        raise bad_request(e)
    return UserResponse.model_validate(created.entity)


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: int,
    data: UserUpdate,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    try:
        updated = await service.update_user(user_id, data.to_changes(), actor_id=data.performed_by_id)
    except DuplicateEntityError as e:
        raise bad_request(e)
    if updated is None:
        raise not_found(EntityKind.USER, user_id)
    return UserResponse.model_validate(updated.entity)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int,
    performed_by_id: int | None = Query(None, alias="performedById"),
    mutations: AuditedMutations = Depends(get_audited_mutations),
) -> None:
    if await mutations.delete(EntityKind.USER, user_id, actor_id=performed_by_id) is None:
        raise not_found(EntityKind.USER, user_id)
