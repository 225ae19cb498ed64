"""Project CRUD endpoints."""

from fastapi import APIRouter, Depends, Query, status

from opstrack.application.schemas import (
    MilestoneResponse,
    ProjectCreate,
    ProjectResponse,
    ProjectUpdate,
)
from opstrack.application.interfaces import EntityStore
from opstrack.application.services import AuditedMutations, MutationFacade
from opstrack.domain.entities import EntityKind
from opstrack.domain.exceptions import EntityInUseError
from opstrack.infrastructure.dependencies import (
    get_audited_mutations,
    get_entity_store,
    get_mutation_facade,
)
from opstrack.presentation.api.v1.endpoints.errors import conflict, not_found

router = APIRouter(prefix="/projects", tags=["Projects"])


@router.get("", response_model=list[ProjectResponse])
async def list_projects(
    facade: MutationFacade = Depends(get_mutation_facade),
) -> list[ProjectResponse]:
    projects = await facade.list_all(EntityKind.PROJECT)
    return [ProjectResponse.model_validate(p) for p in projects]


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: int,
    facade: MutationFacade = Depends(get_mutation_facade),
) -> ProjectResponse:
    project = await facade.get(EntityKind.PROJECT, project_id)
    if project is None:
        raise not_found(EntityKind.PROJECT, project_id)
    return ProjectResponse.model_validate(project)


@router.get("/{project_id}/milestones", response_model=list[MilestoneResponse])
async def list_project_milestones(
    project_id: int,
    store: EntityStore = Depends(get_entity_store),
) -> list[MilestoneResponse]:
    if await store.projects.get_by_id(project_id) is None:
        raise not_found(EntityKind.PROJECT, project_id)
    milestones = await store.milestones.list_by_project(project_id)
    return [MilestoneResponse.model_validate(m) for m in milestones]


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(
    data: ProjectCreate,
    mutations: AuditedMutations = Depends(get_audited_mutations),
) -> ProjectResponse:
    created = await mutations.create(EntityKind.PROJECT, data.to_fields(), actor_id=data.performed_by_id)
    return ProjectResponse.model_validate(created.entity)


@router.patch("/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: int,
    data: ProjectUpdate,
    mutations: AuditedMutations = Depends(get_audited_mutations),
) -> ProjectResponse:
    updated = await mutations.update(
        EntityKind.PROJECT, project_id, data.to_changes(), actor_id=data.performed_by_id
    )
    if updated is None:
        raise not_found(EntityKind.PROJECT, project_id)
    return ProjectResponse.model_validate(updated.entity)


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: int,
    performed_by_id: int | None = Query(None, alias="performedById"),
    mutations: AuditedMutations = Depends(get_audited_mutations),
) -> None:
    """Delete a project. A project that still has milestones is answered with 409."""
    try:
        deleted = await mutations.delete(EntityKind.PROJECT, project_id, actor_id=performed_by_id)
    except EntityInUseError as exc:
        raise conflict(exc) from exc
    if deleted is None:
        raise not_found(EntityKind.PROJECT, project_id)
