"""Milestone endpoints. Milestones cannot be deleted."""

from fastapi import APIRouter, Depends, Query, status

from opstrack.application.interfaces import EntityStore
from opstrack.application.schemas import MilestoneCreate, MilestoneResponse, MilestoneUpdate
from opstrack.application.services import AuditedMutations, MutationFacade
from opstrack.domain.entities import EntityKind
from opstrack.infrastructure.dependencies import (
    get_audited_mutations,
    get_entity_store,
    get_mutation_facade,
)
from opstrack.presentation.api.v1.endpoints.errors import not_found

router = APIRouter(prefix="/milestones", tags=["Milestones"])


@router.get("", response_model=list[MilestoneResponse])
async def list_milestones(
    project_id: int | None = Query(None, alias="projectId"),
    store: EntityStore = Depends(get_entity_store),
) -> list[MilestoneResponse]:
    """All milestones, or those of one project when ``projectId`` is given."""
    if project_id is None:
        milestones = await store.milestones.get_all()
    else:
        milestones = await store.milestones.list_by_project(project_id)
    return [MilestoneResponse.model_validate(m) for m in milestones]


@router.get("/{milestone_id}", response_model=MilestoneResponse)
async def get_milestone(
    milestone_id: int,
    facade: MutationFacade = Depends(get_mutation_facade),
) -> MilestoneResponse:
    milestone = await facade.get(EntityKind.MILESTONE, milestone_id)
    if milestone is None:
        raise not_found(EntityKind.MILESTONE, milestone_id)
    return MilestoneResponse.model_validate(milestone)


@router.post("", response_model=MilestoneResponse, status_code=status.HTTP_201_CREATED)
async def create_milestone(
    data: MilestoneCreate,
    mutations: AuditedMutations = Depends(get_audited_mutations),
) -> MilestoneResponse:
    created = await mutations.create(
        EntityKind.MILESTONE, data.to_fields(), actor_id=data.performed_by_id
    )
    return MilestoneResponse.model_validate(created.entity)


@router.patch("/{milestone_id}", response_model=MilestoneResponse)
async def update_milestone(
    milestone_id: int,
    data: MilestoneUpdate,
    mutations: AuditedMutations = Depends(get_audited_mutations),
) -> MilestoneResponse:
    updated = await mutations.update(
        EntityKind.MILESTONE, milestone_id, data.to_changes(), actor_id=data.performed_by_id
    )
    if updated is None:
        raise not_found(EntityKind.MILESTONE, milestone_id)
    return MilestoneResponse.model_validate(updated.entity)
