"""Lead CRUD endpoints."""

from fastapi import APIRouter, Depends, Query, status

from opstrack.application.schemas import LeadCreate, LeadResponse, LeadUpdate
from opstrack.application.services import AuditedMutations, MutationFacade
from opstrack.domain.entities import EntityKind
from opstrack.infrastructure.dependencies import get_audited_mutations, get_mutation_facade
from opstrack.presentation.api.v1.endpoints.errors import not_found

router = APIRouter(prefix="/leads", tags=["Leads"])


@router.get("", response_model=list[LeadResponse])
async def list_leads(
    facade: MutationFacade = Depends(get_mutation_facade),
) -> list[LeadResponse]:
    leads = await facade.list_all(EntityKind.LEAD)
    return [LeadResponse.model_validate(lead) for lead in leads]


@router.get("/{lead_id}", response_model=LeadResponse)
async def get_lead(
    lead_id: int,
    facade: MutationFacade = Depends(get_mutation_facade),
) -> LeadResponse:
    lead = await facade.get(EntityKind.LEAD, lead_id)
    if lead is None:
        raise not_found(EntityKind.LEAD, lead_id)
    return LeadResponse.model_validate(lead)


@router.post("", response_model=LeadResponse, status_code=status.HTTP_201_CREATED)
async def create_lead(
    data: LeadCreate,
    mutations: AuditedMutations = Depends(get_audited_mutations),
) -> LeadResponse:
    created = await mutations.create(EntityKind.LEAD, data.to_fields(), actor_id=data.performed_by_id)
    return LeadResponse.model_validate(created.entity)


@router.patch("/{lead_id}", response_model=LeadResponse)
async def update_lead(
    lead_id: int,
    data: LeadUpdate,
    mutations: AuditedMutations = Depends(get_audited_mutations),
) -> LeadResponse:
    updated = await mutations.update(
        EntityKind.LEAD, lead_id, data.to_changes(), actor_id=data.performed_by_id
    )
    if updated is None:
        raise not_found(EntityKind.LEAD, lead_id)
    return LeadResponse.model_validate(updated.entity)


@router.delete("/{lead_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_lead(
    lead_id: int,
    performed_by_id: int | None = Query(None, alias="performedById"),
    mutations: AuditedMutations = Depends(get_audited_mutations),
) -> None:
    if await mutations.delete(EntityKind.LEAD, lead_id, actor_id=performed_by_id) is None:
        raise not_found(EntityKind.LEAD, lead_id)
