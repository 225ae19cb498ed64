"""Tender CRUD endpoints and the tender → project conversion."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from opstrack.application.schemas import (
    ProjectResponse,
    TenderConversionRequest,
    TenderConversionResponse,
    TenderCreate,
    TenderResponse,
    TenderUpdate,
)
from opstrack.application.services import AuditedMutations, MutationFacade, TenderConversionService
from opstrack.domain.entities import EntityKind
from opstrack.domain.exceptions import EntityNotFoundError, TenderConversionError
from opstrack.infrastructure.dependencies import (
    get_audited_mutations,
    get_mutation_facade,
    get_tender_conversion_service,
)
from opstrack.presentation.api.v1.endpoints.errors import bad_request, not_found

router = APIRouter(prefix="/tenders", tags=["Tenders"])


@router.get("", response_model=list[TenderResponse])
async def list_tenders(
    facade: MutationFacade = Depends(get_mutation_facade),
) -> list[TenderResponse]:
    tenders = await facade.list_all(EntityKind.TENDER)
    return [TenderResponse.model_validate(t) for t in tenders]


@router.get("/{tender_id}", response_model=TenderResponse)
async def get_tender(
    tender_id: int,
    facade: MutationFacade = Depends(get_mutation_facade),
) -> TenderResponse:
    tender = await facade.get(EntityKind.TENDER, tender_id)
    if tender is None:
        raise not_found(EntityKind.TENDER, tender_id)
    return TenderResponse.model_validate(tender)


@router.post("", response_model=TenderResponse, status_code=status.HTTP_201_CREATED)
async def create_tender(
    data: TenderCreate,
    mutations: AuditedMutations = Depends(get_audited_mutations),
) -> TenderResponse:
    created = await mutations.create(EntityKind.TENDER, data.to_fields(), actor_id=data.performed_by_id)
    return TenderResponse.model_validate(created.entity)


@router.patch("/{tender_id}", response_model=TenderResponse)
async def update_tender(
    tender_id: int,
    data: TenderUpdate,
    mutations: AuditedMutations = Depends(get_audited_mutations),
) -> TenderResponse:
    updated = await mutations.update(
        EntityKind.TENDER, tender_id, data.to_changes(), actor_id=data.performed_by_id
    )
    if updated is None:
        raise not_found(EntityKind.TENDER, tender_id)
    return TenderResponse.model_validate(updated.entity)


@router.delete("/{tender_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tender(
    tender_id: int,
    performed_by_id: int | None = Query(None, alias="performedById"),
    mutations: AuditedMutations = Depends(get_audited_mutations),
) -> None:
    if await mutations.delete(EntityKind.TENDER, tender_id, actor_id=performed_by_id) is None:
        raise not_found(EntityKind.TENDER, tender_id)


@router.post(
    "/{tender_id}/convert",
    response_model=TenderConversionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def convert_tender(
    tender_id: int,
    data: TenderConversionRequest,
    service: TenderConversionService = Depends(get_tender_conversion_service),
) -> TenderConversionResponse:
    """Create a project from the tender and mark the tender as won."""
    try:
        conversion = await service.convert(tender_id, data.to_fields(), actor_id=data.performed_by_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except TenderConversionError as e:
        raise bad_request(e)
    return TenderConversionResponse(
        project=ProjectResponse.model_validate(conversion.project),
        tender=TenderResponse.model_validate(conversion.tender),
    )
