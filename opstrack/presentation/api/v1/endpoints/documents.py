"""Document endpoints. Documents are registered from upload metadata."""

from fastapi import APIRouter, Depends, Query, status

from opstrack.application.schemas import DocumentCreate, DocumentResponse, DocumentUpdate
from opstrack.application.services import AuditedMutations, MutationFacade, RelatedReferenceIndex
from opstrack.domain.entities import EntityKind
from opstrack.domain.exceptions import InvalidReferenceError
from opstrack.infrastructure.dependencies import (
    get_audited_mutations,
    get_mutation_facade,
    get_reference_index,
)
from opstrack.presentation.api.v1.endpoints.errors import bad_request, not_found

router = APIRouter(prefix="/documents", tags=["Documents"])


@router.get("", response_model=list[DocumentResponse])
async def list_documents(
    related_to_id: int | None = Query(None, alias="relatedToId"),
    related_to_type: str | None = Query(None, alias="relatedToType"),
    facade: MutationFacade = Depends(get_mutation_facade),
    index: RelatedReferenceIndex = Depends(get_reference_index),
) -> list[DocumentResponse]:
    """All documents, or only those attached to the given record."""
    if related_to_id is None and related_to_type is None:
        documents = await facade.list_all(EntityKind.DOCUMENT)
    elif related_to_id is None or related_to_type is None:
        raise bad_request(InvalidReferenceError("relatedToId and relatedToType must be provided together"))
    else:
        documents = await index.find_by_related(EntityKind.DOCUMENT, related_to_type, related_to_id)
    return [DocumentResponse.model_validate(d) for d in documents]


@router.get("/{document_id}", response_model=DocumentResponse)
async def get_document(
    document_id: int,
    facade: MutationFacade = Depends(get_mutation_facade),
) -> DocumentResponse:
    document = await facade.get(EntityKind.DOCUMENT, document_id)
    if document is None:
        raise not_found(EntityKind.DOCUMENT, document_id)
    return DocumentResponse.model_validate(document)


@router.post("", response_model=DocumentResponse, status_code=status.HTTP_201_CREATED)
async def create_document(
    data: DocumentCreate,
    mutations: AuditedMutations = Depends(get_audited_mutations),
) -> DocumentResponse:
    created = await mutations.create(EntityKind.DOCUMENT, data.to_fields(), actor_id=data.performed_by_id)
    return DocumentResponse.model_validate(created.entity)


@router.patch("/{document_id}", response_model=DocumentResponse)
async def update_document(
    document_id: int,
    data: DocumentUpdate,
    mutations: AuditedMutations = Depends(get_audited_mutations),
) -> DocumentResponse:
    updated = await mutations.update(
        EntityKind.DOCUMENT, document_id, data.to_changes(), actor_id=data.performed_by_id
    )
    if updated is None:
        raise not_found(EntityKind.DOCUMENT, document_id)
    return DocumentResponse.model_validate(updated.entity)


@router.delete("/{document_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_document(
    document_id: int,
    performed_by_id: int | None = Query(None, alias="performedById"),
    mutations: AuditedMutations = Depends(get_audited_mutations),
) -> None:
    if await mutations.delete(EntityKind.DOCUMENT, document_id, actor_id=performed_by_id) is None:
        raise not_found(EntityKind.DOCUMENT, document_id)
