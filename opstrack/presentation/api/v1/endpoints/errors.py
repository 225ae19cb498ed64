"""Translation of domain outcomes into HTTP errors."""

from fastapi import HTTPException, status

from opstrack.domain.entities import EntityKind
from opstrack.domain.exceptions import EntityNotFoundError


def not_found(kind: EntityKind, entity_id: int | str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=str(EntityNotFoundError(kind.label, entity_id)),
    )


def bad_request(error: Exception) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))


def conflict(error: Exception) -> HTTPException:
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))
