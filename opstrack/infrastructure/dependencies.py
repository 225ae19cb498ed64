"""FastAPI dependency injection — wires infrastructure to application layer.

Every request works against one entity store. With the memory backend that
is the process-wide store built by ``create_app``; with the SQL backend it is
a fresh store bound to a session that commits when the request succeeds and
rolls back when it raises.
"""

from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request

from opstrack.application.interfaces import EntityStore
from opstrack.application.services import (
    AuditedMutations,
    AuditTrailRecorder,
    DashboardService,
    MutationFacade,
    RelatedReferenceIndex,
    TenderConversionService,
    UserService,
)
from opstrack.config import Settings
from opstrack.infrastructure.database import build_sql_store, session_scope


@asynccontextmanager
async def open_entity_store(app: FastAPI) -> AsyncIterator[EntityStore]:
    """Entity store for one unit of work against the app's configured backend."""
    settings: Settings = app.state.settings
    if settings.storage_backend == "sql":
        async with session_scope(app.state.session_factory) as session:
            yield build_sql_store(session, app.state.clock)
    else:
        yield app.state.memory_store


def build_audited_mutations(store: EntityStore, settings: Settings) -> AuditedMutations:
    return AuditedMutations(
        MutationFacade(store),
        AuditTrailRecorder(store.activities),
        default_actor_id=settings.default_actor_id,
    )


def build_user_service(store: EntityStore, settings: Settings) -> UserService:
    return UserService(
        store.users,
        build_audited_mutations(store, settings),
        bcrypt_rounds=settings.bcrypt_rounds,
    )


async def get_entity_store(request: Request) -> AsyncGenerator[EntityStore, None]:
    """Provides the request's entity store (cached per request by FastAPI)."""
    async with open_entity_store(request.app) as store:
        yield store


async def get_mutation_facade(
    store: EntityStore = Depends(get_entity_store),
) -> AsyncGenerator[MutationFacade, None]:
    """Provides the read side of the façade for list and get endpoints."""
    yield MutationFacade(store)


async def get_audited_mutations(
    request: Request,
    store: EntityStore = Depends(get_entity_store),
) -> AsyncGenerator[AuditedMutations, None]:
    """Provides the audited unit of work every mutating endpoint goes through."""
    yield build_audited_mutations(store, request.app.state.settings)


async def get_audit_trail(
    store: EntityStore = Depends(get_entity_store),
) -> AsyncGenerator[AuditTrailRecorder, None]:
    yield AuditTrailRecorder(store.activities)


async def get_reference_index(
    store: EntityStore = Depends(get_entity_store),
) -> AsyncGenerator[RelatedReferenceIndex, None]:
    yield RelatedReferenceIndex(store)


async def get_tender_conversion_service(
    request: Request,
    store: EntityStore = Depends(get_entity_store),
) -> AsyncGenerator[TenderConversionService, None]:
    """Provides the conversion workflow sharing the request's store and audit trail."""
    yield TenderConversionService(store, build_audited_mutations(store, request.app.state.settings))


async def get_dashboard_service(
    store: EntityStore = Depends(get_entity_store),
) -> AsyncGenerator[DashboardService, None]:
    yield DashboardService(store)


async def get_user_service(
    request: Request,
    store: EntityStore = Depends(get_entity_store),
) -> AsyncGenerator[UserService, None]:
    """Provides a UserService with credential hashing configured from settings."""
    yield build_user_service(store, request.app.state.settings)
