"""Contract tests for the SQLAlchemy-backed entity store (in-memory SQLite)."""

from datetime import datetime, timezone

import pytest
import pytest_asyncio
from sqlalchemy import event
from sqlalchemy.pool import StaticPool

from opstrack.application.services import (
    AuditedMutations,
    AuditTrailRecorder,
    MutationFacade,
    RelatedReferenceIndex,
    TenderConversionService,
)
from opstrack.domain.entities import EntityKind, LeadStatus, RelatedRef, TenderStatus
from opstrack.domain.exceptions import EntityInUseError
from opstrack.infrastructure.database import (
    Base,
    build_engine,
    build_session_factory,
    build_sql_store,
    session_scope,
)

WHEN = datetime(2024, 6, 1, tzinfo=timezone.utc)


@pytest_asyncio.fixture
async def sql_store(clock):
    engine = build_engine("sqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async with session_scope(build_session_factory(engine)) as session:
        yield build_sql_store(session, clock)
    await engine.dispose()


def _tender(**overrides) -> dict:
    fields = {"title": "Bridge", "reference": "T-1", "client": "City", "deadline": WHEN}
    fields.update(overrides)
    return fields


@pytest.mark.asyncio
async def test_create_then_update_lead(sql_store):
    created = await sql_store.leads.create({"name": "Acme", "company": "Acme Corp", "status": "new"})

    assert created.id == 1
    assert created.status is LeadStatus.NEW
    assert created.created_at == created.updated_at

    updated = await sql_store.leads.update(1, {"status": "contacted"})

    assert updated.status is LeadStatus.CONTACTED
    assert updated.name == "Acme"
    assert updated.created_at == created.created_at
    assert updated.updated_at > created.updated_at


@pytest.mark.asyncio
async def test_deleted_ids_are_not_reissued(sql_store):
    await sql_store.leads.create({"name": "1", "company": "c"})
    second = await sql_store.leads.create({"name": "2", "company": "c"})
    assert await sql_store.leads.delete(second.id) is True

    third = await sql_store.leads.create({"name": "3", "company": "c"})

    assert third.id == 3
    assert await sql_store.leads.delete(second.id) is False
    assert await sql_store.leads.update(second.id, {"name": "x"}) is None


@pytest.mark.asyncio
async def test_tender_fields_round_trip(sql_store):
    created = await sql_store.tenders.create(_tender(requirements=["ISO 9001", "Bond"], value=5))

    fetched = await sql_store.tenders.get_by_id(created.id)

    assert fetched.requirements == ["ISO 9001", "Bond"]
    assert fetched.deadline == WHEN
    assert fetched.deadline.tzinfo is not None
    assert fetched.status is TenderStatus.DRAFT
    assert fetched.probability == 50


@pytest.mark.asyncio
async def test_documents_by_related_reference(sql_store):
    base = {
        "title": "Doc",
        "type": "Bid",
        "file_path": "uploads/doc.pdf",
        "file_size": 1,
        "file_type": "application/pdf",
        "uploaded_by_id": 1,
    }
    lead_doc = await sql_store.documents.create({**base, "related_to": RelatedRef(EntityKind.LEAD, 7)})
    await sql_store.documents.create({**base, "related_to": RelatedRef(EntityKind.PROJECT, 7)})
    await sql_store.documents.create(base)

    index = RelatedReferenceIndex(sql_store)
    found = await index.find_by_related(EntityKind.DOCUMENT, "lead", 7)

    assert [d.id for d in found] == [lead_doc.id]
    assert found[0].related_to == RelatedRef(EntityKind.LEAD, 7)

    detached = await sql_store.documents.update(lead_doc.id, {"related_to": None})
    assert detached.related_to is None
    assert await index.find_by_related(EntityKind.DOCUMENT, "lead", 7) == []


@pytest.mark.asyncio
async def test_activity_log_is_newest_first(sql_store):
    recorder = AuditTrailRecorder(sql_store.activities)
    for i in range(3):
        await recorder.record(f"a{i}", "lead", "update", 1, related_to_id=1, related_to_type="lead")
    await recorder.record("other", "tender", "create", 1, related_to_id=1, related_to_type="tender")

    assert [a.title for a in await recorder.list_recent()] == ["other", "a2", "a1", "a0"]
    assert [a.title for a in await recorder.list_recent(limit=2)] == ["other", "a2"]
    assert [a.title for a in await recorder.history(EntityKind.LEAD, 1)] == ["a2", "a1", "a0"]


@pytest.mark.asyncio
async def test_user_lookup_and_milestones(sql_store):
    await sql_store.users.create(
        {"username": "admin", "password_hash": "x", "full_name": "A", "email": "a@x", "role": "admin"}
    )
    project = await sql_store.projects.create(
        {"name": "P", "client": "C", "value": 1, "start_date": WHEN, "end_date": WHEN}
    )
    await sql_store.milestones.create({"project_id": project.id, "title": "M1", "due_date": WHEN})

    assert (await sql_store.users.get_by_username("admin")).role == "admin"
    assert await sql_store.users.get_by_username("nobody") is None
    assert [m.title for m in await sql_store.milestones.list_by_project(project.id)] == ["M1"]


@pytest.mark.asyncio
async def test_conversion_against_sql_store(sql_store):
    mutations = AuditedMutations(MutationFacade(sql_store), AuditTrailRecorder(sql_store.activities))
    tender = await sql_store.tenders.create(_tender(status="submitted", value=100))

    conversion = await TenderConversionService(sql_store, mutations).convert(
        tender.id, {"start_date": WHEN, "end_date": WHEN}
    )

    assert conversion.project.tender_id == tender.id
    assert conversion.project.value == 100
    assert (await sql_store.tenders.get_by_id(tender.id)).status is TenderStatus.WON
    assert len(await sql_store.activities.get_all()) == 2


@pytest_asyncio.fixture
async def enforcing_session_factory():
    """Session factory over in-memory SQLite with foreign keys enforced."""
    engine = build_engine("sqlite:///:memory:", poolclass=StaticPool)

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield build_session_factory(engine)
    await engine.dispose()


@pytest.mark.asyncio
async def test_project_with_milestones_cannot_be_deleted(enforcing_session_factory, clock):
    async with session_scope(enforcing_session_factory) as session:
        store = build_sql_store(session, clock)
        project = await store.projects.create(
            {"name": "P", "client": "C", "value": 1, "start_date": WHEN, "end_date": WHEN}
        )
        await store.milestones.create({"project_id": project.id, "title": "M1", "due_date": WHEN})

    with pytest.raises(EntityInUseError):
        async with session_scope(enforcing_session_factory) as session:
            await build_sql_store(session, clock).projects.delete(project.id)

    async with session_scope(enforcing_session_factory) as session:
        store = build_sql_store(session, clock)
        assert await store.projects.get_by_id(project.id) is not None
        assert len(await store.milestones.list_by_project(project.id)) == 1


@pytest.mark.asyncio
async def test_project_without_milestones_is_deleted_with_foreign_keys_on(
    enforcing_session_factory, clock
):
    async with session_scope(enforcing_session_factory) as session:
        store = build_sql_store(session, clock)
        project = await store.projects.create(
            {"name": "P", "client": "C", "value": 1, "start_date": WHEN, "end_date": WHEN}
        )
        assert await store.projects.delete(project.id) is True
