"""Unit tests for the tender → project conversion workflow."""

from datetime import datetime, timezone

import pytest

from opstrack.application.services import TenderConversionService
from opstrack.domain.entities import Tender, TenderStatus
from opstrack.domain.exceptions import EntityNotFoundError, TenderConversionError

START = datetime(2024, 7, 1, tzinfo=timezone.utc)
END = datetime(2024, 12, 31, tzinfo=timezone.utc)
PROJECT_FIELDS = {"start_date": START, "end_date": END, "project_manager_id": 2}


@pytest.fixture
def service(store, mutations) -> TenderConversionService:
    return TenderConversionService(store, mutations)


async def _tender_with_id(store, tender_id: int, status: TenderStatus):
    """Create tenders until one with ``tender_id`` exists, then set its status."""
    tender = None
    while tender is None or tender.id < tender_id:
        tender = await store.tenders.create(
            {
                "title": "Harbour Wall",
                "reference": f"T-{tender_id}",
                "client": "Port Authority",
                "deadline": START,
                "value": 250000,
                "description": "Repair works",
            }
        )
    return await store.tenders.update(tender.id, {"status": status})


@pytest.mark.asyncio
async def test_submitted_tender_becomes_project_then_won(service, store):
    await _tender_with_id(store, 5, TenderStatus.SUBMITTED)

    conversion = await service.convert(5, PROJECT_FIELDS, actor_id=2)

    projects = await store.projects.get_all()
    assert len(projects) == 1
    assert projects[0].tender_id == 5
    assert conversion.project == projects[0]
    assert conversion.tender.status is TenderStatus.WON
    assert (await store.tenders.get_by_id(5)).status is TenderStatus.WON

    # The project write is audited before the tender is marked won.
    trail = await store.activities.get_all()
    assert [(a.type, a.action_type) for a in reversed(trail)] == [
        ("project", "create"),
        ("tender", "update"),
    ]


@pytest.mark.asyncio
async def test_project_defaults_come_from_the_tender(service, store):
    await _tender_with_id(store, 1, TenderStatus.EVALUATION)

    conversion = await service.convert(1, {**PROJECT_FIELDS, "value": 9})

    project = conversion.project
    assert project.name == "Harbour Wall"
    assert project.client == "Port Authority"
    assert project.description == "Repair works"
    assert project.value == 9
    assert project.project_manager_id == 2


@pytest.mark.asyncio
async def test_failed_project_creation_leaves_tender_unchanged(service, store, monkeypatch):
    await _tender_with_id(store, 5, TenderStatus.SUBMITTED)

    async def failing_create(fields):
        raise RuntimeError("disk full")

    monkeypatch.setattr(store.projects, "create", failing_create)

    with pytest.raises(RuntimeError):
        await service.convert(5, PROJECT_FIELDS)

    assert (await store.tenders.get_by_id(5)).status is TenderStatus.SUBMITTED
    assert await store.activities.get_all() == []


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [TenderStatus.DRAFT, TenderStatus.LOST])
async def test_non_convertible_states_are_rejected(service, store, status):
    await _tender_with_id(store, 1, status)

    with pytest.raises(TenderConversionError):
        await service.convert(1, PROJECT_FIELDS)

    assert await store.projects.get_all() == []
    assert (await store.tenders.get_by_id(1)).status is status


@pytest.mark.asyncio
async def test_won_tender_is_converted_once(service, store):
    await _tender_with_id(store, 1, TenderStatus.WON)

    conversion = await service.convert(1, PROJECT_FIELDS)
    assert conversion.tender.status is TenderStatus.WON
    # Already won: only the project creation is audited.
    assert len(await store.activities.get_all()) == 1

    with pytest.raises(TenderConversionError):
        await service.convert(1, PROJECT_FIELDS)
    assert len(await store.projects.get_all()) == 1


@pytest.mark.asyncio
async def test_missing_tender(service):
    with pytest.raises(EntityNotFoundError):
        await service.convert(99, PROJECT_FIELDS)


@pytest.mark.asyncio
async def test_caller_cannot_redirect_tender_id(service, store):
    await _tender_with_id(store, 2, TenderStatus.SUBMITTED)

    conversion = await service.convert(2, {**PROJECT_FIELDS, "tender_id": 1})

    assert conversion.project.tender_id == 2
    assert await store.projects.find_by_tender(2) == [conversion.project]
    assert await store.projects.find_by_tender(1) == []


@pytest.mark.parametrize(
    "status, convertible",
    [
        (TenderStatus.DRAFT, False),
        (TenderStatus.SUBMITTED, True),
        (TenderStatus.UNDER_REVIEW, True),
        (TenderStatus.EVALUATION, True),
        (TenderStatus.WON, True),
        (TenderStatus.LOST, False),
    ],
)
def test_convertible_states(status, convertible):
    tender = Tender(
        title="t", reference="r", client="c", deadline=START,
        status=status, created_at=START, updated_at=START,
    )
    assert tender.is_convertible is convertible
