"""Unit tests for audited mutations: every change is paired with one activity."""

from datetime import datetime, timezone

import pytest

from opstrack.domain.entities import ActionType, EntityKind, RelatedRef
from opstrack.domain.exceptions import OperationNotSupportedError

WHEN = datetime(2024, 6, 1, tzinfo=timezone.utc)

SAMPLE_FIELDS = {
    EntityKind.USER: {"username": "jdoe", "password_hash": "x", "full_name": "J", "email": "j@x"},
    EntityKind.DOCUMENT: {
        "title": "KYC",
        "type": "KYC",
        "file_path": "uploads/kyc.pdf",
        "file_size": 5,
        "file_type": "application/pdf",
        "uploaded_by_id": 4,
    },
    EntityKind.LEAD: {"name": "Acme", "company": "Acme Corp"},
    EntityKind.TENDER: {"title": "Bridge", "reference": "T-1", "client": "City", "deadline": WHEN},
    EntityKind.PROJECT: {
        "name": "Bridge",
        "client": "City",
        "value": 10,
        "start_date": WHEN,
        "end_date": WHEN,
    },
    EntityKind.MILESTONE: {"project_id": 1, "title": "Kickoff", "due_date": WHEN},
}


@pytest.mark.asyncio
@pytest.mark.parametrize("kind", list(SAMPLE_FIELDS))
async def test_create_and_update_each_append_one_activity(mutations, store, kind):
    created = await mutations.create(kind, SAMPLE_FIELDS[kind], actor_id=9)

    assert created.activity.action_type == "create"
    assert created.activity.type == kind.value
    assert created.activity.performed_by_id == 9
    assert created.activity.related_to == RelatedRef(kind, created.entity.id)

    changes = {"title": "Renamed"} if hasattr(created.entity, "title") else {"notes": "x"}
    if kind is EntityKind.USER:
        changes = {"full_name": "Jane"}
    updated = await mutations.update(kind, created.entity.id, changes, actor_id=9)

    assert updated.activity.action_type == "update"
    history = await store.activities.find_by_related(kind, created.entity.id)
    assert [a.action_type for a in history] == ["update", "create"]


@pytest.mark.asyncio
async def test_update_of_missing_entity_writes_no_activity(mutations, store):
    assert await mutations.update(EntityKind.LEAD, 404, {"name": "x"}) is None
    assert await mutations.delete(EntityKind.LEAD, 404) is None
    assert await store.activities.get_all() == []


@pytest.mark.asyncio
async def test_delete_is_audited_with_the_removed_entity(mutations, store):
    created = await mutations.create(EntityKind.LEAD, {"name": "Acme", "company": "Acme Corp"})

    deleted = await mutations.delete(EntityKind.LEAD, created.entity.id, actor_id=2)

    assert deleted.entity.name == "Acme"
    assert deleted.activity.action_type == ActionType.DELETE.value
    assert deleted.activity.description == 'Lead "Acme" was deleted'
    assert await store.leads.get_by_id(created.entity.id) is None
    assert len(await store.activities.get_all()) == 2


@pytest.mark.asyncio
async def test_milestones_cannot_be_deleted(mutations):
    created = await mutations.create(EntityKind.MILESTONE, SAMPLE_FIELDS[EntityKind.MILESTONE])
    with pytest.raises(OperationNotSupportedError):
        await mutations.delete(EntityKind.MILESTONE, created.entity.id)


@pytest.mark.asyncio
async def test_descriptions_name_the_entity(mutations):
    created = await mutations.create(EntityKind.LEAD, {"name": "Acme", "company": "Acme Corp"})
    assert created.activity.title == "Lead created"
    assert created.activity.description == 'Lead "Acme" from Acme Corp was created'


@pytest.mark.asyncio
async def test_actor_falls_back_to_responsible_user(mutations):
    document = await mutations.create(EntityKind.DOCUMENT, SAMPLE_FIELDS[EntityKind.DOCUMENT])
    assert document.activity.performed_by_id == 4

    lead = await mutations.create(
        EntityKind.LEAD, {"name": "A", "company": "B", "assigned_to_id": 6}
    )
    assert lead.activity.performed_by_id == 6

    unassigned = await mutations.create(EntityKind.LEAD, {"name": "C", "company": "D"})
    assert unassigned.activity.performed_by_id == 1


@pytest.mark.asyncio
async def test_explicit_actor_wins_over_fallback(mutations):
    lead = await mutations.create(
        EntityKind.LEAD, {"name": "A", "company": "B", "assigned_to_id": 6}, actor_id=3
    )
    assert lead.activity.performed_by_id == 3


@pytest.mark.asyncio
async def test_lead_lifecycle_records_every_action_type(mutations, store):
    lead = (await mutations.create(EntityKind.LEAD, SAMPLE_FIELDS[EntityKind.LEAD])).entity
    await mutations.update(EntityKind.LEAD, lead.id, {"status": "contacted"})
    await mutations.delete(EntityKind.LEAD, lead.id)

    history = await store.activities.find_by_related(EntityKind.LEAD, lead.id)

    assert [a.action_type for a in history] == ["delete", "update", "create"]
    assert {a.action_type for a in history} == {action.value for action in ActionType}
