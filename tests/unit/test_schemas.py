"""Unit tests for the request / response DTOs."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from opstrack.application.schemas import (
    ActivityResponse,
    DocumentCreate,
    DocumentResponse,
    DocumentUpdate,
    LeadUpdate,
    TenderConversionRequest,
    UserResponse,
)
from opstrack.domain.entities import Activity, Document, EntityKind, RelatedRef, User

WHEN = datetime(2024, 6, 1, tzinfo=timezone.utc)

DOCUMENT_BODY = {
    "title": "KYC",
    "type": "KYC",
    "filePath": "uploads/kyc.pdf",
    "fileSize": 10,
    "fileType": "application/pdf",
    "uploadedById": 1,
}


def test_document_create_builds_reference():
    body = DocumentCreate.model_validate({**DOCUMENT_BODY, "relatedToId": 3, "relatedToType": "lead"})
    fields = body.to_fields()

    assert fields["related_to"] == RelatedRef(EntityKind.LEAD, 3)
    assert "related_to_id" not in fields
    assert "performed_by_id" not in fields


def test_document_create_without_reference_is_unattached():
    assert DocumentCreate.model_validate(DOCUMENT_BODY).to_fields()["related_to"] is None


@pytest.mark.parametrize(
    "pair",
    [{"relatedToId": 3}, {"relatedToType": "lead"}, {"relatedToId": 3, "relatedToType": "activity"}],
)
def test_document_create_rejects_bad_pairs(pair):
    with pytest.raises(ValidationError):
        DocumentCreate.model_validate({**DOCUMENT_BODY, **pair})


def test_document_update_without_pair_leaves_reference_alone():
    changes = DocumentUpdate.model_validate({"status": "approved"}).to_changes()
    assert changes == {"status": "approved"}


def test_document_update_can_detach():
    changes = DocumentUpdate.model_validate({"relatedToId": None, "relatedToType": None}).to_changes()
    assert changes == {"related_to": None}


def test_partial_update_ignores_nulls_for_required_fields():
    changes = LeadUpdate.model_validate({"name": None, "notes": None, "performedById": 2}).to_changes()
    assert changes == {"notes": None}


def test_conversion_request_drops_omitted_defaults():
    body = TenderConversionRequest.model_validate(
        {"startDate": WHEN.isoformat(), "endDate": WHEN.isoformat(), "projectManagerId": 2}
    )
    assert body.to_fields() == {"start_date": WHEN, "end_date": WHEN, "project_manager_id": 2}


def test_document_response_flattens_reference():
    document = Document(
        id=1,
        title="KYC",
        type="KYC",
        file_path="uploads/kyc.pdf",
        file_size=10,
        file_type="application/pdf",
        uploaded_by_id=1,
        related_to=RelatedRef(EntityKind.TENDER, 4),
        created_at=WHEN,
        updated_at=WHEN,
    )
    payload = DocumentResponse.model_validate(document).model_dump(by_alias=True)

    assert payload["relatedToId"] == 4
    assert payload["relatedToType"] == "tender"
    assert payload["filePath"] == "uploads/kyc.pdf"


def test_activity_response_unattached():
    activity = Activity(
        id=1, title="t", type="lead", action_type="create", performed_by_id=1, created_at=WHEN
    )
    payload = ActivityResponse.model_validate(activity).model_dump(by_alias=True)

    assert payload["relatedToId"] is None
    assert payload["relatedToType"] is None
    assert payload["actionType"] == "create"


def test_user_response_hides_password_hash():
    user = User(
        id=1, username="u", password_hash="$2b$hash", full_name="U", email="u@x",
        created_at=WHEN, updated_at=WHEN,
    )
    payload = UserResponse.model_validate(user).model_dump(by_alias=True)

    assert "passwordHash" not in payload
    assert "password_hash" not in payload
    assert payload["fullName"] == "U"
