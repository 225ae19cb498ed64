"""Domain entity for tenders (bids)."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from opstrack.domain.entities.base import Entity


class TenderStatus(str, Enum):
    """Lifecycle of a bid: draft → submitted / under review → won | lost."""

    DRAFT = "draft"
    SUBMITTED = "submitted"
    UNDER_REVIEW = "under_review"
    EVALUATION = "evaluation"
    WON = "won"
    LOST = "lost"


# States from which a tender may be turned into a project.
CONVERTIBLE_STATUSES = frozenset({
    TenderStatus.SUBMITTED,
    TenderStatus.UNDER_REVIEW,
    TenderStatus.EVALUATION,
    TenderStatus.WON,
})


@dataclass(kw_only=True)
class Tender(Entity):
    """A bid submitted to a client, which may later become a project."""

    title: str
    reference: str
    client: str
    deadline: datetime
    description: str | None = None
    value: int | None = None
    submission_date: datetime | None = None
    status: TenderStatus = TenderStatus.DRAFT
    probability: int | None = 50  # win probability, 0-100
    assigned_to_id: int | None = None
    notes: str | None = None
    requirements: list[Any] | None = None

    def __post_init__(self) -> None:
        self.status = TenderStatus(self.status)

    @property
    def is_open(self) -> bool:
        return self.status not in (TenderStatus.WON, TenderStatus.LOST)

    @property
    def is_convertible(self) -> bool:
        return self.status in CONVERTIBLE_STATUSES
