"""Domain entity for sales leads."""

from dataclasses import dataclass
from enum import Enum

from opstrack.domain.entities.base import Entity


class LeadStatus(str, Enum):
    NEW = "new"
    CONTACTED = "contacted"
    QUALIFIED = "qualified"
    PROPOSAL = "proposal"
    NEGOTIATION = "negotiation"
    WON = "won"
    LOST = "lost"


@dataclass(kw_only=True)
class Lead(Entity):
    """A potential client or opportunity."""

    name: str
    company: str
    email: str | None = None
    phone: str | None = None
    source: str | None = None  # website, referral, marketing, ...
    status: LeadStatus = LeadStatus.NEW
    value: int | None = None
    assigned_to_id: int | None = None
    notes: str | None = None

    def __post_init__(self) -> None:
        self.status = LeadStatus(self.status)

    @property
    def is_open(self) -> bool:
        return self.status not in (LeadStatus.WON, LeadStatus.LOST)
