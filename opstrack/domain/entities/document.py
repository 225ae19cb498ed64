"""Domain entity for uploaded documents (KYC, bids, contracts, invoices)."""

from dataclasses import dataclass
from enum import Enum

from opstrack.domain.entities.base import Entity
from opstrack.domain.entities.related import RelatedRef


class DocumentStatus(str, Enum):
    """Review state of a document."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


@dataclass(kw_only=True)
class Document(Entity):
    """File metadata, optionally attached to another record through ``related_to``."""

    title: str
    type: str  # KYC, Bid, Contract, Invoice, Milestone
    file_path: str
    file_size: int
    file_type: str
    uploaded_by_id: int
    description: str | None = None
    status: DocumentStatus = DocumentStatus.PENDING
    related_to: RelatedRef | None = None

    def __post_init__(self) -> None:
        self.status = DocumentStatus(self.status)
