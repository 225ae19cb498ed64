"""Dashboard statistics computed from the lead, tender and project collections."""

from opstrack.application.interfaces import EntityStore
from opstrack.domain.entities import DashboardStats, TenderStatus


class DashboardService:
    def __init__(self, store: EntityStore):
        self._store = store

    async def get_stats(self) -> DashboardStats:
        leads = await self._store.leads.get_all()
        tenders = await self._store.tenders.get_all()
        projects = await self._store.projects.get_all()

        won = sum(1 for t in tenders if t.status is TenderStatus.WON)
        lost = sum(1 for t in tenders if t.status is TenderStatus.LOST)
        closed = won + lost

        return DashboardStats(
            active_leads=sum(1 for lead in leads if lead.is_open),
            open_tenders=sum(1 for t in tenders if t.is_open),
            active_projects=sum(1 for p in projects if p.is_active),
            win_rate=_percent(won, closed),
        )


def _percent(part: int, whole: int) -> int:
    """Whole percentage, halves rounded up (12.5 -> 13)."""
    if not whole:
        return 0
    return (part * 200 + whole) // (whole * 2)
