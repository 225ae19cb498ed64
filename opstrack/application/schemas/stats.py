from opstrack.application.schemas.common import CamelModel


class DashboardStatsResponse(CamelModel):
    """Headline figures for the dashboard. ``win_rate`` is a whole percentage."""

    active_leads: int
    open_tenders: int
    active_projects: int
    win_rate: int
