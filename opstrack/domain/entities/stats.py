"""Read-only aggregate shown on the dashboard."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DashboardStats:
    active_leads: int
    open_tenders: int
    active_projects: int
    win_rate: int  # percent of closed tenders that were won
