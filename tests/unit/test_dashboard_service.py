"""Unit tests for dashboard statistics."""

from datetime import datetime, timezone

import pytest

from opstrack.application.services import DashboardService

WHEN = datetime(2024, 6, 1, tzinfo=timezone.utc)


@pytest.mark.asyncio
async def test_empty_store(store):
    stats = await DashboardService(store).get_stats()
    assert (stats.active_leads, stats.open_tenders, stats.active_projects, stats.win_rate) == (0, 0, 0, 0)


@pytest.mark.asyncio
async def test_counts_and_win_rate(store):
    for status in ("new", "qualified", "won", "lost"):
        await store.leads.create({"name": status, "company": "c", "status": status})
    for status in ("draft", "submitted", "won", "won", "lost"):
        await store.tenders.create(
            {"title": status, "reference": "r", "client": "c", "deadline": WHEN, "status": status}
        )
    for status in ("planning", "in_progress", "completed", "cancelled", "on_hold"):
        await store.projects.create(
            {"name": status, "client": "c", "value": 1, "start_date": WHEN, "end_date": WHEN, "status": status}
        )

    stats = await DashboardService(store).get_stats()

    assert stats.active_leads == 2
    assert stats.open_tenders == 2
    assert stats.active_projects == 3
    assert stats.win_rate == 67


@pytest.mark.asyncio
async def test_win_rate_rounds_halves_up(store):
    # 1 won out of 8 closed is exactly 12.5%
    for status in ("won",) + ("lost",) * 7:
        await store.tenders.create(
            {"title": status, "reference": "r", "client": "c", "deadline": WHEN, "status": status}
        )

    stats = await DashboardService(store).get_stats()

    assert stats.win_rate == 13
