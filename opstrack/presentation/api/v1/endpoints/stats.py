"""Dashboard statistics endpoint."""

from fastapi import APIRouter, Depends

from opstrack.application.schemas import DashboardStatsResponse
from opstrack.application.services import DashboardService
from opstrack.infrastructure.dependencies import get_dashboard_service

router = APIRouter(prefix="/stats", tags=["Stats"])


@router.get("/dashboard", response_model=DashboardStatsResponse)
async def get_dashboard_stats(
    service: DashboardService = Depends(get_dashboard_service),
) -> DashboardStatsResponse:
    stats = await service.get_stats()
    return DashboardStatsResponse.model_validate(stats)
