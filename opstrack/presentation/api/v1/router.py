"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from opstrack.presentation.api.v1.endpoints.health import router as health_router
from opstrack.presentation.api.v1.endpoints.auth import router as auth_router
from opstrack.presentation.api.v1.endpoints.users import router as users_router
from opstrack.presentation.api.v1.endpoints.documents import router as documents_router
from opstrack.presentation.api.v1.endpoints.leads import router as leads_router
from opstrack.presentation.api.v1.endpoints.tenders import router as tenders_router
from opstrack.presentation.api.v1.endpoints.projects import router as projects_router
from opstrack.presentation.api.v1.endpoints.milestones import router as milestones_router
from opstrack.presentation.api.v1.endpoints.activities import router as activities_router
from opstrack.presentation.api.v1.endpoints.stats import router as stats_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(auth_router)
router.include_router(users_router)
router.include_router(documents_router)
router.include_router(leads_router)
router.include_router(tenders_router)
router.include_router(projects_router)
router.include_router(milestones_router)
router.include_router(activities_router)
router.include_router(stats_router)
