"""Dashboard API Routes Package

This module aggregates all route handlers into a single router
that can be included in the main FastAPI application.
"""

from fastapi import APIRouter

from .notifications import router as notifications_router
from .settings import router as settings_router
from .stats import router as stats_router
from .tasks import router as tasks_router


# Create main API router
api_router = APIRouter(prefix="/api")

# Include all sub-routers
api_router.include_router(tasks_router, prefix="/tasks", tags=["tasks"])
api_router.include_router(stats_router, prefix="/stats", tags=["stats"])
api_router.include_router(settings_router, prefix="/settings", tags=["settings"])
api_router.include_router(notifications_router, tags=["notifications"])

__all__ = ["api_router"]
