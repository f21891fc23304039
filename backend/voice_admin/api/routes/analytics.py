"""
Analytics API Routes

Dashboard statistics for the admin console.
"""

from fastapi import APIRouter

from voice_admin.api.dependencies import AnalyticsServiceDep
from voice_admin.infrastructure.services.analytics_service import DashboardStats


router = APIRouter(prefix="/analytics")


@router.get("/dashboard", response_model=DashboardStats)
async def get_dashboard_stats(service: AnalyticsServiceDep):
    """User, plan and voice totals plus users per plan."""
    return await service.get_dashboard_stats()
