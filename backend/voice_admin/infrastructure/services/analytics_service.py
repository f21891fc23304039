"""
Analytics Service

Aggregate counts for the admin dashboard.
Follows Single Responsibility - only handles reporting concerns.
"""

import logging
from typing import Dict

from pydantic import BaseModel, Field
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from voice_admin.infrastructure.db.models import SubscriptionPlan, User
from voice_admin.infrastructure.db.repositories import (
    SubscriptionPlanRepository,
    UserRepository,
    VoiceRepository,
)


logger = logging.getLogger(__name__)


class DashboardStats(BaseModel):
    """Headline numbers shown on the dashboard."""
    total_users: int = Field(..., ge=0)
    users_with_plan: int = Field(..., ge=0, description="Users linked to any plan")
    total_plans: int = Field(..., ge=0)
    total_voices: int = Field(..., ge=0)
    users_per_plan: Dict[str, int] = Field(
        default_factory=dict,
        description="Plan name -> subscribed user count (zero included)"
    )


class AnalyticsService:
    """
    Service computing dashboard statistics with store-side counts.

    Repositories handle the per-table counts; the per-plan breakdown is a
    single grouped outer join.
    """

    def __init__(self, session: AsyncSession):
        self._session = session
        self._user_repo = UserRepository(session)
        self._plan_repo = SubscriptionPlanRepository(session)
        self._voice_repo = VoiceRepository(session)

    async def get_dashboard_stats(self) -> DashboardStats:
        """Compute the dashboard snapshot in one session."""
        users_with_plan = await self._session.execute(
            select(func.count())
            .select_from(User)
            .where(User.subscription_plan_id.is_not(None))
        )

        stats = DashboardStats(
            total_users=await self._user_repo.count(),
            users_with_plan=users_with_plan.scalar_one(),
            total_plans=await self._plan_repo.count(),
            total_voices=await self._voice_repo.count(),
            users_per_plan=await self._users_per_plan(),
        )
        logger.debug(f"[ANALYTICS] Dashboard stats: {stats.model_dump()}")
        return stats

    async def _users_per_plan(self) -> Dict[str, int]:
        stmt = (
            select(SubscriptionPlan.name, func.count(User.id))
            .select_from(SubscriptionPlan)
            .outerjoin(User, User.subscription_plan_id == SubscriptionPlan.id)
            .group_by(SubscriptionPlan.id, SubscriptionPlan.name)
            .order_by(SubscriptionPlan.id)
        )
        result = await self._session.execute(stmt)
        return {name: count for name, count in result.all()}
