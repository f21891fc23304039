"""
SubscriptionPlan Repository for Voice Admin

Plan lookups by name for the uniqueness pre-check.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from voice_admin.infrastructure.db.models.subscription_plan import (
    SubscriptionPlan,
    SubscriptionPlanCreate,
)
from voice_admin.infrastructure.db.repositories.base_repository import BaseRepository


class SubscriptionPlanRepository(
    BaseRepository[SubscriptionPlan, SubscriptionPlanCreate, SQLModel]
):
    """Repository for SubscriptionPlan reads and inserts."""

    def __init__(self, session: AsyncSession):
        super().__init__(SubscriptionPlan, session)

    async def get_by_name(self, name: str) -> Optional[SubscriptionPlan]:
        """
        Get a plan by its exact (case-sensitive) name.

        Args:
            name: Plan name

        Returns:
            SubscriptionPlan or None if not found
        """
        stmt = select(SubscriptionPlan).where(SubscriptionPlan.name == name)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
