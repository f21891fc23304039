"""
ApiKey Repository for Voice Admin

Per-user key listing and the active-key count used for plan quotas.
"""

from typing import List

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from voice_admin.infrastructure.db.models.api_key import ApiKey, ApiKeyCreate, ApiKeyUpdate
from voice_admin.infrastructure.db.repositories.base_repository import BaseRepository


class ApiKeyRepository(BaseRepository[ApiKey, ApiKeyCreate, ApiKeyUpdate]):
    """Repository for ApiKey CRUD and quota counting."""

    def __init__(self, session: AsyncSession):
        super().__init__(ApiKey, session)

    async def get_by_user(self, user_id: int) -> List[ApiKey]:
        """
        Get every key (active and inactive) owned by a user.

        Args:
            user_id: Owning user's id

        Returns:
            List of ApiKey ordered by id
        """
        stmt = (
            select(ApiKey)
            .where(ApiKey.user_id == user_id)
            .order_by(ApiKey.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_active_for_user(self, user_id: int) -> int:
        """Count keys with ``is_active = true`` for a user."""
        stmt = (
            select(func.count())
            .select_from(ApiKey)
            .where(ApiKey.user_id == user_id, ApiKey.is_active.is_(True))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
