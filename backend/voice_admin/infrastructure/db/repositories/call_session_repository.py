"""
CallSession Repository for Voice Admin

Call session lookups by Twilio call id and by owning user.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from voice_admin.infrastructure.db.models.call_session import (
    CallSession,
    CallSessionCreate,
    CallSessionEnd,
)
from voice_admin.infrastructure.db.repositories.base_repository import BaseRepository


class CallSessionRepository(
    BaseRepository[CallSession, CallSessionCreate, CallSessionEnd]
):
    """
    Repository for CallSession CRUD and specialized queries.

    Extends base repository with:
    - get_by_twilio_call_id: uniqueness pre-check
    - get_by_user: sessions owned by a user
    """

    def __init__(self, session: AsyncSession):
        super().__init__(CallSession, session)

    async def get_by_twilio_call_id(self, twilio_call_id: str) -> Optional[CallSession]:
        """
        Get a session by its Twilio call SID.

        Args:
            twilio_call_id: Twilio call identifier

        Returns:
            CallSession or None if not found
        """
        stmt = select(CallSession).where(CallSession.twilio_call_id == twilio_call_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_user(self, user_id: int) -> List[CallSession]:
        """
        Get every session for a user, open or ended.

        Args:
            user_id: Owning user's id

        Returns:
            List of CallSession ordered by id
        """
        stmt = (
            select(CallSession)
            .where(CallSession.user_id == user_id)
            .order_by(CallSession.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
