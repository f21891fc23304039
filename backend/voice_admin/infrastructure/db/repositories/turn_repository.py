"""
Turn Repository for Voice Admin

Turns are append-only; the only query is the ordered transcript.
"""

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from voice_admin.infrastructure.db.models.turn import Turn, TurnCreate
from voice_admin.infrastructure.db.repositories.base_repository import BaseRepository


class TurnRepository(BaseRepository[Turn, TurnCreate, SQLModel]):

    def __init__(self, session: AsyncSession):
        super().__init__(Turn, session)

    async def get_by_call_session(self, call_session_id: int) -> List[Turn]:
        """
        Get a session's turns, earliest first.

        Identical timestamps fall back to insertion order via id.
        """
        stmt = (
            select(Turn)
            .where(Turn.call_session_id == call_session_id)
            .order_by(Turn.created_at.asc(), Turn.id.asc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
