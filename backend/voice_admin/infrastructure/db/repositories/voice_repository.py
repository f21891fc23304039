"""
Voice Repository for Voice Admin

Voice library reads, ordered by display name.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from voice_admin.infrastructure.db.models.voice import Voice, VoiceCreate
from voice_admin.infrastructure.db.repositories.base_repository import BaseRepository


class VoiceRepository(BaseRepository[Voice, VoiceCreate, SQLModel]):

    def __init__(self, session: AsyncSession):
        super().__init__(Voice, session)

    async def get_all(self) -> List[Voice]:
        """Get all voices ordered by name (store collation), then id."""
        stmt = select(Voice).order_by(Voice.name, Voice.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_identifier(self, identifier: str) -> Optional[Voice]:
        stmt = select(Voice).where(Voice.identifier == identifier)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
