"""
User Repository for Voice Admin

Specialized repository for user account operations.
Extends base repository with email lookups.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from voice_admin.infrastructure.db.models.user import User, UserCreate, UserUpdate
from voice_admin.infrastructure.db.repositories.base_repository import BaseRepository


class UserRepository(BaseRepository[User, UserCreate, UserUpdate]):
    """
    Repository for User CRUD and specialized queries.

    Extends base repository with:
    - get_by_email: uniqueness pre-checks on create and update
    """

    def __init__(self, session: AsyncSession):
        super().__init__(User, session)

    async def get_by_email(
        self,
        email: str,
        exclude_id: Optional[int] = None
    ) -> Optional[User]:
        """
        Get a user by email, optionally ignoring one user's own row.

        Args:
            email: Email address to look up
            exclude_id: User id to leave out of the match

        Returns:
            User or None if no other user has the email
        """
        stmt = select(User).where(User.email == email)
        if exclude_id is not None:
            stmt = stmt.where(User.id != exclude_id)
        result = await self.session.execute(stmt)
        return result.scalars().first()
