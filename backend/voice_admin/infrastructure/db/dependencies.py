"""
Dependency Injection Providers for Voice Admin

Provides FastAPI dependencies for database sessions and repositories.
Every repository of a request shares the request's session.
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from voice_admin.infrastructure.db.database import get_session
from voice_admin.infrastructure.db.repositories import (
    ApiKeyRepository,
    CallSessionRepository,
    SubscriptionPlanRepository,
    TurnRepository,
    UserRepository,
    VoiceRepository,
)


# Type alias for session dependency
SessionDep = Annotated[AsyncSession, Depends(get_session)]


async def get_subscription_plan_repository(
    session: SessionDep,
) -> AsyncGenerator[SubscriptionPlanRepository, None]:
    """
    Dependency provider for SubscriptionPlanRepository.

    Usage:
        @router.get("/subscription-plans")
        async def list_plans(
            repo: SubscriptionPlanRepository = Depends(get_subscription_plan_repository)
        ):
            ...
    """
    yield SubscriptionPlanRepository(session)


async def get_user_repository(
    session: SessionDep,
) -> AsyncGenerator[UserRepository, None]:
    """Dependency provider for UserRepository."""
    yield UserRepository(session)


async def get_api_key_repository(
    session: SessionDep,
) -> AsyncGenerator[ApiKeyRepository, None]:
    """Dependency provider for ApiKeyRepository."""
    yield ApiKeyRepository(session)


async def get_voice_repository(
    session: SessionDep,
) -> AsyncGenerator[VoiceRepository, None]:
    """Dependency provider for VoiceRepository."""
    yield VoiceRepository(session)


async def get_call_session_repository(
    session: SessionDep,
) -> AsyncGenerator[CallSessionRepository, None]:
    """Dependency provider for CallSessionRepository."""
    yield CallSessionRepository(session)


async def get_turn_repository(
    session: SessionDep,
) -> AsyncGenerator[TurnRepository, None]:
    """Dependency provider for TurnRepository."""
    yield TurnRepository(session)


# Type aliases for repository dependencies
SubscriptionPlanRepoDep = Annotated[
    SubscriptionPlanRepository,
    Depends(get_subscription_plan_repository)
]
UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]
ApiKeyRepoDep = Annotated[ApiKeyRepository, Depends(get_api_key_repository)]
VoiceRepoDep = Annotated[VoiceRepository, Depends(get_voice_repository)]
CallSessionRepoDep = Annotated[
    CallSessionRepository,
    Depends(get_call_session_repository)
]
TurnRepoDep = Annotated[TurnRepository, Depends(get_turn_repository)]
