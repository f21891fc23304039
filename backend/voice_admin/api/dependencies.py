"""
API Dependencies

FastAPI dependency injection for the domain services.
Each provider composes a service from request-scoped repositories, so
tests can override ``get_session`` (or any repository provider) without
touching process-wide state.
"""

from typing import Annotated

from fastapi import Depends

from voice_admin.domain.services import (
    ApiKeyService,
    CallSessionService,
    SubscriptionPlanService,
    TurnService,
    UserService,
    VoiceService,
)
from voice_admin.infrastructure.db.dependencies import (
    SessionDep,
    SubscriptionPlanRepoDep,
    UserRepoDep,
    ApiKeyRepoDep,
    VoiceRepoDep,
    CallSessionRepoDep,
    TurnRepoDep,
)
from voice_admin.infrastructure.services.analytics_service import AnalyticsService


def get_subscription_plan_service(plans: SubscriptionPlanRepoDep) -> SubscriptionPlanService:
    return SubscriptionPlanService(plans)


def get_user_service(users: UserRepoDep, plans: SubscriptionPlanRepoDep) -> UserService:
    return UserService(users, plans)


def get_api_key_service(
    api_keys: ApiKeyRepoDep,
    users: UserRepoDep,
    plans: SubscriptionPlanRepoDep,
) -> ApiKeyService:
    return ApiKeyService(api_keys, users, plans)


def get_voice_service(voices: VoiceRepoDep) -> VoiceService:
    return VoiceService(voices)


def get_call_session_service(
    call_sessions: CallSessionRepoDep,
    users: UserRepoDep,
) -> CallSessionService:
    return CallSessionService(call_sessions, users)


def get_turn_service(turns: TurnRepoDep, call_sessions: CallSessionRepoDep) -> TurnService:
    return TurnService(turns, call_sessions)


def get_analytics_service(session: SessionDep) -> AnalyticsService:
    return AnalyticsService(session)


SubscriptionPlanServiceDep = Annotated[
    SubscriptionPlanService,
    Depends(get_subscription_plan_service)
]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
ApiKeyServiceDep = Annotated[ApiKeyService, Depends(get_api_key_service)]
VoiceServiceDep = Annotated[VoiceService, Depends(get_voice_service)]
CallSessionServiceDep = Annotated[CallSessionService, Depends(get_call_session_service)]
TurnServiceDep = Annotated[TurnService, Depends(get_turn_service)]
AnalyticsServiceDep = Annotated[AnalyticsService, Depends(get_analytics_service)]
