"""
Database Infrastructure Package for Voice Admin

Exports database utilities and dependency providers.
"""

from voice_admin.infrastructure.db.database import (
    DatabaseManager,
    get_db_manager,
    get_session,
    get_session_context,
    init_db,
    close_db,
)

from voice_admin.infrastructure.db.dependencies import (
    SessionDep,
    get_subscription_plan_repository,
    get_user_repository,
    get_api_key_repository,
    get_voice_repository,
    get_call_session_repository,
    get_turn_repository,
    SubscriptionPlanRepoDep,
    UserRepoDep,
    ApiKeyRepoDep,
    VoiceRepoDep,
    CallSessionRepoDep,
    TurnRepoDep,
)


__all__ = [
    # Database management
    "DatabaseManager",
    "get_db_manager",
    "get_session",
    "get_session_context",
    "init_db",
    "close_db",
    # Dependencies
    "SessionDep",
    "get_subscription_plan_repository",
    "get_user_repository",
    "get_api_key_repository",
    "get_voice_repository",
    "get_call_session_repository",
    "get_turn_repository",
    "SubscriptionPlanRepoDep",
    "UserRepoDep",
    "ApiKeyRepoDep",
    "VoiceRepoDep",
    "CallSessionRepoDep",
    "TurnRepoDep",
]
