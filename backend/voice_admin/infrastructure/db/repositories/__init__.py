"""
Repository Layer for Voice Admin

Exports all repository classes for dependency injection.
"""

from voice_admin.infrastructure.db.repositories.base_repository import (
    BaseRepository,
    IReadRepository,
    IWriteRepository,
)
from voice_admin.infrastructure.db.repositories.subscription_plan_repository import (
    SubscriptionPlanRepository,
)
from voice_admin.infrastructure.db.repositories.user_repository import (
    UserRepository,
)
from voice_admin.infrastructure.db.repositories.api_key_repository import (
    ApiKeyRepository,
)
from voice_admin.infrastructure.db.repositories.voice_repository import (
    VoiceRepository,
)
from voice_admin.infrastructure.db.repositories.call_session_repository import (
    CallSessionRepository,
)
from voice_admin.infrastructure.db.repositories.turn_repository import (
    TurnRepository,
)


__all__ = [
    # Base
    "BaseRepository",
    "IReadRepository",
    "IWriteRepository",
    # Repositories
    "SubscriptionPlanRepository",
    "UserRepository",
    "ApiKeyRepository",
    "VoiceRepository",
    "CallSessionRepository",
    "TurnRepository",
]
