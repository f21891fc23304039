"""
SQLModel ORM Models for Voice Admin

Exports all database models for Alembic autogenerate and application use.
Import models here to register them with SQLModel.metadata.
"""

from voice_admin.infrastructure.db.models.base import (
    BaseModel,
    CreatedAtMixin,
    IntIdMixin,
)
from voice_admin.infrastructure.db.models.types import UTCDateTime
from voice_admin.infrastructure.db.models.subscription_plan import (
    SubscriptionPlan,
    SubscriptionPlanBase,
    SubscriptionPlanCreate,
    SubscriptionPlanRead,
)
from voice_admin.infrastructure.db.models.user import (
    User,
    UserCreate,
    UserUpdate,
    UserRead,
)
from voice_admin.infrastructure.db.models.api_key import (
    ApiKey,
    ApiKeyCreate,
    ApiKeyUpdate,
    ApiKeyRead,
)
from voice_admin.infrastructure.db.models.voice import (
    Voice,
    VoiceBase,
    VoiceCreate,
    VoiceRead,
)
from voice_admin.infrastructure.db.models.call_session import (
    CallSession,
    CallSessionCreate,
    CallSessionEnd,
    CallSessionRead,
)
from voice_admin.infrastructure.db.models.turn import (
    Turn,
    TurnBase,
    TurnCreate,
    TurnRead,
)


__all__ = [
    # Base
    "BaseModel",
    "CreatedAtMixin",
    "IntIdMixin",
    "UTCDateTime",
    # SubscriptionPlan
    "SubscriptionPlan",
    "SubscriptionPlanBase",
    "SubscriptionPlanCreate",
    "SubscriptionPlanRead",
    # User
    "User",
    "UserCreate",
    "UserUpdate",
    "UserRead",
    # ApiKey
    "ApiKey",
    "ApiKeyCreate",
    "ApiKeyUpdate",
    "ApiKeyRead",
    # Voice
    "Voice",
    "VoiceBase",
    "VoiceCreate",
    "VoiceRead",
    # CallSession
    "CallSession",
    "CallSessionCreate",
    "CallSessionEnd",
    "CallSessionRead",
    # Turn
    "Turn",
    "TurnBase",
    "TurnCreate",
    "TurnRead",
]
