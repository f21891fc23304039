# API Routes Module
from voice_admin.api.routes import (
    users,
    subscription_plans,
    api_keys,
    voices,
    call_sessions,
    turns,
    analytics,
)

__all__ = [
    "users",
    "subscription_plans",
    "api_keys",
    "voices",
    "call_sessions",
    "turns",
    "analytics",
]
