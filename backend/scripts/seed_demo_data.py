#!/usr/bin/env python3
"""
Seed script to populate a development database with demo data.

Creates one plan, two voices, one user on that plan, an API key and an
open call session with a couple of turns. Anything that already exists
(matched by its unique key) is left alone.

Run: python scripts/seed_demo_data.py
"""

import asyncio
import hashlib
import logging
import sys
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from voice_admin.domain.models import TurnRole
from voice_admin.domain.services import (
    ApiKeyService,
    CallSessionService,
    SubscriptionPlanService,
    TurnService,
    UserService,
    VoiceService,
)
from voice_admin.infrastructure.db.database import get_db_manager, get_session_context
from voice_admin.infrastructure.db.models import (
    ApiKeyCreate,
    CallSessionCreate,
    SubscriptionPlanCreate,
    TurnCreate,
    UserCreate,
    VoiceCreate,
)
from voice_admin.infrastructure.db.repositories import (
    CallSessionRepository,
    SubscriptionPlanRepository,
    UserRepository,
    VoiceRepository,
)


logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
logger = logging.getLogger("seed_demo_data")


# ============== DEMO DATA ==============

DEMO_PLAN = SubscriptionPlanCreate(
    name="Starter",
    description="Two API keys and 1,000 calls a month",
    price=Decimal("9.99"),
    max_api_keys=2,
    max_monthly_calls=1000,
)

DEMO_VOICES = [
    VoiceCreate(name="Aria", identifier="aria-en-us", description="Warm US English"),
    VoiceCreate(name="Kai", identifier="kai-en-gb", description="Neutral UK English"),
]

DEMO_USER_EMAIL = "demo@example.com"
DEMO_CALL_ID = "CA00000000000000000000000000000001"


async def seed() -> None:
    await get_db_manager().create_tables()

    async with get_session_context() as session:
        plan = await SubscriptionPlanRepository(session).get_by_name(DEMO_PLAN.name)
        if plan is None:
            plan = await SubscriptionPlanService.from_session(session).create_plan(DEMO_PLAN)

        voice_repo = VoiceRepository(session)
        voice_service = VoiceService(voice_repo)
        for voice in DEMO_VOICES:
            if await voice_repo.get_by_identifier(voice.identifier) is None:
                await voice_service.create_voice(voice)

        user = await UserRepository(session).get_by_email(DEMO_USER_EMAIL)
        if user is None:
            user = await UserService.from_session(session).create_user(
                UserCreate(
                    email=DEMO_USER_EMAIL,
                    name="Demo User",
                    subscription_plan_id=plan.id,
                )
            )
            await ApiKeyService.from_session(session).create_api_key(
                ApiKeyCreate(
                    user_id=user.id,
                    key_hash=hashlib.sha256(b"demo-key").hexdigest(),
                    name="Demo key",
                )
            )

        if await CallSessionRepository(session).get_by_twilio_call_id(DEMO_CALL_ID) is None:
            call_session = await CallSessionService.from_session(session).create_call_session(
                CallSessionCreate(
                    twilio_call_id=DEMO_CALL_ID,
                    user_id=user.id,
                    start_time=datetime.now(timezone.utc),
                )
            )
            turns = TurnService.from_session(session)
            await turns.create_turn(
                TurnCreate(
                    call_session_id=call_session.id,
                    role=TurnRole.USER,
                    text="Hi, I'd like to check my order.",
                )
            )
            await turns.create_turn(
                TurnCreate(
                    call_session_id=call_session.id,
                    role=TurnRole.ASSISTANT,
                    text="Sure, what's the order number?",
                    latency_ms=420,
                )
            )

    await get_db_manager().close()
    logger.info("Demo data seeded")


if __name__ == "__main__":
    asyncio.run(seed())
