"""
Unit tests for the subscription plan registry and the voice library.

Both are simple registries keyed by a unique natural key.
"""

import pytest
from decimal import Decimal

from voice_admin.infrastructure.db.models import SubscriptionPlanCreate, VoiceCreate
from voice_admin.infrastructure.exceptions import ConflictError


class TestSubscriptionPlanService:
    """Tests for SubscriptionPlanService."""

    @pytest.mark.asyncio
    async def test_create_plan_round_trips_price(self, plan_service):
        """A 9.99 price comes back exactly as 9.99."""
        plan = await plan_service.create_plan(
            SubscriptionPlanCreate(name="Starter", price=9.99, max_api_keys=3)
        )

        assert plan.id is not None
        assert plan.price == Decimal("9.99")
        assert plan.max_api_keys == 3
        assert plan.max_monthly_calls is None
        assert plan.created_at is not None

    @pytest.mark.asyncio
    async def test_duplicate_name_conflicts(self, plan_service):
        await plan_service.create_plan(SubscriptionPlanCreate(name="Pro", price=20))

        with pytest.raises(ConflictError) as exc_info:
            await plan_service.create_plan(SubscriptionPlanCreate(name="Pro", price=30))

        assert exc_info.value.message == "Subscription plan with name 'Pro' already exists"

    @pytest.mark.asyncio
    async def test_list_plans_in_insertion_order(self, plan_service):
        for name in ("Zeta", "Alpha", "Mid"):
            await plan_service.create_plan(SubscriptionPlanCreate(name=name, price=1))

        plans = await plan_service.list_plans()

        assert [p.name for p in plans] == ["Zeta", "Alpha", "Mid"]

    @pytest.mark.asyncio
    async def test_list_plans_empty(self, plan_service):
        assert await plan_service.list_plans() == []


class TestVoiceService:
    """Tests for VoiceService."""

    @pytest.mark.asyncio
    async def test_create_voice(self, voice_service):
        voice = await voice_service.create_voice(
            VoiceCreate(name="Aria", identifier="aria-en-us", description="Warm")
        )

        assert voice.id is not None
        assert voice.identifier == "aria-en-us"
        assert voice.description == "Warm"

    @pytest.mark.asyncio
    async def test_duplicate_identifier_conflicts(self, voice_service):
        await voice_service.create_voice(VoiceCreate(name="Aria", identifier="aria"))

        with pytest.raises(ConflictError) as exc_info:
            await voice_service.create_voice(VoiceCreate(name="Other", identifier="aria"))

        assert exc_info.value.message == "Voice with identifier 'aria' already exists"

    @pytest.mark.asyncio
    async def test_duplicate_name_allowed(self, voice_service):
        """Only the identifier is unique."""
        await voice_service.create_voice(VoiceCreate(name="Aria", identifier="aria-1"))
        await voice_service.create_voice(VoiceCreate(name="Aria", identifier="aria-2"))

        assert len(await voice_service.list_voices()) == 2

    @pytest.mark.asyncio
    async def test_list_voices_ordered_by_name(self, voice_service):
        for name, identifier in (("Kai", "kai"), ("Aria", "aria"), ("Maya", "maya")):
            await voice_service.create_voice(VoiceCreate(name=name, identifier=identifier))

        voices = await voice_service.list_voices()

        assert [v.name for v in voices] == ["Aria", "Kai", "Maya"]
