"""
Unit tests for AnalyticsService dashboard statistics.
"""

import pytest

from voice_admin.infrastructure.db.models import (
    SubscriptionPlanCreate,
    UserCreate,
    VoiceCreate,
)
from voice_admin.infrastructure.services.analytics_service import AnalyticsService


class TestDashboardStats:
    """Tests for AnalyticsService.get_dashboard_stats."""

    @pytest.mark.asyncio
    async def test_empty_database(self, db_session):
        stats = await AnalyticsService(db_session).get_dashboard_stats()

        assert stats.total_users == 0
        assert stats.users_with_plan == 0
        assert stats.total_plans == 0
        assert stats.total_voices == 0
        assert stats.users_per_plan == {}

    @pytest.mark.asyncio
    async def test_counts(
        self, db_session, plan_service, user_service, voice_service, basic_user, basic_plan
    ):
        await plan_service.create_plan(SubscriptionPlanCreate(name="Unused", price=5))
        await user_service.create_user(UserCreate(email="np@example.com", name="No Plan"))
        await user_service.create_user(
            UserCreate(email="b2@example.com", name="B2", subscription_plan_id=basic_plan.id)
        )
        await voice_service.create_voice(VoiceCreate(name="Aria", identifier="aria"))

        stats = await AnalyticsService(db_session).get_dashboard_stats()

        assert stats.total_users == 3
        assert stats.users_with_plan == 2
        assert stats.total_plans == 2
        assert stats.total_voices == 1
        assert stats.users_per_plan == {"Basic": 2, "Unused": 0}
