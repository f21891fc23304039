"""
Unit tests for Dependency Injection providers.

Validates that:
- Service providers compose services from the repositories they are given
- Services hold no process-wide state, so two requests get two instances
"""

from unittest.mock import MagicMock

from voice_admin.api.dependencies import (
    get_analytics_service,
    get_api_key_service,
    get_call_session_service,
    get_turn_service,
    get_user_service,
)
from voice_admin.domain.services import (
    ApiKeyService,
    CallSessionService,
    TurnService,
    UserService,
)
from voice_admin.infrastructure.services.analytics_service import AnalyticsService


class TestServiceProviders:
    """Tests for the service provider functions."""

    def test_user_service_uses_given_repositories(self):
        users, plans = MagicMock(), MagicMock()

        service = get_user_service(users, plans)

        assert isinstance(service, UserService)
        assert service._users is users
        assert service._plans is plans

    def test_api_key_service_uses_given_repositories(self):
        api_keys, users, plans = MagicMock(), MagicMock(), MagicMock()

        service = get_api_key_service(api_keys, users, plans)

        assert isinstance(service, ApiKeyService)
        assert service._api_keys is api_keys

    def test_call_session_and_turn_services(self):
        call_sessions, users, turns = MagicMock(), MagicMock(), MagicMock()

        assert isinstance(get_call_session_service(call_sessions, users), CallSessionService)
        assert isinstance(get_turn_service(turns, call_sessions), TurnService)

    def test_no_singletons(self):
        """Each call builds a fresh service."""
        users, plans = MagicMock(), MagicMock()
        assert get_user_service(users, plans) is not get_user_service(users, plans)

    def test_analytics_service_takes_session(self):
        session = MagicMock()
        assert isinstance(get_analytics_service(session), AnalyticsService)
