"""
Test configuration and fixtures for Voice Admin.

Provides shared fixtures for unit and integration tests. Every test gets
its own in-memory SQLite database, so nothing leaks between tests.
"""

import pytest
from decimal import Decimal
from typing import AsyncGenerator

from httpx import ASGITransport, AsyncClient

from voice_admin.config.settings import Settings
from voice_admin.domain.services import (
    ApiKeyService,
    CallSessionService,
    SubscriptionPlanService,
    TurnService,
    UserService,
    VoiceService,
)
from voice_admin.infrastructure.db.database import DatabaseManager, get_session
from voice_admin.infrastructure.db.models import SubscriptionPlanCreate, UserCreate


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest.fixture
def test_settings() -> Settings:
    """Settings pointing at a private in-memory database."""
    return Settings(database_url="sqlite://", environment="testing")


@pytest.fixture
async def db_manager(test_settings) -> AsyncGenerator[DatabaseManager, None]:
    """Database manager with all tables created."""
    manager = DatabaseManager(test_settings)
    await manager.create_tables()
    yield manager
    await manager.drop_tables()
    await manager.close()


@pytest.fixture
async def db_session(db_manager):
    """A single session shared by the services under test."""
    async with db_manager.session_factory() as session:
        yield session


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def plan_service(db_session) -> SubscriptionPlanService:
    return SubscriptionPlanService.from_session(db_session)


@pytest.fixture
def user_service(db_session) -> UserService:
    return UserService.from_session(db_session)


@pytest.fixture
def api_key_service(db_session) -> ApiKeyService:
    return ApiKeyService.from_session(db_session)


@pytest.fixture
def voice_service(db_session) -> VoiceService:
    return VoiceService.from_session(db_session)


@pytest.fixture
def call_session_service(db_session) -> CallSessionService:
    return CallSessionService.from_session(db_session)


@pytest.fixture
def turn_service(db_session) -> TurnService:
    return TurnService.from_session(db_session)


@pytest.fixture
async def basic_plan(plan_service):
    """Plan allowing two active API keys."""
    return await plan_service.create_plan(
        SubscriptionPlanCreate(
            name="Basic",
            price=Decimal("9.99"),
            max_api_keys=2,
            max_monthly_calls=500,
        )
    )


@pytest.fixture
async def basic_user(user_service, basic_plan):
    """User subscribed to the Basic plan."""
    return await user_service.create_user(
        UserCreate(
            email="ada@example.com",
            name="Ada",
            subscription_plan_id=basic_plan.id,
        )
    )


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def app(db_manager):
    """FastAPI application bound to the test database."""
    from voice_admin.main import app

    async def override_get_session():
        async with db_manager.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_session] = override_get_session
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(app) -> AsyncGenerator[AsyncClient, None]:
    """Get async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# =============================================================================
# Sample Data Fixtures
# =============================================================================

@pytest.fixture
def sample_plan_payload():
    """Plan request body as a client would send it."""
    return {
        "name": "Pro",
        "description": "For growing teams",
        "price": 9.99,
        "max_api_keys": 2,
        "max_monthly_calls": 1000,
    }


@pytest.fixture
def sample_user_payload():
    return {
        "email": "grace@example.com",
        "name": "Grace",
    }
