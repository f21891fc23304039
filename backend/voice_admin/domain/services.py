"""
Voice Admin Domain Services

Business rules for the six back-office components:
- SubscriptionPlanService: plan registry with unique names
- UserService: user directory with plan and email checks
- ApiKeyService: per-user keys bounded by the plan quota
- VoiceService: voice library with unique identifiers
- CallSessionService: call lifecycle (open -> ended, exactly once)
- TurnService: conversation turns, only while the session is open

Each service receives its repositories at construction. A request runs in
a single session, so a service call is one transaction.
"""

import logging
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from voice_admin.domain.models import to_money, to_utc, utc_now
from voice_admin.infrastructure.db.models import (
    ApiKey,
    ApiKeyCreate,
    ApiKeyUpdate,
    CallSession,
    CallSessionCreate,
    CallSessionEnd,
    SubscriptionPlan,
    SubscriptionPlanCreate,
    Turn,
    TurnCreate,
    User,
    UserCreate,
    UserUpdate,
    Voice,
    VoiceCreate,
)
from voice_admin.infrastructure.db.repositories import (
    ApiKeyRepository,
    CallSessionRepository,
    SubscriptionPlanRepository,
    TurnRepository,
    UserRepository,
    VoiceRepository,
)
from voice_admin.infrastructure.exceptions import (
    ConflictError,
    InvalidStateError,
    NotFoundError,
    QuotaExceededError,
)


logger = logging.getLogger(__name__)


def _user_not_found(user_id: int, operation: str) -> NotFoundError:
    logger.warning(f"User {user_id} not found ({operation})")
    return NotFoundError(
        f"User with id {user_id} not found",
        operation=operation,
        table="users"
    )


def _call_session_not_found(call_session_id: int, operation: str) -> NotFoundError:
    logger.warning(f"Call session {call_session_id} not found ({operation})")
    return NotFoundError(
        f"Call session with id {call_session_id} not found",
        operation=operation,
        table="call_sessions"
    )


# =============================================================================
# Subscription Plan Registry
# =============================================================================

class SubscriptionPlanService:
    """Create and list pricing tiers."""

    def __init__(self, plans: SubscriptionPlanRepository):
        self._plans = plans

    @classmethod
    def from_session(cls, session: AsyncSession) -> "SubscriptionPlanService":
        return cls(SubscriptionPlanRepository(session))

    async def create_plan(self, data: SubscriptionPlanCreate) -> SubscriptionPlan:
        """
        Create a subscription plan.

        Args:
            data: Plan fields; absent description/limits stay null

        Returns:
            The persisted plan with a two-place Decimal price

        Raises:
            ConflictError: If a plan with the same name exists
        """
        if await self._plans.get_by_name(data.name):
            logger.warning(f"Duplicate subscription plan name: {data.name}")
            raise ConflictError(
                f"Subscription plan with name '{data.name}' already exists",
                operation="insert",
                table="subscription_plans"
            )

        plan = SubscriptionPlan(
            name=data.name,
            description=data.description,
            price=to_money(data.price),
            max_api_keys=data.max_api_keys,
            max_monthly_calls=data.max_monthly_calls,
        )
        plan = await self._plans.add(plan)
        logger.info(f"Created subscription plan {plan.id} ({plan.name})")
        return plan

    async def list_plans(self) -> List[SubscriptionPlan]:
        """All plans in insertion order."""
        return await self._plans.get_all()


# =============================================================================
# User Directory
# =============================================================================

class UserService:
    """Create, list and update user accounts."""

    def __init__(self, users: UserRepository, plans: SubscriptionPlanRepository):
        self._users = users
        self._plans = plans

    @classmethod
    def from_session(cls, session: AsyncSession) -> "UserService":
        return cls(UserRepository(session), SubscriptionPlanRepository(session))

    async def _ensure_plan_exists(self, plan_id: int, operation: str) -> None:
        if not await self._plans.exists(plan_id):
            logger.warning(f"Subscription plan {plan_id} does not exist ({operation})")
            raise NotFoundError(
                f"Subscription plan with id {plan_id} does not exist",
                operation=operation,
                table="subscription_plans"
            )

    async def _ensure_email_free(self, email: str, operation: str, exclude_id=None) -> None:
        if await self._users.get_by_email(email, exclude_id=exclude_id):
            logger.warning(f"Email already in use: {email}")
            raise ConflictError(
                f"Email {email} is already in use",
                operation=operation,
                table="users"
            )

    async def create_user(self, data: UserCreate) -> User:
        """
        Create a user.

        Args:
            data: Email, name and optional plan id

        Returns:
            The persisted user; created_at equals updated_at

        Raises:
            NotFoundError: If subscription_plan_id references no plan
            ConflictError: If the email is already registered
        """
        if data.subscription_plan_id is not None:
            await self._ensure_plan_exists(data.subscription_plan_id, "insert")
        await self._ensure_email_free(data.email, "insert")

        now = utc_now()
        user = User(
            email=data.email,
            name=data.name,
            subscription_plan_id=data.subscription_plan_id,
            created_at=now,
            updated_at=now,
        )
        user = await self._users.add(user)
        logger.info(f"Created user {user.id}")
        return user

    async def list_users(self) -> List[User]:
        """All users with their raw subscription_plan_id."""
        return await self._users.get_all()

    async def update_user(self, user_id: int, data: UserUpdate) -> User:
        """
        Partially update a user.

        Only fields present in ``data`` change. ``updated_at`` is refreshed
        on every successful call, including one that sets no fields.

        Raises:
            NotFoundError: If the user or a newly assigned plan does not exist
            ConflictError: If the new email belongs to another user
        """
        if not await self._users.exists(user_id):
            raise _user_not_found(user_id, "update")

        if "email" in data.model_fields_set:
            await self._ensure_email_free(data.email, "update", exclude_id=user_id)
        if data.subscription_plan_id is not None:
            await self._ensure_plan_exists(data.subscription_plan_id, "update")

        user = await self._users.update(user_id, data, updated_at=utc_now())
        logger.info(f"Updated user {user_id}: {sorted(data.model_fields_set)}")
        return user


# =============================================================================
# API Key Manager
# =============================================================================

class ApiKeyService:
    """Create, list and update API keys under the plan quota."""

    def __init__(
        self,
        api_keys: ApiKeyRepository,
        users: UserRepository,
        plans: SubscriptionPlanRepository,
    ):
        self._api_keys = api_keys
        self._users = users
        self._plans = plans

    @classmethod
    def from_session(cls, session: AsyncSession) -> "ApiKeyService":
        return cls(
            ApiKeyRepository(session),
            UserRepository(session),
            SubscriptionPlanRepository(session),
        )

    async def create_api_key(self, data: ApiKeyCreate) -> ApiKey:
        """
        Create an active API key for a user.

        The owning user row is locked first so concurrent creates for the
        same user count active keys one after another.

        Raises:
            NotFoundError: If the user does not exist
            QuotaExceededError: If the user's active keys already reach
                the plan's max_api_keys
        """
        user = await self._users.get_for_update(data.user_id)
        if user is None:
            raise _user_not_found(data.user_id, "insert")

        if user.subscription_plan_id is not None:
            plan = await self._plans.get_by_id(user.subscription_plan_id)
            if plan is None:
                # Dangling plan reference: no limit applies
                logger.warning(
                    f"User {user.id} references missing plan "
                    f"{user.subscription_plan_id}; skipping API key quota"
                )
            elif plan.max_api_keys is not None:
                active = await self._api_keys.count_active_for_user(user.id)
                if active >= plan.max_api_keys:
                    logger.warning(
                        f"API key quota hit for user {user.id}: "
                        f"{active}/{plan.max_api_keys}"
                    )
                    raise QuotaExceededError(
                        f"API key limit reached for user {user.id}. "
                        f"Maximum allowed: {plan.max_api_keys}",
                        limit=plan.max_api_keys,
                        current=active,
                    )

        api_key = ApiKey(
            user_id=data.user_id,
            key_hash=data.key_hash,
            name=data.name,
            is_active=True,
            last_used_at=None,
        )
        api_key = await self._api_keys.add(api_key)
        logger.info(f"Created API key {api_key.id} for user {api_key.user_id}")
        return api_key

    async def list_api_keys_by_user(self, user_id: int) -> List[ApiKey]:
        """Active and inactive keys for an existing user."""
        if not await self._users.exists(user_id):
            raise _user_not_found(user_id, "select")
        return await self._api_keys.get_by_user(user_id)

    async def update_api_key(self, api_key_id: int, data: ApiKeyUpdate) -> ApiKey:
        """
        Rename and/or (de)activate a key.

        key_hash, user_id, created_at and last_used_at are never touched.
        """
        api_key = await self._api_keys.update(api_key_id, data)
        if api_key is None:
            logger.warning(f"API key {api_key_id} not found (update)")
            raise NotFoundError(
                f"API key with id {api_key_id} not found",
                operation="update",
                table="api_keys"
            )
        logger.info(f"Updated API key {api_key_id}: {sorted(data.model_fields_set)}")
        return api_key


# =============================================================================
# Voice Library
# =============================================================================

class VoiceService:

    def __init__(self, voices: VoiceRepository):
        self._voices = voices

    @classmethod
    def from_session(cls, session: AsyncSession) -> "VoiceService":
        return cls(VoiceRepository(session))

    async def create_voice(self, data: VoiceCreate) -> Voice:
        """Register a voice; fails with ConflictError on a duplicate identifier."""
        if await self._voices.get_by_identifier(data.identifier):
            logger.warning(f"Duplicate voice identifier: {data.identifier}")
            raise ConflictError(
                f"Voice with identifier '{data.identifier}' already exists",
                operation="insert",
                table="voices"
            )
        voice = await self._voices.create(data)
        logger.info(f"Created voice {voice.id} ({voice.identifier})")
        return voice

    async def list_voices(self) -> List[Voice]:
        """All voices ordered by name."""
        return await self._voices.get_all()


# =============================================================================
# Call Session Tracker
# =============================================================================

class CallSessionService:
    """Open, end and list call sessions."""

    def __init__(self, call_sessions: CallSessionRepository, users: UserRepository):
        self._call_sessions = call_sessions
        self._users = users

    @classmethod
    def from_session(cls, session: AsyncSession) -> "CallSessionService":
        return cls(CallSessionRepository(session), UserRepository(session))

    async def create_call_session(self, data: CallSessionCreate) -> CallSession:
        """
        Open a call session for a user.

        Raises:
            NotFoundError: If the user does not exist
            ConflictError: If the Twilio call id is already recorded
        """
        if not await self._users.exists(data.user_id):
            raise _user_not_found(data.user_id, "insert")

        if await self._call_sessions.get_by_twilio_call_id(data.twilio_call_id):
            logger.warning(f"Duplicate Twilio call id: {data.twilio_call_id}")
            raise ConflictError(
                f"Call session with Twilio call ID '{data.twilio_call_id}' already exists",
                operation="insert",
                table="call_sessions"
            )

        call_session = CallSession(
            twilio_call_id=data.twilio_call_id,
            user_id=data.user_id,
            start_time=to_utc(data.start_time),
            end_time=None,
        )
        call_session = await self._call_sessions.add(call_session)
        logger.info(
            f"Opened call session {call_session.id} "
            f"({call_session.twilio_call_id}) for user {call_session.user_id}"
        )
        return call_session

    async def end_call_session(self, call_session_id: int, data: CallSessionEnd) -> CallSession:
        """
        Set end_time on an open session.

        Raises:
            NotFoundError: If the session does not exist
            InvalidStateError: If the session has already ended, whatever
                end_time is supplied
        """
        call_session = await self._call_sessions.get_for_update(call_session_id)
        if call_session is None:
            raise _call_session_not_found(call_session_id, "update")

        if not call_session.is_open:
            logger.warning(f"Call session {call_session_id} already ended")
            raise InvalidStateError(
                f"Call session {call_session_id} has already ended",
                entity="call_session",
                entity_id=call_session_id,
            )

        call_session = await self._call_sessions.update(
            call_session_id,
            data,
            end_time=to_utc(data.end_time),
        )
        logger.info(f"Ended call session {call_session_id}")
        return call_session

    async def list_call_sessions_by_user(self, user_id: int) -> List[CallSession]:
        """Every session for an existing user, open or ended."""
        if not await self._users.exists(user_id):
            raise _user_not_found(user_id, "select")
        return await self._call_sessions.get_by_user(user_id)


# =============================================================================
# Turn Recorder
# =============================================================================

class TurnService:
    """Append and list conversation turns."""

    def __init__(self, turns: TurnRepository, call_sessions: CallSessionRepository):
        self._turns = turns
        self._call_sessions = call_sessions

    @classmethod
    def from_session(cls, session: AsyncSession) -> "TurnService":
        return cls(TurnRepository(session), CallSessionRepository(session))

    async def create_turn(self, data: TurnCreate) -> Turn:
        """
        Append a turn to an open call session.

        The session row is locked so a concurrent end waits for the insert.

        Raises:
            NotFoundError: If the call session does not exist
            InvalidStateError: If the call session has ended
        """
        call_session = await self._call_sessions.get_for_update(data.call_session_id)
        if call_session is None:
            raise _call_session_not_found(data.call_session_id, "insert")

        if not call_session.is_open:
            logger.warning(f"Turn rejected: call session {call_session.id} has ended")
            raise InvalidStateError(
                f"Cannot add turn to ended call session {call_session.id}",
                entity="call_session",
                entity_id=call_session.id,
            )

        turn = Turn(
            call_session_id=data.call_session_id,
            role=data.role,
            text=data.text,
            latency_ms=data.latency_ms,
        )
        turn = await self._turns.add(turn)
        logger.debug(f"Recorded {turn.role.value} turn {turn.id} in session {turn.call_session_id}")
        return turn

    async def list_turns_by_call_session(self, call_session_id: int) -> List[Turn]:
        """Turns of an existing session, earliest first."""
        if not await self._call_sessions.exists(call_session_id):
            raise _call_session_not_found(call_session_id, "select")
        return await self._turns.get_by_call_session(call_session_id)
