"""
Unit tests for CallSessionService and TurnService.

A call session moves open -> ended exactly once, and turns may only be
recorded while it is open.
"""

import pytest
from datetime import datetime, timedelta, timezone

from voice_admin.domain.models import TurnRole
from voice_admin.infrastructure.db.models import (
    CallSessionCreate,
    CallSessionEnd,
    Turn,
    TurnCreate,
    UserCreate,
)
from voice_admin.infrastructure.db.repositories import TurnRepository
from voice_admin.infrastructure.exceptions import (
    ConflictError,
    InvalidStateError,
    NotFoundError,
)


START = datetime(2024, 6, 1, 9, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
async def open_session(call_session_service, basic_user):
    """Open call session for the Basic user."""
    return await call_session_service.create_call_session(
        CallSessionCreate(twilio_call_id="CA-open", user_id=basic_user.id, start_time=START)
    )


class TestCallSessionLifecycle:
    """Tests for opening and ending sessions."""

    @pytest.mark.asyncio
    async def test_created_session_is_open(self, open_session, basic_user):
        assert open_session.id is not None
        assert open_session.user_id == basic_user.id
        assert open_session.start_time == START
        assert open_session.end_time is None
        assert open_session.is_open

    @pytest.mark.asyncio
    async def test_aware_start_time_stored_as_utc(self, call_session_service, basic_user):
        start = datetime(2024, 6, 1, 11, 0, tzinfo=timezone(timedelta(hours=2)))

        session = await call_session_service.create_call_session(
            CallSessionCreate(twilio_call_id="CA-tz", user_id=basic_user.id, start_time=start)
        )

        assert session.start_time == START
        assert session.start_time.utcoffset() == timedelta(0)

    @pytest.mark.asyncio
    async def test_naive_start_time_taken_as_utc(self, call_session_service, basic_user):
        session = await call_session_service.create_call_session(
            CallSessionCreate(
                twilio_call_id="CA-naive",
                user_id=basic_user.id,
                start_time=datetime(2024, 6, 1, 9, 0),
            )
        )

        assert session.start_time == START

    @pytest.mark.asyncio
    async def test_unknown_user(self, call_session_service):
        with pytest.raises(NotFoundError):
            await call_session_service.create_call_session(
                CallSessionCreate(twilio_call_id="CA-x", user_id=999, start_time=START)
            )

    @pytest.mark.asyncio
    async def test_duplicate_twilio_id_conflicts(self, call_session_service, open_session):
        with pytest.raises(ConflictError) as exc_info:
            await call_session_service.create_call_session(
                CallSessionCreate(
                    twilio_call_id="CA-open",
                    user_id=open_session.user_id,
                    start_time=START,
                )
            )

        assert exc_info.value.message == (
            "Call session with Twilio call ID 'CA-open' already exists"
        )

    @pytest.mark.asyncio
    async def test_end_sets_end_time(self, call_session_service, open_session):
        end = START + timedelta(minutes=5)

        ended = await call_session_service.end_call_session(
            open_session.id, CallSessionEnd(end_time=end)
        )

        assert ended.end_time == end
        assert not ended.is_open

    @pytest.mark.asyncio
    async def test_second_end_rejected(self, call_session_service, open_session):
        first_end = START + timedelta(minutes=5)
        await call_session_service.end_call_session(
            open_session.id, CallSessionEnd(end_time=first_end)
        )

        with pytest.raises(InvalidStateError) as exc_info:
            await call_session_service.end_call_session(
                open_session.id, CallSessionEnd(end_time=START + timedelta(minutes=9))
            )

        assert exc_info.value.message == f"Call session {open_session.id} has already ended"
        sessions = await call_session_service.list_call_sessions_by_user(open_session.user_id)
        assert sessions[0].end_time == first_end

    @pytest.mark.asyncio
    async def test_end_unknown_session(self, call_session_service):
        with pytest.raises(NotFoundError) as exc_info:
            await call_session_service.end_call_session(55, CallSessionEnd(end_time=START))

        assert exc_info.value.message == "Call session with id 55 not found"

    @pytest.mark.asyncio
    async def test_list_by_user_includes_open_and_ended(
        self, call_session_service, user_service, open_session
    ):
        other = await user_service.create_user(UserCreate(email="o@example.com", name="O"))
        await call_session_service.create_call_session(
            CallSessionCreate(twilio_call_id="CA-other", user_id=other.id, start_time=START)
        )
        second = await call_session_service.create_call_session(
            CallSessionCreate(
                twilio_call_id="CA-second",
                user_id=open_session.user_id,
                start_time=START,
            )
        )
        await call_session_service.end_call_session(second.id, CallSessionEnd(end_time=START))

        sessions = await call_session_service.list_call_sessions_by_user(open_session.user_id)

        assert {s.twilio_call_id for s in sessions} == {"CA-open", "CA-second"}

    @pytest.mark.asyncio
    async def test_list_for_unknown_user(self, call_session_service):
        with pytest.raises(NotFoundError):
            await call_session_service.list_call_sessions_by_user(321)


class TestTurns:
    """Tests for TurnService."""

    @pytest.mark.asyncio
    async def test_turns_listed_in_creation_order(self, turn_service, open_session):
        roles = [TurnRole.USER, TurnRole.ASSISTANT, TurnRole.TOOL]
        for i, role in enumerate(roles):
            await turn_service.create_turn(
                TurnCreate(call_session_id=open_session.id, role=role, text=f"turn {i}")
            )

        turns = await turn_service.list_turns_by_call_session(open_session.id)

        assert [t.role for t in turns] == roles
        assert [t.text for t in turns] == ["turn 0", "turn 1", "turn 2"]

    @pytest.mark.asyncio
    async def test_identical_timestamps_listed_in_insertion_order(
        self, turn_service, db_session, open_session
    ):
        """Turns sharing one created_at fall back to id order."""
        repo = TurnRepository(db_session)
        stamp = START + timedelta(seconds=30)
        for i in range(4):
            await repo.add(
                Turn(
                    call_session_id=open_session.id,
                    role=TurnRole.USER,
                    text=f"same {i}",
                    created_at=stamp,
                )
            )

        turns = await turn_service.list_turns_by_call_session(open_session.id)

        assert [t.text for t in turns] == ["same 0", "same 1", "same 2", "same 3"]
        assert [t.id for t in turns] == sorted(t.id for t in turns)
        assert {t.created_at for t in turns} == {stamp}

    @pytest.mark.asyncio
    async def test_text_and_latency_optional(self, turn_service, open_session):
        turn = await turn_service.create_turn(
            TurnCreate(call_session_id=open_session.id, role=TurnRole.TOOL)
        )

        assert turn.text is None
        assert turn.latency_ms is None
        assert turn.created_at is not None

    @pytest.mark.asyncio
    async def test_turn_after_end_rejected(
        self, turn_service, call_session_service, open_session
    ):
        await turn_service.create_turn(
            TurnCreate(call_session_id=open_session.id, role=TurnRole.USER, text="hi")
        )
        await call_session_service.end_call_session(
            open_session.id, CallSessionEnd(end_time=START + timedelta(minutes=1))
        )

        with pytest.raises(InvalidStateError) as exc_info:
            await turn_service.create_turn(
                TurnCreate(call_session_id=open_session.id, role=TurnRole.USER, text="late")
            )

        assert exc_info.value.message == (
            f"Cannot add turn to ended call session {open_session.id}"
        )
        turns = await turn_service.list_turns_by_call_session(open_session.id)
        assert len(turns) == 1

    @pytest.mark.asyncio
    async def test_unknown_session(self, turn_service):
        with pytest.raises(NotFoundError):
            await turn_service.create_turn(
                TurnCreate(call_session_id=404, role=TurnRole.USER, text="hi")
            )

    @pytest.mark.asyncio
    async def test_list_unknown_session(self, turn_service):
        with pytest.raises(NotFoundError):
            await turn_service.list_turns_by_call_session(404)
