"""
Turn Routes

Append turns to open call sessions and read a session's transcript.
"""

from typing import List

from fastapi import APIRouter, status

from voice_admin.api.dependencies import TurnServiceDep
from voice_admin.infrastructure.db.models import TurnCreate, TurnRead


router = APIRouter()


@router.post("/turns", response_model=TurnRead, status_code=status.HTTP_201_CREATED)
async def create_turn(request: TurnCreate, service: TurnServiceDep):
    """Append a turn (404 unknown session, 409 session ended)."""
    turn = await service.create_turn(request)
    return TurnRead.model_validate(turn)


@router.get("/call-sessions/{call_session_id}/turns", response_model=List[TurnRead])
async def list_turns_by_call_session(call_session_id: int, service: TurnServiceDep):
    """List a session's turns, earliest first."""
    turns = await service.list_turns_by_call_session(call_session_id)
    return [TurnRead.model_validate(turn) for turn in turns]
