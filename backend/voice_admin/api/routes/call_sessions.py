"""
Call Session Routes

Open, end and list call sessions.
"""

from typing import List

from fastapi import APIRouter, status

from voice_admin.api.dependencies import CallSessionServiceDep
from voice_admin.infrastructure.db.models import (
    CallSessionCreate,
    CallSessionEnd,
    CallSessionRead,
)


router = APIRouter()


@router.post(
    "/call-sessions",
    response_model=CallSessionRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_call_session(request: CallSessionCreate, service: CallSessionServiceDep):
    """Open a session (404 unknown user, 409 duplicate Twilio call id)."""
    call_session = await service.create_call_session(request)
    return CallSessionRead.model_validate(call_session)


@router.post("/call-sessions/{call_session_id}/end", response_model=CallSessionRead)
async def end_call_session(
    call_session_id: int,
    request: CallSessionEnd,
    service: CallSessionServiceDep,
):
    """End an open session (409 if it has already ended)."""
    call_session = await service.end_call_session(call_session_id, request)
    return CallSessionRead.model_validate(call_session)


@router.get("/users/{user_id}/call-sessions", response_model=List[CallSessionRead])
async def list_call_sessions_by_user(user_id: int, service: CallSessionServiceDep):
    call_sessions = await service.list_call_sessions_by_user(user_id)
    return [CallSessionRead.model_validate(s) for s in call_sessions]
