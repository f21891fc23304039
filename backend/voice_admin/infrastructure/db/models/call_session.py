"""
CallSession SQLModel for Voice Admin

One row per Twilio call. ``end_time`` is null while the call is open
and is written exactly once when it ends.
"""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict
from sqlmodel import Field, SQLModel

from voice_admin.infrastructure.db.models.base import BaseModel
from voice_admin.infrastructure.db.models.types import UTCDateTime


class CallSession(BaseModel, table=True):
    """CallSession database table model."""

    __tablename__ = "call_sessions"

    twilio_call_id: str = Field(..., unique=True, index=True, nullable=False)
    user_id: int = Field(..., foreign_key="users.id", index=True, nullable=False)
    start_time: datetime = Field(..., sa_type=UTCDateTime, nullable=False)
    end_time: Optional[datetime] = Field(default=None, sa_type=UTCDateTime)

    @property
    def is_open(self) -> bool:
        return self.end_time is None


class CallSessionCreate(SQLModel):
    """Schema for opening a call session."""

    twilio_call_id: str = Field(..., min_length=1, max_length=64)
    user_id: int
    start_time: datetime


class CallSessionEnd(SQLModel):
    """Schema for ending a call session."""

    end_time: datetime


class CallSessionRead(SQLModel):
    id: int
    twilio_call_id: str
    user_id: int
    start_time: datetime
    end_time: Optional[datetime]
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
