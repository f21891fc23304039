"""
Turn SQLModel for Voice Admin

Conversation turns recorded inside a call session.
Follows the same base/table/create/read split as the other models.
"""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict
from sqlalchemy import Column, Enum as SAEnum
from sqlmodel import Field, SQLModel

from voice_admin.domain.models import TurnRole
from voice_admin.infrastructure.db.models.base import BaseModel


class TurnBase(SQLModel):
    role: TurnRole = Field(..., description="Speaker: user, assistant or tool")
    text: Optional[str] = Field(default=None, description="Transcript or payload")
    latency_ms: Optional[int] = Field(
        default=None,
        gt=0,
        description="Response latency in milliseconds"
    )


class Turn(BaseModel, table=True):
    """
    Turn database table model.

    ``role`` is stored as the ``turn_role`` enum type.
    """

    __tablename__ = "turns"

    call_session_id: int = Field(
        ...,
        foreign_key="call_sessions.id",
        index=True,
        nullable=False
    )
    role: TurnRole = Field(
        sa_column=Column(
            SAEnum(
                TurnRole,
                name="turn_role",
                values_callable=lambda roles: [r.value for r in roles],
            ),
            nullable=False,
        )
    )
    text: Optional[str] = Field(default=None)
    latency_ms: Optional[int] = Field(default=None)


class TurnCreate(TurnBase):
    """Schema for appending a turn."""

    call_session_id: int


class TurnRead(TurnBase):
    id: int
    call_session_id: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
