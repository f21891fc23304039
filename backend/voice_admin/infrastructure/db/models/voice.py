"""
Voice SQLModel for Voice Admin

Reference data for the voice library.
"""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict
from sqlmodel import Field, SQLModel

from voice_admin.infrastructure.db.models.base import BaseModel


class VoiceBase(SQLModel):
    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    identifier: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Provider voice identifier"
    )
    description: Optional[str] = Field(default=None)


class Voice(BaseModel, table=True):
    """Voice database table model."""

    __tablename__ = "voices"

    name: str = Field(..., index=True, nullable=False)
    identifier: str = Field(..., unique=True, index=True, nullable=False)
    description: Optional[str] = Field(default=None)


class VoiceCreate(VoiceBase):
    """Schema for registering a voice."""
    pass


class VoiceRead(VoiceBase):
    id: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
