"""
ApiKey SQLModel for Voice Admin

Per-user API keys. Only the hash is stored.
"""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, field_validator
from sqlmodel import Field, SQLModel

from voice_admin.infrastructure.db.models.base import BaseModel
from voice_admin.infrastructure.db.models.types import UTCDateTime


class ApiKey(BaseModel, table=True):
    """ApiKey database table model."""

    __tablename__ = "api_keys"

    user_id: int = Field(..., foreign_key="users.id", index=True, nullable=False)
    key_hash: str = Field(..., nullable=False)
    name: str = Field(..., nullable=False)
    is_active: bool = Field(default=True, nullable=False)
    last_used_at: Optional[datetime] = Field(default=None, sa_type=UTCDateTime)


class ApiKeyCreate(SQLModel):
    """Schema for creating an API key."""

    user_id: int
    key_hash: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=255)


class ApiKeyUpdate(SQLModel):
    """Schema for renaming or (de)activating an API key."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    is_active: Optional[bool] = None

    @field_validator("name", "is_active")
    @classmethod
    def reject_explicit_null(cls, v):
        if v is None:
            raise ValueError("Field may be omitted but cannot be null")
        return v


class ApiKeyRead(SQLModel):
    id: int
    user_id: int
    key_hash: str
    name: str
    is_active: bool
    created_at: datetime
    last_used_at: Optional[datetime]

    model_config = ConfigDict(from_attributes=True)
