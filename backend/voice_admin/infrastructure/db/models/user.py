"""
User SQLModel for Voice Admin

Platform accounts, optionally linked to a subscription plan.
"""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, EmailStr, field_validator
from sqlmodel import Field, SQLModel

from voice_admin.domain.models import utc_now
from voice_admin.infrastructure.db.models.base import BaseModel
from voice_admin.infrastructure.db.models.types import UTCDateTime


class User(BaseModel, table=True):
    """
    User database table model.

    ``created_at`` and ``updated_at`` share the same instant on insert.
    """

    __tablename__ = "users"

    email: str = Field(..., unique=True, index=True, nullable=False)
    name: str = Field(..., nullable=False)
    subscription_plan_id: Optional[int] = Field(
        default=None,
        foreign_key="subscription_plans.id",
        index=True,
        description="Plan the user is subscribed to"
    )
    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_type=UTCDateTime,
        nullable=False,
        description="Last update timestamp (UTC)"
    )


class UserCreate(SQLModel):
    """Schema for creating a new user."""

    email: EmailStr
    name: str = Field(..., min_length=1, max_length=255)
    subscription_plan_id: Optional[int] = None


class UserUpdate(SQLModel):
    """
    Schema for updating a user (all fields optional).

    Only fields explicitly sent are applied; ``subscription_plan_id=None``
    sent explicitly clears the plan.
    """

    email: Optional[EmailStr] = None
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    subscription_plan_id: Optional[int] = None

    @field_validator("email", "name")
    @classmethod
    def reject_explicit_null(cls, v: Optional[str]) -> Optional[str]:
        # Defaults are not validated, so this only fires on an explicit null
        if v is None:
            raise ValueError("Field may be omitted but cannot be null")
        return v


class UserRead(SQLModel):
    """Schema for reading a user; the plan is returned as a raw id."""

    id: int
    email: str
    name: str
    subscription_plan_id: Optional[int]
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
