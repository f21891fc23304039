"""
SubscriptionPlan SQLModel for Voice Admin

Pricing tiers with optional quota limits (null means unlimited).
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import ConfigDict, field_serializer
from sqlalchemy import Column, Numeric
from sqlmodel import Field, SQLModel

from voice_admin.domain.models import money_to_number
from voice_admin.infrastructure.db.models.base import BaseModel


class SubscriptionPlanBase(SQLModel):
    """Fields shared between create and read schemas."""

    name: str = Field(..., min_length=1, max_length=255, description="Unique plan name")
    description: Optional[str] = Field(default=None, description="Marketing description")
    max_api_keys: Optional[int] = Field(
        default=None,
        gt=0,
        description="Maximum active API keys per user (null = unlimited)"
    )
    max_monthly_calls: Optional[int] = Field(
        default=None,
        gt=0,
        description="Maximum calls per month (null = unlimited)"
    )


class SubscriptionPlan(BaseModel, table=True):
    """
    SubscriptionPlan database table model.

    Price is NUMERIC(10, 2) and surfaces as ``Decimal``.
    """

    __tablename__ = "subscription_plans"

    name: str = Field(..., unique=True, index=True, nullable=False)
    description: Optional[str] = Field(default=None)
    price: Decimal = Field(sa_column=Column(Numeric(10, 2), nullable=False))
    max_api_keys: Optional[int] = Field(default=None)
    max_monthly_calls: Optional[int] = Field(default=None)


class SubscriptionPlanCreate(SubscriptionPlanBase):
    """Schema for creating a subscription plan."""

    price: Decimal = Field(
        ...,
        ge=0,
        max_digits=10,
        decimal_places=2,
        description="Monthly price, at most 8 integer digits and 2 decimals"
    )


class SubscriptionPlanRead(SubscriptionPlanBase):
    """Schema for reading a plan; price is emitted as a JSON number."""

    id: int
    price: Decimal
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_serializer("price")
    def serialize_price(self, price: Decimal) -> float:
        return money_to_number(price)
