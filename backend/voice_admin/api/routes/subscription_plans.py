"""
Subscription Plan Routes

Create and list pricing tiers. Prices leave as JSON numbers.
"""

from typing import List

from fastapi import APIRouter, status

from voice_admin.api.dependencies import SubscriptionPlanServiceDep
from voice_admin.infrastructure.db.models import (
    SubscriptionPlanCreate,
    SubscriptionPlanRead,
)


router = APIRouter()


@router.post(
    "/subscription-plans",
    response_model=SubscriptionPlanRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_subscription_plan(
    request: SubscriptionPlanCreate,
    service: SubscriptionPlanServiceDep,
):
    """Create a subscription plan (409 on duplicate name)."""
    plan = await service.create_plan(request)
    return SubscriptionPlanRead.model_validate(plan)


@router.get("/subscription-plans", response_model=List[SubscriptionPlanRead])
async def list_subscription_plans(service: SubscriptionPlanServiceDep):
    """List every plan in creation order."""
    plans = await service.list_plans()
    return [SubscriptionPlanRead.model_validate(plan) for plan in plans]
