"""
User Routes

Create, list and partially update user accounts.
"""

from typing import List

from fastapi import APIRouter, status

from voice_admin.api.dependencies import UserServiceDep
from voice_admin.infrastructure.db.models import UserCreate, UserRead, UserUpdate


router = APIRouter()


@router.post("/users", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_user(request: UserCreate, service: UserServiceDep):
    """Create a user (404 on unknown plan, 409 on duplicate email)."""
    user = await service.create_user(request)
    return UserRead.model_validate(user)


@router.get("/users", response_model=List[UserRead])
async def list_users(service: UserServiceDep):
    """List users with their raw subscription_plan_id."""
    users = await service.list_users()
    return [UserRead.model_validate(user) for user in users]


@router.patch("/users/{user_id}", response_model=UserRead)
async def update_user(user_id: int, request: UserUpdate, service: UserServiceDep):
    """
    Update the fields present in the body.

    Send ``"subscription_plan_id": null`` to clear the plan.
    """
    user = await service.update_user(user_id, request)
    return UserRead.model_validate(user)
