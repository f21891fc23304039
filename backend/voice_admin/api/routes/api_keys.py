"""
API Key Routes

Create, list and update per-user API keys.
"""

from typing import List

from fastapi import APIRouter, status

from voice_admin.api.dependencies import ApiKeyServiceDep
from voice_admin.infrastructure.db.models import ApiKeyCreate, ApiKeyRead, ApiKeyUpdate


router = APIRouter()


@router.post("/api-keys", response_model=ApiKeyRead, status_code=status.HTTP_201_CREATED)
async def create_api_key(request: ApiKeyCreate, service: ApiKeyServiceDep):
    """Create an active key (404 unknown user, 403 plan quota reached)."""
    api_key = await service.create_api_key(request)
    return ApiKeyRead.model_validate(api_key)


@router.get("/users/{user_id}/api-keys", response_model=List[ApiKeyRead])
async def list_api_keys_by_user(user_id: int, service: ApiKeyServiceDep):
    """List a user's keys, active and inactive."""
    api_keys = await service.list_api_keys_by_user(user_id)
    return [ApiKeyRead.model_validate(api_key) for api_key in api_keys]


@router.patch("/api-keys/{api_key_id}", response_model=ApiKeyRead)
async def update_api_key(api_key_id: int, request: ApiKeyUpdate, service: ApiKeyServiceDep):
    """Rename or (de)activate a key."""
    api_key = await service.update_api_key(api_key_id, request)
    return ApiKeyRead.model_validate(api_key)
