"""
Voice Routes

Voice library reference data.
"""

from typing import List

from fastapi import APIRouter, status

from voice_admin.api.dependencies import VoiceServiceDep
from voice_admin.infrastructure.db.models import VoiceCreate, VoiceRead


router = APIRouter()


@router.post("/voices", response_model=VoiceRead, status_code=status.HTTP_201_CREATED)
async def create_voice(request: VoiceCreate, service: VoiceServiceDep):
    voice = await service.create_voice(request)
    return VoiceRead.model_validate(voice)


@router.get("/voices", response_model=List[VoiceRead])
async def list_voices(service: VoiceServiceDep):
    """List voices ordered by name."""
    voices = await service.list_voices()
    return [VoiceRead.model_validate(voice) for voice in voices]
