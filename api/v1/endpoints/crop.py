# api/v1/endpoints/crop.py
from fastapi import APIRouter, Body, Depends
from typing import Any, Dict

from agents.assistant.agent import AssistantAgent
from agents.assistant.models import AdvisoryEnvelope
from api.v1.deps import get_assistant

router = APIRouter()

@router.get("", response_model=AdvisoryEnvelope)
async def get_crop_data(assistant: AssistantAgent = Depends(get_assistant)):
    return assistant.crop()

@router.post("", response_model=AdvisoryEnvelope)
async def update_crop_data(
    data: Dict[str, Any] = Body(..., description="Partial crop profile, e.g. {\"stage\": \"flowering\"}"),
    assistant: AssistantAgent = Depends(get_assistant)
):
    return assistant.update_crop(data)
