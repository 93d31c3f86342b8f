# api/v1/endpoints/irrigation.py
from fastapi import APIRouter, Body, Depends
from typing import Any, Dict, Optional

from agents.assistant.agent import AssistantAgent
from agents.assistant.models import AdvisoryEnvelope
from api.v1.deps import get_assistant

router = APIRouter()

@router.get("", response_model=AdvisoryEnvelope)
async def get_irrigation_advice(assistant: AssistantAgent = Depends(get_assistant)):
    """Irrigation verdict for the stored reading and crop"""
    return assistant.irrigation()

@router.post("", response_model=AdvisoryEnvelope)
async def preview_irrigation_advice(
    overrides: Optional[Dict[str, Any]] = Body(None, description="Sensor fields to evaluate instead of the stored ones"),
    assistant: AssistantAgent = Depends(get_assistant)
):
    """
    Irrigation verdict, optionally for a what-if reading

    Overrides are merged into a copy of the stored reading; nothing is saved.
    """
    return assistant.irrigation(overrides)

@router.get("/crops", response_model=AdvisoryEnvelope)
async def get_crop_profiles(assistant: AssistantAgent = Depends(get_assistant)):
    """Supported crops with their moisture bands and crop coefficients"""
    return assistant.crop_profiles()
