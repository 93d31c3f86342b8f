# api/v1/endpoints/weather.py
from fastapi import APIRouter, Body, Depends
from typing import Any, Dict

from agents.assistant.agent import AssistantAgent
from agents.assistant.models import AdvisoryEnvelope
from api.v1.deps import get_assistant

router = APIRouter()

@router.get("", response_model=AdvisoryEnvelope)
async def get_weather_data(assistant: AssistantAgent = Depends(get_assistant)):
    return assistant.weather()

@router.post("", response_model=AdvisoryEnvelope)
async def update_weather_data(
    data: Dict[str, Any] = Body(...),
    assistant: AssistantAgent = Depends(get_assistant)
):
    return assistant.update_weather(data)
