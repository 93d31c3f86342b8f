# api/v1/endpoints/sensors.py
from fastapi import APIRouter, Body, Depends
from typing import Any, Dict

from agents.assistant.agent import AssistantAgent
from agents.assistant.models import AdvisoryEnvelope
from api.v1.deps import get_assistant

router = APIRouter()

@router.get("", response_model=AdvisoryEnvelope)
async def get_sensor_data(assistant: AssistantAgent = Depends(get_assistant)):
    """Current sensor reading"""
    return assistant.sensors()

@router.post("", response_model=AdvisoryEnvelope)
async def update_sensor_data(
    data: Dict[str, Any] = Body(..., description="Partial reading, e.g. {\"soil_moisture_pct\": 35}"),
    assistant: AssistantAgent = Depends(get_assistant)
):
    """Merge a sensor push into the stored reading; unknown fields are rejected with 422"""
    return assistant.update_sensors(data)
