# api/v1/endpoints/alerts.py
from fastapi import APIRouter, Depends

from agents.assistant.agent import AssistantAgent
from agents.assistant.models import AdvisoryEnvelope
from api.v1.deps import get_assistant

router = APIRouter()

@router.get("", response_model=AdvisoryEnvelope)
async def get_alerts(assistant: AssistantAgent = Depends(get_assistant)):
    """Alerts raised by the latest sweep"""
    return assistant.alerts()
