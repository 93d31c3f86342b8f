# api/v1/endpoints/health.py
from fastapi import APIRouter, Depends

from agents.assistant.agent import AssistantAgent
from agents.assistant.models import AdvisoryEnvelope
from api.v1.deps import get_assistant

router = APIRouter()

@router.get("", response_model=AdvisoryEnvelope)
async def health_check(assistant: AssistantAgent = Depends(get_assistant)):
    """Health of the advisory core and each decision agent"""
    return assistant.health()

@router.get("/agents", response_model=AdvisoryEnvelope)
async def agents_info(assistant: AssistantAgent = Depends(get_assistant)):
    """Name, version and active configuration of each decision agent"""
    return assistant.agents_info()
