# api/v1/endpoints/fertilizer.py
from fastapi import APIRouter, Depends

from agents.assistant.agent import AssistantAgent
from agents.assistant.models import AdvisoryEnvelope
from agents.fertilizer.models import SoilTestRequest
from api.v1.deps import get_assistant

router = APIRouter()

@router.get("", response_model=AdvisoryEnvelope)
async def get_fertilizer_advice(assistant: AssistantAgent = Depends(get_assistant)):
    """Stage-wise fertilizer recommendation for the stored crop profile"""
    return assistant.fertilizer()

@router.get("/soil-test", response_model=AdvisoryEnvelope)
async def get_soil_test_advice(
    report: SoilTestRequest = Depends(),
    assistant: AssistantAgent = Depends(get_assistant)
):
    """Deficiency advice from a soil test report (kg/ha, as query parameters)"""
    return assistant.soil_test(report.nitrogen, report.phosphorus, report.potassium)
