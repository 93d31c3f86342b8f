# api/v1/endpoints/chat.py
from fastapi import APIRouter, Depends

from agents.assistant.agent import AssistantAgent
from agents.assistant.models import AdvisoryEnvelope, ChatRequest
from api.v1.deps import get_assistant

router = APIRouter()

@router.post("", response_model=AdvisoryEnvelope)
async def chat(request: ChatRequest, assistant: AssistantAgent = Depends(get_assistant)):
    """
    Answer a farmer query

    The reply's localized (Hinglish) text is the envelope message; the full
    bilingual response is in data.
    """
    return assistant.chat(request.message)
