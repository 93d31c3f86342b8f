# api/v1/deps.py
from fastapi import HTTPException, Request

from agents.assistant.agent import AssistantAgent

def get_assistant(request: Request) -> AssistantAgent:
    """The assistant the app was built with (or the lifespan attached)"""
    assistant = getattr(request.app.state, "assistant", None)
    if assistant is None:
        raise HTTPException(status_code=503, detail="Assistant not available")
    return assistant
