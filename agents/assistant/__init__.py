"""
Assistant agent package
"""

from .agent import AssistantAgent
from .models import AdvisoryContext, AdvisoryEnvelope, BilingualResponse, IrrigationAdvice
from .service import ResponseComposer

__all__ = [
    "AssistantAgent", "AdvisoryContext", "AdvisoryEnvelope", "BilingualResponse",
    "IrrigationAdvice", "ResponseComposer"
]
