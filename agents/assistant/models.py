# agents/assistant/models.py
"""
Pydantic models for the assistant facade and the advisory wire format
"""
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Any, List, Optional

from agents.alerts.models import AlertRecord
from agents.intent.models import Intent, NavigationTarget
from agents.irrigation.models import IrrigationVerdict
from core.models import CropProfile, ReadingSnapshot, Urgency, WeatherSnapshot

class BilingualResponse(BaseModel):
    """One reply in English and Hinglish; localized_text is what gets spoken"""
    model_config = ConfigDict(frozen=True)

    text: str
    localized_text: str
    action: Optional[str] = None
    value: Optional[float] = None
    unit: Optional[str] = None
    confidence_pct: float = Field(..., ge=0, le=100)
    data_used: List[str] = []
    intent: Intent
    navigation_target: Optional[NavigationTarget] = None
    urgency: Optional[Urgency] = None

class AdvisoryContext(BaseModel):
    """Everything the composer may consult for a single reply"""
    model_config = ConfigDict(frozen=True)

    reading: ReadingSnapshot
    weather: WeatherSnapshot
    crop: CropProfile
    verdict: Optional[IrrigationVerdict] = None
    alerts: List[AlertRecord] = []

class AdvisoryEnvelope(BaseModel):
    """Response shape shared by the remote service and the local fallback"""
    success: bool = True
    message: str = ""
    data: Optional[Any] = None
    offline: bool = False

class IrrigationAdvice(BaseModel):
    """Payload of /irrigation, camelCase on the wire"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    should_irrigate: bool
    water_amount: float
    reason: str
    urgency: Urgency
    action: str
    confidence: float
    reason_english: str

    @classmethod
    def from_verdict(cls, verdict: IrrigationVerdict) -> "IrrigationAdvice":
        return cls(
            should_irrigate=verdict.should_act,
            water_amount=verdict.amount_mm,
            reason=verdict.reason_text_localized,
            urgency=verdict.urgency,
            action=verdict.action.value,
            confidence=verdict.confidence_pct,
            reason_english=verdict.reason_text
        )

class ChatRequest(BaseModel):
    message: str = Field(..., description="Typed or transcribed farmer query")
