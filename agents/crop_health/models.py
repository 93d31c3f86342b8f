"""
Pydantic models for crop health agent
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional

from core.models import CropProfile, ReadingSnapshot, Urgency, WeatherSnapshot

class CropHealthRequest(BaseModel):
    symptom_text: str = Field("", description="What the farmer sees, as typed or spoken")
    reading: ReadingSnapshot
    crop: CropProfile
    weather: Optional[WeatherSnapshot] = None

class ConditionScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    condition: str
    confidence_pct: float = Field(..., ge=0, le=100)

class CropHealthReport(BaseModel):
    """Symptom diagnosis when symptoms were named, field-condition check otherwise"""
    model_config = ConfigDict(frozen=True)

    overall: Literal["excellent", "good", "needs_attention", "moderate", "poor", "critical"]
    symptoms: List[str] = []
    conditions: List[ConditionScore] = []
    treatments: List[str] = []
    urgency: Optional[Urgency] = None
    text: str
    localized_text: str
    data_used: List[str] = []

    @property
    def primary(self) -> Optional[ConditionScore]:
        return self.conditions[0] if self.conditions else None
