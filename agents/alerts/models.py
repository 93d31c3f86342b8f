# agents/alerts/models.py
"""
Pydantic models for alert agent
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from datetime import datetime
from enum import Enum

from agents.irrigation.models import IrrigationVerdict
from core.models import CropProfile, ReadingSnapshot

class AlertKind(str, Enum):
    OVER_IRRIGATION = "over_irrigation"
    UNDER_IRRIGATION = "under_irrigation"
    WEATHER_CANCEL = "weather_cancel"

class AlertSeverity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

class AlertRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: AlertKind
    severity: AlertSeverity
    message: str
    localized_message: str
    timestamp: datetime

class AlertMemory(BaseModel):
    """What the evaluator remembers between two sweeps"""
    model_config = ConfigDict(frozen=True)

    consecutive_over_sweeps: int = Field(0, ge=0)
    was_raining: bool = False

class AlertSweep(BaseModel):
    model_config = ConfigDict(frozen=True)

    alerts: List[AlertRecord] = []
    memory: AlertMemory = AlertMemory()

class AlertRequest(BaseModel):
    reading: ReadingSnapshot
    crop: CropProfile
    last_verdict: Optional[IrrigationVerdict] = None
    memory: AlertMemory = AlertMemory()
