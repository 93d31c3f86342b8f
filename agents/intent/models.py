# agents/intent/models.py
"""
Pydantic models for intent classification
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Union
from enum import Enum

class Intent(str, Enum):
    ASK_TEMPERATURE = "ASK_TEMPERATURE"
    ASK_HUMIDITY = "ASK_HUMIDITY"
    ASK_SOIL_MOISTURE = "ASK_SOIL_MOISTURE"
    ASK_WEATHER = "ASK_WEATHER"
    ASK_IRRIGATION = "ASK_IRRIGATION"
    ASK_FERTILIZER = "ASK_FERTILIZER"
    ASK_CROP_HEALTH = "ASK_CROP_HEALTH"
    ASK_WATER_AMOUNT = "ASK_WATER_AMOUNT"
    ASK_ALERTS = "ASK_ALERTS"
    GREETING = "GREETING"
    THANKS = "THANKS"
    HELP = "HELP"
    NAV_DASHBOARD = "NAV_DASHBOARD"
    NAV_IRRIGATION = "NAV_IRRIGATION"
    NAV_ALERTS = "NAV_ALERTS"
    NAV_ASSISTANT = "NAV_ASSISTANT"
    UNKNOWN = "UNKNOWN"

class NavigationTarget(str, Enum):
    DASHBOARD = "DASHBOARD"
    IRRIGATION = "IRRIGATION"
    ALERTS = "ALERTS"
    ASSISTANT = "ASSISTANT"

class UtteranceRequest(BaseModel):
    text: str = Field(..., description="Typed or transcribed user input")

class IntentEntities(BaseModel):
    model_config = ConfigDict(frozen=True)

    crop: Optional[str] = None
    stage: Optional[str] = None
    value: Optional[Union[int, float]] = None

class IntentResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    intent: Intent
    confidence: float = Field(..., ge=0, le=1)
    entities: IntentEntities = IntentEntities()
    raw_input: str
    navigation_target: Optional[NavigationTarget] = None
