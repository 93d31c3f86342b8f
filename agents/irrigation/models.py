# agents/irrigation/models.py
"""
Pydantic models for irrigation agent
"""
from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import List, Optional
from enum import Enum

from core.models import CropProfile, ReadingSnapshot, Urgency, WeatherSnapshot

class IrrigationAction(str, Enum):
    IRRIGATE = "irrigate"
    STOP = "stop"
    REDUCE = "reduce"
    WAIT = "wait"

class IrrigationRequest(BaseModel):
    reading: ReadingSnapshot = Field(..., description="Snapshot read at invocation time")
    crop: CropProfile = Field(..., description="Crop whose moisture band and Kc apply")
    weather: Optional[WeatherSnapshot] = Field(None, description="Forecast that scales the amount")

class IrrigationConstants(BaseModel):
    """Tunable thresholds and amount-scaling constants"""
    model_config = ConfigDict(extra="forbid")

    over_irrigation_pct: float = Field(80.0, gt=0, le=100)
    saturation_pct: float = Field(90.0, gt=0, le=100)
    base_irrigation_mm: float = Field(15.0, gt=0)
    hot_day_threshold_c: float = 35.0
    hot_day_extra_mm: float = Field(10.0, ge=0)
    critical_multiplier: float = Field(1.5, ge=1)
    confidence_floor_pct: float = Field(60.0, ge=0, le=100)
    confidence_ceiling_pct: float = Field(98.0, ge=0, le=100)
    rain_forecast_wait_pct: Optional[float] = Field(None, ge=0, le=100)

    @model_validator(mode="after")
    def _check_ordering(self):
        if self.over_irrigation_pct >= self.saturation_pct:
            raise ValueError("over_irrigation_pct must be below saturation_pct")
        if self.confidence_floor_pct > self.confidence_ceiling_pct:
            raise ValueError("confidence_floor_pct must not exceed confidence_ceiling_pct")
        return self

class IrrigationVerdict(BaseModel):
    model_config = ConfigDict(frozen=True)

    should_act: bool
    action: IrrigationAction
    amount_mm: float = Field(..., ge=0)
    urgency: Urgency
    confidence_pct: float = Field(..., ge=0, le=100)
    reason_text: str
    reason_text_localized: str
    crop_coefficient: Optional[float] = None
    daily_demand_mm: Optional[float] = None
    weather_factor: float = 1.0
    data_used: List[str] = []

class WaterSavings(BaseModel):
    saved_mm: float
    percentage: int
    localized_text: str
