# core/models.py
"""
Pydantic models for the farm snapshot shared by every engine
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import date, datetime
from enum import Enum

class GrowthStage(str, Enum):
    SOWING = "sowing"
    VEGETATIVE = "vegetative"
    FLOWERING = "flowering"
    HARVESTING = "harvesting"

class HealthStatus(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"

class WeatherCondition(str, Enum):
    SUNNY = "sunny"
    CLOUDY = "cloudy"
    RAINY = "rainy"
    PARTLY_CLOUDY = "partly_cloudy"

class WeatherSource(str, Enum):
    CACHED = "cached"
    SEASONAL = "seasonal"

class Urgency(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

class ReadingSnapshot(BaseModel):
    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    soil_moisture_pct: float = Field(42.0, ge=0, le=100, description="Soil moisture (% field capacity)")
    temperature_c: float = Field(32.0, ge=-30, le=60, description="Air temperature")
    humidity_pct: float = Field(65.0, ge=0, le=100, description="Relative humidity")
    is_raining: bool = Field(False, description="Rain sensor status")
    rain_probability_pct: float = Field(15.0, ge=0, le=100, description="Rain chance in next 24h")
    last_updated: Optional[datetime] = Field(None, description="None until the first update")

class WeatherSnapshot(BaseModel):
    model_config = ConfigDict(extra="forbid")

    current_temp_c: float = 32.0
    forecast_temp_c: float = 34.0
    rainfall_mm: float = Field(0.0, ge=0)
    rain_probability_pct: float = Field(15.0, ge=0, le=100)
    condition: WeatherCondition = WeatherCondition.SUNNY
    forecast_text: str = "Agle 3 din clear weather, temperature 30-35°C expected"
    source: WeatherSource = Field(WeatherSource.CACHED, description="seasonal once the cached snapshot is stale")
    last_updated: Optional[datetime] = Field(None, description="None until the first update")

class CropProfile(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: str = "wheat"
    stage: GrowthStage = GrowthStage.VEGETATIVE
    planted_date: date = date(2025, 11, 15)
    health_status: HealthStatus = HealthStatus.GOOD

    @field_validator("type")
    @classmethod
    def _normalize_type(cls, value: str) -> str:
        value = value.strip().lower()
        if not value:
            raise ValueError("crop type must not be empty")
        return value
