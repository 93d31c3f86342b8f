# agents/fertilizer/models.py
"""
Pydantic models for fertilizer agent
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal

from core.models import HealthStatus

class FertilizerRequest(BaseModel):
    crop_type: str = Field(..., description="Crop type (e.g., wheat, rice, cotton)")
    stage: str = Field(..., description="Growth stage (sowing, vegetative, flowering, harvesting)")
    health_status: HealthStatus = Field(HealthStatus.GOOD, description="Current crop health")

class FertilizerRecommendation(BaseModel):
    model_config = ConfigDict(frozen=True)

    fertilizer_name: str
    quantity: str
    timing_text: str
    reason_text: str

class FertilizerDecision(BaseModel):
    model_config = ConfigDict(frozen=True)

    recommended: bool
    fertilizer: FertilizerRecommendation
    source: Literal["table", "default_stage", "generic"]
    text: str
    localized_text: str
    next_application: str
    warnings: List[str] = []
    data_used: List[str] = []

class SoilTestRequest(BaseModel):
    nitrogen: float = Field(..., ge=0, description="Available nitrogen (kg/ha)")
    phosphorus: float = Field(..., ge=0, description="Available phosphorus (kg/ha)")
    potassium: float = Field(..., ge=0, description="Available potassium (kg/ha)")

class SoilTestAdvice(BaseModel):
    deficiencies: List[str]
    recommendations: List[str]
    localized_text: str
