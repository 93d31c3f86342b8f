# agents/fertilizer/agent.py
"""
Fertilizer recommendation agent
"""

from agents.base import BaseAgent
from agents.fertilizer.models import (
    FertilizerDecision, FertilizerRecommendation, FertilizerRequest, SoilTestAdvice
)
from agents.fertilizer.service import FertilizerService
from core.config import Settings
from core.crop_data import GENERIC_FERTILIZER
from core.models import CropProfile

class FertilizerAgent(BaseAgent[FertilizerRequest, FertilizerDecision]):
    """Stage-wise fertilizer doses from the ICAR table, with health warnings"""

    def __init__(self, settings: Settings = None):
        super().__init__("fertilizer", settings)
        self.service = FertilizerService()

    def _validate_config(self) -> None:
        """The fertilizer table is static; nothing to validate"""
        pass

    def process_request(self, request: FertilizerRequest) -> FertilizerDecision:
        decision = self.service.recommend(request.crop_type, request.stage, request.health_status)
        self.logger.info(
            f"Fertilizer for {request.crop_type}/{request.stage}: "
            f"{decision.fertilizer.fertilizer_name} ({decision.source})"
        )
        return decision

    def get_fallback_response(self, request: FertilizerRequest, error: Exception) -> FertilizerDecision:
        return FertilizerDecision(
            recommended=False,
            fertilizer=FertilizerRecommendation(**GENERIC_FERTILIZER._asdict()),
            source="generic",
            text=f"{GENERIC_FERTILIZER.fertilizer_name} - {GENERIC_FERTILIZER.quantity}.",
            localized_text=(
                f"Aapki fasal ke liye {GENERIC_FERTILIZER.fertilizer_name} "
                f"{GENERIC_FERTILIZER.quantity} recommended hai."
            ),
            next_application="3-4 hafte baad",
            warnings=[],
            data_used=[]
        )

    def recommend_for(self, crop: CropProfile) -> FertilizerDecision:
        return self.execute(FertilizerRequest(
            crop_type=crop.type,
            stage=crop.stage.value,
            health_status=crop.health_status
        ))

    def soil_test_advice(self, nitrogen: float, phosphorus: float, potassium: float,
                         crop_type: str) -> SoilTestAdvice:
        return self.service.soil_test_advice(nitrogen, phosphorus, potassium, crop_type)
