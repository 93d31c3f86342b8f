# agents/irrigation/agent.py
"""
Irrigation decision agent - rule-based verdicts over the current reading
"""

from typing import Dict, Any, List, Optional

from pydantic import ValidationError

from agents.base import BaseAgent
from agents.irrigation.models import (
    IrrigationAction, IrrigationConstants, IrrigationRequest, IrrigationVerdict, WaterSavings
)
from agents.irrigation.service import IrrigationService
from core.config import Settings
from core.crop_data import CROP_KC_VALUES, OPTIMAL_MOISTURE, get_moisture_band
from core.exceptions import AgentConfigError
from core.models import CropProfile, ReadingSnapshot, Urgency, WeatherSnapshot

class IrrigationAgent(BaseAgent[IrrigationRequest, IrrigationVerdict]):
    """
    Irrigation decision agent using ordered moisture rules

    Features:
    - Rain dominates every other rule
    - Crop-specific optimal moisture bands (ICAR)
    - Fixed base amount with a hot-day top-up and a critical multiplier
    - Forecast factor (heat, humidity, rain chance, rainfall) on the amount
    - Band-distance confidence
    - Bilingual reasons (English + Hinglish)
    """

    def __init__(self, settings: Settings = None):
        super().__init__("irrigation", settings)
        self.service = IrrigationService(constants=self.constants)
        self.logger.info("Irrigation agent initialized")

    def _validate_config(self) -> None:
        """Validate irrigation agent configuration"""
        try:
            self.constants = IrrigationConstants(**self.config)
        except ValidationError as e:
            raise AgentConfigError(f"Invalid irrigation config: {e}") from e

    def process_request(self, request: IrrigationRequest) -> IrrigationVerdict:
        reading = request.reading
        self.logger.info(
            f"Evaluating irrigation for {request.crop.type}/{request.crop.stage.value}: "
            f"moisture={reading.soil_moisture_pct}%, temp={reading.temperature_c}°C, "
            f"raining={reading.is_raining}"
        )

        verdict = self.service.decide(reading, request.crop, request.weather)

        self.logger.info(
            f"Irrigation verdict: {verdict.action.value}, {verdict.amount_mm}mm (x{verdict.weather_factor}), "
            f"urgency={verdict.urgency.value}, confidence={verdict.confidence_pct}%"
        )
        return verdict

    def get_fallback_response(self, request: IrrigationRequest, error: Exception) -> IrrigationVerdict:
        """Get fallback response when agent fails"""
        return IrrigationVerdict(
            should_act=False,
            action=IrrigationAction.WAIT,
            amount_mm=0,
            urgency=Urgency.MEDIUM,
            confidence_pct=50,
            reason_text="Conditions uncertain. Check sensors and try again.",
            reason_text_localized="Halaat clear nahi hai. Sensor check karein aur dobara try karein.",
            data_used=[]
        )

    def decide(self, reading: ReadingSnapshot, crop: CropProfile,
               weather: Optional[WeatherSnapshot] = None) -> IrrigationVerdict:
        return self.execute(IrrigationRequest(reading=reading, crop=crop, weather=weather))

    def moisture_urgency(self, moisture: float, crop_type: str) -> Urgency:
        return self.service.moisture_urgency(moisture, get_moisture_band(crop_type))

    def water_savings(self, traditional_mm: float, recommended_mm: float) -> WaterSavings:
        return self.service.calculate_water_savings(traditional_mm, recommended_mm)

    def get_crop_profiles(self) -> List[Dict[str, Any]]:
        """Get supported crops with their moisture bands and Kc values"""
        return [
            {
                "name": crop,
                "optimal_moisture": OPTIMAL_MOISTURE[crop]._asdict(),
                "crop_coefficients": CROP_KC_VALUES[crop]._asdict()
            }
            for crop in OPTIMAL_MOISTURE
        ]
