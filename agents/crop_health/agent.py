# agents/crop_health/agent.py
"""
Crop health agent - symptom diagnosis and field-condition check
"""

from typing import Optional

from agents.base import BaseAgent
from agents.crop_health.models import CropHealthReport, CropHealthRequest
from agents.crop_health.service import DEFAULT_TREATMENT, CropHealthService
from core.config import Settings
from core.models import CropProfile, ReadingSnapshot, WeatherSnapshot

class CropHealthAgent(BaseAgent[CropHealthRequest, CropHealthReport]):
    """
    Crop health agent

    Features:
    - Hinglish, Hindi and English symptom keywords
    - Causes weighted by moisture, heat and rain
    - Treatment steps for the most likely condition
    - Recorded health status folded into the field check
    """

    def __init__(self, settings: Settings = None):
        super().__init__("crop_health", settings)
        self.service = CropHealthService()

    def _validate_config(self) -> None:
        """The symptom tables are static; nothing to validate"""
        pass

    def process_request(self, request: CropHealthRequest) -> CropHealthReport:
        report = self.service.assess(request.symptom_text, request.reading, request.crop, request.weather)
        if report.primary is not None:
            self.logger.info(
                f"Diagnosis for {request.crop.type}: {report.primary.condition} "
                f"({report.primary.confidence_pct}%), symptoms={report.symptoms}, overall={report.overall}"
            )
        return report

    def get_fallback_response(self, request: CropHealthRequest, error: Exception) -> CropHealthReport:
        return CropHealthReport(
            overall="needs_attention",
            treatments=list(DEFAULT_TREATMENT),
            text="Crop health could not be assessed. Contact the local agriculture officer.",
            localized_text="Fasal ki jaanch abhi nahi ho paayi. Local agriculture officer se contact karein.",
            data_used=[]
        )

    def assess(self, symptom_text: str, reading: ReadingSnapshot, crop: CropProfile,
               weather: Optional[WeatherSnapshot] = None) -> CropHealthReport:
        return self.execute(CropHealthRequest(
            symptom_text=symptom_text,
            reading=reading,
            crop=crop,
            weather=weather
        ))
