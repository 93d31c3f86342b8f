# agents/alerts/agent.py
"""
Alert agent - keeps the sweep memory between evaluations
"""

from typing import List, Optional

from pydantic import ValidationError

from agents.alerts.models import AlertMemory, AlertRecord, AlertRequest, AlertSweep
from agents.alerts.service import evaluate_alerts
from agents.base import BaseAgent
from agents.irrigation.models import IrrigationConstants, IrrigationVerdict
from agents.irrigation.service import IrrigationService
from core.config import Settings
from core.exceptions import AgentConfigError
from core.models import CropProfile, ReadingSnapshot

class AlertAgent(BaseAgent[AlertRequest, AlertSweep]):
    """Over-irrigation, under-irrigation and weather-cancel alerts"""

    def __init__(self, settings: Settings = None):
        super().__init__("alerts", settings)
        self.memory = AlertMemory()
        self.active_alerts: List[AlertRecord] = []

    def _validate_config(self) -> None:
        sweeps = self.config.get("consecutive_over_sweeps", 2)
        if not isinstance(sweeps, int) or sweeps < 1:
            raise AgentConfigError("consecutive_over_sweeps must be a positive integer")
        self.consecutive_over_sweeps = sweeps
        try:
            constants = IrrigationConstants(**self.settings.get_agent_config("irrigation"))
        except ValidationError as e:
            raise AgentConfigError(f"Invalid irrigation config: {e}") from e
        self.irrigation = IrrigationService(constants)

    def process_request(self, request: AlertRequest) -> AlertSweep:
        sweep = evaluate_alerts(
            request.reading,
            request.crop,
            request.last_verdict,
            request.memory,
            irrigation=self.irrigation,
            consecutive_over_sweeps=self.consecutive_over_sweeps
        )
        if sweep.alerts:
            self.logger.info(f"Raised alerts: {[alert.kind.value for alert in sweep.alerts]}")
        return sweep

    def get_fallback_response(self, request: AlertRequest, error: Exception) -> AlertSweep:
        return AlertSweep(alerts=[], memory=request.memory)

    def sweep(self, reading: ReadingSnapshot, crop: CropProfile,
              last_verdict: Optional[IrrigationVerdict] = None) -> List[AlertRecord]:
        result = self.execute(AlertRequest(
            reading=reading,
            crop=crop,
            last_verdict=last_verdict,
            memory=self.memory
        ))
        self.memory = result.memory
        self.active_alerts = list(result.alerts)
        return self.active_alerts

    def reset(self) -> None:
        self.memory = AlertMemory()
        self.active_alerts = []
