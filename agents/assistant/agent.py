# agents/assistant/agent.py
"""
Assistant agent - speech boundary and facade over the store and the decision agents
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from agents.alerts.agent import AlertAgent
from agents.alerts.models import AlertRecord
from agents.assistant.models import (
    AdvisoryContext, AdvisoryEnvelope, BilingualResponse, IrrigationAdvice
)
from agents.assistant.service import UNKNOWN_LOCAL, UNKNOWN_TEXT, ResponseComposer
from agents.base import AgentRegistry, BaseAgent
from agents.crop_health.agent import CropHealthAgent
from agents.fertilizer.agent import FertilizerAgent
from agents.intent.agent import IntentAgent
from agents.intent.models import Intent, IntentResult, UtteranceRequest
from agents.irrigation.agent import IrrigationAgent
from agents.irrigation.models import IrrigationVerdict
from core.config import Settings
from core.store import ReadingStore

IRRIGATION_INTENTS = (Intent.ASK_IRRIGATION, Intent.ASK_WATER_AMOUNT)
ALERT_INTENTS = (Intent.ASK_ALERTS, Intent.NAV_ALERTS)

class AssistantAgent(BaseAgent[UtteranceRequest, BilingualResponse]):
    """
    Farmer-facing assistant

    Owns the reading store and the decision agents. Text goes in through
    accept_utterance(); every other public method answers with an
    AdvisoryEnvelope, the same shape the remote advisory service returns.
    """

    def __init__(self, settings: Settings = None, store: Optional[ReadingStore] = None):
        super().__init__("assistant", settings)
        self.store = store or ReadingStore()

        self.intent_agent = IntentAgent(self.settings)
        self.irrigation_agent = IrrigationAgent(self.settings)
        self.fertilizer_agent = FertilizerAgent(self.settings)
        self.alert_agent = AlertAgent(self.settings)
        self.crop_health_agent = CropHealthAgent(self.settings)
        self.composer = ResponseComposer(self.irrigation_agent, self.fertilizer_agent, self.crop_health_agent)

        self.registry = AgentRegistry()
        for agent in (self.intent_agent, self.irrigation_agent, self.fertilizer_agent,
                      self.alert_agent, self.crop_health_agent):
            self.registry.register(agent)

        self.last_verdict: Optional[IrrigationVerdict] = None
        self._swept_revision: Optional[int] = None

    def _validate_config(self) -> None:
        """The assistant has no settings of its own"""
        pass

    def process_request(self, request: UtteranceRequest) -> BilingualResponse:
        intent_result = self.intent_agent.classify(request.text)
        return self.respond(intent_result)

    def get_fallback_response(self, request: UtteranceRequest, error: Exception) -> BilingualResponse:
        return BilingualResponse(
            text=UNKNOWN_TEXT,
            localized_text=UNKNOWN_LOCAL,
            confidence_pct=0,
            intent=Intent.UNKNOWN
        )

    # ---------- SPEECH BOUNDARY ----------

    def accept_utterance(self, text: str) -> BilingualResponse:
        """Typed or transcribed text in, reply to display and speak out"""
        return self.execute(UtteranceRequest(text=text))

    def relay_speech_error(self, text: str) -> BilingualResponse:
        """Pass a speech-capture error through as a plain reply"""
        self.logger.warning(f"Speech capture error: {text}")
        return BilingualResponse(
            text=text,
            localized_text=text,
            confidence_pct=0,
            intent=Intent.UNKNOWN
        )

    def respond(self, intent_result: IntentResult) -> BilingualResponse:
        context = self.build_context(intent_result.intent)
        return self.composer.compose(intent_result, context)

    def build_context(self, intent: Intent) -> AdvisoryContext:
        reading = self.store.get()
        crop = self.store.get_crop()
        weather = self.store.get_weather()
        verdict = None
        alerts: List[AlertRecord] = []

        if intent in IRRIGATION_INTENTS:
            verdict = self.irrigation_agent.decide(reading, crop, weather)
            self.last_verdict = verdict
        if intent in ALERT_INTENTS:
            alerts = self.current_alerts()

        return AdvisoryContext(
            reading=reading,
            weather=weather,
            crop=crop,
            verdict=verdict,
            alerts=alerts
        )

    # ---------- ALERTS ----------

    def sweep_alerts(self) -> List[AlertRecord]:
        self._swept_revision = self.store.revision
        return self.alert_agent.sweep(self.store.get(), self.store.get_crop(), self.last_verdict)

    def current_alerts(self) -> List[AlertRecord]:
        """Alerts from the latest sweep; sweeps again if the reading changed since"""
        if self._swept_revision != self.store.revision:
            return self.sweep_alerts()
        return list(self.alert_agent.active_alerts)

    # ---------- REMOTE SYNC ----------

    def sync_sensors(self, remote: Dict[str, Any]) -> bool:
        """Adopt a reading fetched from the remote service; alerts follow on the next request"""
        return self.store.sync_reading(remote)

    def sync_weather(self, remote: Dict[str, Any]) -> bool:
        return self.store.sync_weather(remote)

    # ---------- ENVELOPES ----------

    def health(self) -> AdvisoryEnvelope:
        agents = self.registry.health_check_all()
        healthy = all(report["status"] == "healthy" for report in agents.values())
        return AdvisoryEnvelope(
            success=healthy,
            message="AgriGuard advisory core is healthy" if healthy else "Some agents are unhealthy",
            data={
                "status": "healthy" if healthy else "degraded",
                "timestamp": datetime.now().isoformat(),
                "agents": agents
            }
        )

    def chat(self, message: str) -> AdvisoryEnvelope:
        response = self.accept_utterance(message)
        return AdvisoryEnvelope(
            message=response.localized_text,
            data=response.model_dump(mode="json")
        )

    def irrigation(self, overrides: Optional[Dict[str, Any]] = None) -> AdvisoryEnvelope:
        """Verdict for the stored reading, or for a what-if copy when overrides are given"""
        if overrides:
            reading = self.store.preview(overrides)
        else:
            reading = self.store.get()
        verdict = self.irrigation_agent.decide(reading, self.store.get_crop(), self.store.get_weather())
        if not overrides:
            self.last_verdict = verdict
        advice = IrrigationAdvice.from_verdict(verdict)
        return AdvisoryEnvelope(
            message=verdict.reason_text_localized,
            data=advice.model_dump(mode="json", by_alias=True)
        )

    def crop_profiles(self) -> AdvisoryEnvelope:
        return AdvisoryEnvelope(
            message="Unknown crops use the wheat profile",
            data=self.irrigation_agent.get_crop_profiles()
        )

    def agents_info(self) -> AdvisoryEnvelope:
        return AdvisoryEnvelope(
            message="Agent configuration",
            data=self.registry.get_agents_info()
        )

    def sensors(self) -> AdvisoryEnvelope:
        return AdvisoryEnvelope(
            message="Sensor data retrieved",
            data=self.store.get().model_dump(mode="json")
        )

    def update_sensors(self, partial: Dict[str, Any]) -> AdvisoryEnvelope:
        reading = self.store.update(partial)
        self.sweep_alerts()
        return AdvisoryEnvelope(message="Sensor data updated", data=reading.model_dump(mode="json"))

    def weather(self) -> AdvisoryEnvelope:
        return AdvisoryEnvelope(
            message="Weather data retrieved",
            data=self.store.get_weather().model_dump(mode="json")
        )

    def update_weather(self, partial: Dict[str, Any]) -> AdvisoryEnvelope:
        weather = self.store.update_weather(partial)
        return AdvisoryEnvelope(message="Weather data updated", data=weather.model_dump(mode="json"))

    def crop(self) -> AdvisoryEnvelope:
        return AdvisoryEnvelope(
            message="Crop data retrieved",
            data=self.store.get_crop().model_dump(mode="json")
        )

    def update_crop(self, partial: Dict[str, Any]) -> AdvisoryEnvelope:
        crop = self.store.update_crop(partial)
        return AdvisoryEnvelope(message="Crop data updated", data=crop.model_dump(mode="json"))

    def fertilizer(self) -> AdvisoryEnvelope:
        decision = self.fertilizer_agent.recommend_for(self.store.get_crop())
        return AdvisoryEnvelope(
            message=decision.localized_text,
            data=decision.model_dump(mode="json")
        )

    def soil_test(self, nitrogen: float, phosphorus: float, potassium: float) -> AdvisoryEnvelope:
        crop = self.store.get_crop()
        advice = self.fertilizer_agent.soil_test_advice(nitrogen, phosphorus, potassium, crop.type)
        return AdvisoryEnvelope(message=advice.localized_text, data=advice.model_dump(mode="json"))

    def alerts(self) -> AdvisoryEnvelope:
        alerts = self.current_alerts()
        return AdvisoryEnvelope(
            message=f"{len(alerts)} alerts active" if alerts else "No alerts",
            data=[alert.model_dump(mode="json") for alert in alerts]
        )
