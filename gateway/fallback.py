# gateway/fallback.py
"""
Local fallback - answers advisory requests from the on-device engines
"""
import logging
from typing import Any, Callable, Dict, Optional, Tuple
from urllib.parse import parse_qsl

from pydantic import ValidationError

from agents.assistant.agent import AssistantAgent
from agents.assistant.models import AdvisoryEnvelope
from agents.fertilizer.models import SoilTestRequest
from core.exceptions import ReadingValidationError

logger = logging.getLogger(__name__)

STATE_CHANGING_PATHS = frozenset({"/sensors", "/weather", "/crop"})

Handler = Callable[[Optional[Any], Dict[str, str]], AdvisoryEnvelope]

def normalize_path(path: str) -> str:
    path = "/" + path.split("?", 1)[0].strip("/")
    return path

def normalize_target(path: str) -> str:
    """normalize_path, keeping the query string"""
    _, _, query = path.partition("?")
    route = normalize_path(path)
    return f"{route}?{query}" if query else route

def is_state_changing(method: str, path: str) -> bool:
    return method.upper() != "GET" and normalize_path(path) in STATE_CHANGING_PATHS

class LocalFallback:
    """
    Route table over AssistantAgent.

    The reference HTTP service calls the same assistant methods, so a
    fallback envelope differs from the remote one only in `offline`.
    """

    def __init__(self, assistant: AssistantAgent):
        self.assistant = assistant
        self.routes: Dict[Tuple[str, str], Handler] = {
            ("GET", "/health"): lambda payload, query: assistant.health(),
            ("GET", "/health/agents"): lambda payload, query: assistant.agents_info(),
            ("POST", "/chat"): lambda payload, query: assistant.chat((payload or {}).get("message", "")),
            ("GET", "/irrigation"): lambda payload, query: assistant.irrigation(),
            ("POST", "/irrigation"): lambda payload, query: assistant.irrigation(payload),
            ("GET", "/irrigation/crops"): lambda payload, query: assistant.crop_profiles(),
            ("GET", "/sensors"): lambda payload, query: assistant.sensors(),
            ("POST", "/sensors"): lambda payload, query: assistant.update_sensors(payload or {}),
            ("GET", "/weather"): lambda payload, query: assistant.weather(),
            ("POST", "/weather"): lambda payload, query: assistant.update_weather(payload or {}),
            ("GET", "/crop"): lambda payload, query: assistant.crop(),
            ("POST", "/crop"): lambda payload, query: assistant.update_crop(payload or {}),
            ("GET", "/fertilizer"): lambda payload, query: assistant.fertilizer(),
            ("GET", "/fertilizer/soil-test"): lambda payload, query: self._soil_test(query),
            ("GET", "/alerts"): lambda payload, query: assistant.alerts(),
        }

    def handle(self, method: str, path: str, payload: Optional[Any] = None) -> AdvisoryEnvelope:
        route = normalize_path(path)
        handler = self.routes.get((method.upper(), route))
        if handler is None:
            logger.warning(f"No offline handler for {method} {route}")
            return AdvisoryEnvelope(success=False, message=f"Not available offline: {method} {route}", offline=True)

        query = dict(parse_qsl(path.partition("?")[2]))
        try:
            envelope = handler(payload, query)
        except (ReadingValidationError, ValidationError) as e:
            logger.warning(f"Rejected local request {method} {path}: {e}")
            return AdvisoryEnvelope(success=False, message=str(e), offline=True)

        return envelope.model_copy(update={"offline": True})

    def _soil_test(self, query: Dict[str, str]) -> AdvisoryEnvelope:
        request = SoilTestRequest.model_validate(query)
        return self.assistant.soil_test(request.nitrogen, request.phosphorus, request.potassium)

    def mirror(self, path: str, data: Dict[str, Any]) -> bool:
        """Adopt a remote sensor or weather snapshot unless the local one is newer"""
        route = normalize_path(path)
        if route == "/sensors":
            return self.assistant.sync_sensors(data)
        if route == "/weather":
            return self.assistant.sync_weather(data)
        return False
