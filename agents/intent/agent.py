# agents/intent/agent.py
"""
Intent agent - maps free-form spoken or typed input to a command
"""

from typing import List

from agents.base import BaseAgent
from agents.intent.models import Intent, IntentResult, UtteranceRequest
from agents.intent.service import IntentService
from core.config import Settings
from core.exceptions import AgentConfigError

class IntentAgent(BaseAgent[UtteranceRequest, IntentResult]):
    """
    Offline intent classifier

    Features:
    - One phrase table covering Hinglish, Devanagari and English
    - Exact / containment / token-overlap scoring
    - Crop, growth-stage and numeric entity extraction
    - Navigation targets for screen-bearing intents
    """

    def __init__(self, settings: Settings = None):
        super().__init__("intent", settings)
        self.service = IntentService(config=self.config)

    def _validate_config(self) -> None:
        """Validate intent agent configuration"""
        floor = self.config.get("confidence_floor", 0.3)
        if not 0 <= float(floor) < 1:
            raise AgentConfigError(f"confidence_floor must be in [0, 1), got {floor}")

    def process_request(self, request: UtteranceRequest) -> IntentResult:
        result = self.service.classify(request.text)
        self.logger.info(
            f"Detected {result.intent.value} ({result.confidence:.2f}) for input: {request.text!r}"
        )
        return result

    def get_fallback_response(self, request: UtteranceRequest, error: Exception) -> IntentResult:
        return IntentResult(intent=Intent.UNKNOWN, confidence=0.0, raw_input=request.text)

    def classify(self, text: str) -> IntentResult:
        return self.execute(UtteranceRequest(text=text))

    def get_voice_suggestions(self) -> List[str]:
        return self.service.suggest_commands()
