# agents/assistant/service.py
"""
Response composer - turns an IntentResult plus the current context into a bilingual reply
"""
import logging
from typing import Callable, Dict, List, Mapping
from types import MappingProxyType

from agents.alerts.models import AlertSeverity
from agents.assistant.models import AdvisoryContext, BilingualResponse
from agents.crop_health.agent import CropHealthAgent
from agents.fertilizer.agent import FertilizerAgent
from agents.fertilizer.models import FertilizerRequest
from agents.intent.models import Intent, IntentResult
from agents.irrigation.agent import IrrigationAgent
from core.crop_data import get_moisture_band, local_crop_name
from core.models import Urgency, WeatherCondition, WeatherSource
from core.weather import weather_advisory

logger = logging.getLogger(__name__)

TONE: Mapping[Urgency, str] = MappingProxyType({
    Urgency.CRITICAL: "🚨",
    Urgency.HIGH: "⚠️",
    Urgency.MEDIUM: "💧",
    Urgency.LOW: "✅",
})

SEVERITY_URGENCY: Mapping[AlertSeverity, Urgency] = MappingProxyType({
    AlertSeverity.HIGH: Urgency.HIGH,
    AlertSeverity.MEDIUM: Urgency.MEDIUM,
    AlertSeverity.LOW: Urgency.LOW,
})

CONDITION_LOCAL: Mapping[WeatherCondition, str] = MappingProxyType({
    WeatherCondition.SUNNY: "Dhoop nikli hai.",
    WeatherCondition.CLOUDY: "Badal chhaye hain.",
    WeatherCondition.RAINY: "Baarish ho rahi hai.",
    WeatherCondition.PARTLY_CLOUDY: "Thode badal hain.",
})

ADVISORY_URGENCY: Mapping[str, Urgency] = MappingProxyType({
    "alert": Urgency.HIGH,
    "caution": Urgency.MEDIUM,
    "favorable": Urgency.LOW,
})

SEASONAL_NOTE_LOCAL = "(Offline: mausam ka seasonal andaza.)"

GREETING_TEXT = "Hello! I am your farming assistant. Ask me about irrigation, fertilizer, or weather."
GREETING_LOCAL = (
    "Namaste! Main aapka farming assistant hoon. "
    "Irrigation, fertilizer, ya mausam ke baare mein poochein."
)

UNKNOWN_TEXT = "Sorry, I did not understand. Try asking about irrigation, weather, fertilizer, or crop health."
UNKNOWN_LOCAL = (
    "Maaf kijiye, samajh nahi aaya. Kya aap irrigation, mausam, fertilizer, "
    "ya fasal ke baare mein poochna chahte hain?"
)

HELP_LOCAL = (
    "Main ye madad kar sakta hoon:\n"
    "• \"Aaj paani dena hai?\" - Irrigation advice\n"
    "• \"Temperature kya hai?\" - Mausam info\n"
    "• \"Fertilizer batao\" - Khad recommendation\n"
    "• \"Fasal kaisi hai?\" - Crop health\n"
    "• \"Koi alert hai?\" - Warnings\n\n"
    "Bas pooch lijiye!"
)

NAVIGATION_REPLIES: Mapping[Intent, tuple] = MappingProxyType({
    Intent.NAV_DASHBOARD: ("Opening the dashboard.", "Dashboard khol raha hoon."),
    Intent.NAV_IRRIGATION: ("Opening irrigation.", "Sinchai screen khol raha hoon."),
    Intent.NAV_ALERTS: ("Opening alerts.", "Alerts dikha raha hoon."),
    Intent.NAV_ASSISTANT: ("Opening the assistant.", "Assistant khol raha hoon. Poochiye!"),
})

def _num(value: float) -> str:
    return f"{value:g}"

def _join(*parts: str) -> str:
    return " ".join(part for part in parts if part)

class ResponseComposer:
    """
    Pure reply builder. The same IntentResult and context always produce
    the same BilingualResponse; the decision engines it consults are
    themselves deterministic.
    """

    def __init__(self, irrigation: IrrigationAgent, fertilizer: FertilizerAgent, crop_health: CropHealthAgent):
        self.irrigation = irrigation
        self.fertilizer = fertilizer
        self.crop_health = crop_health
        self._handlers: Dict[Intent, Callable[[IntentResult, AdvisoryContext], dict]] = {
            Intent.ASK_TEMPERATURE: self._temperature,
            Intent.ASK_HUMIDITY: self._humidity,
            Intent.ASK_SOIL_MOISTURE: self._soil_moisture,
            Intent.ASK_WEATHER: self._weather,
            Intent.ASK_IRRIGATION: self._irrigation,
            Intent.ASK_WATER_AMOUNT: self._water_amount,
            Intent.ASK_FERTILIZER: self._fertilizer,
            Intent.ASK_CROP_HEALTH: self._crop_health,
            Intent.ASK_ALERTS: self._alerts,
            Intent.GREETING: self._greeting,
            Intent.THANKS: self._thanks,
            Intent.HELP: self._help,
            Intent.NAV_DASHBOARD: self._navigation,
            Intent.NAV_IRRIGATION: self._navigation,
            Intent.NAV_ALERTS: self._navigation,
            Intent.NAV_ASSISTANT: self._navigation,
        }

    def compose(self, intent_result: IntentResult, context: AdvisoryContext) -> BilingualResponse:
        handler = self._handlers.get(intent_result.intent, self._unknown)
        fields = handler(intent_result, context)

        urgency = fields.get("urgency")
        if urgency is not None:
            fields["localized_text"] = f"{TONE[urgency]} {fields['localized_text']}"

        return BilingualResponse(
            intent=intent_result.intent,
            navigation_target=intent_result.navigation_target,
            **fields
        )

    # ---------- SENSOR QUERIES ----------

    def _temperature(self, intent_result: IntentResult, context: AdvisoryContext) -> dict:
        temp = context.reading.temperature_c
        if temp > 40:
            advice = "Bahut garmi hai! Dopahar 11-4 baje irrigation avoid karein. Paudho ko shade dein."
        elif temp > 35:
            advice = "Garmi zyada hai. Subah ya shaam irrigation karein, dopahar nahi."
        elif temp > 25:
            advice = "Temperature normal hai. Farming activities kar sakte hain."
        elif temp > 15:
            advice = "Thanda mausam hai. Frost risk check karein."
        else:
            advice = "Bahut thand hai! Fasal ko frost damage ho sakta hai. Cover karein."

        return {
            "text": f"Current temperature is {_num(temp)}°C. {advice}",
            "localized_text": f"Abhi temperature {_num(temp)}°C hai. {advice}",
            "value": temp,
            "unit": "°C",
            "confidence_pct": 95,
            "data_used": ["temperature_c"],
        }

    def _humidity(self, intent_result: IntentResult, context: AdvisoryContext) -> dict:
        humidity = context.reading.humidity_pct
        if humidity > 80:
            advice = "Humidity bahut zyada hai. Fungal disease ka risk hai. Spray schedule check karein."
        elif humidity > 60:
            advice = "Humidity normal range mein hai."
        else:
            advice = "Humidity kam hai. Evaporation zyada hogi, irrigation adjust karein."

        return {
            "text": f"Air humidity is {_num(humidity)}%. {advice}",
            "localized_text": f"Hawa mein nami {_num(humidity)}% hai. {advice}",
            "value": humidity,
            "unit": "%",
            "confidence_pct": 92,
            "data_used": ["humidity_pct"],
        }

    def _soil_moisture(self, intent_result: IntentResult, context: AdvisoryContext) -> dict:
        moisture = context.reading.soil_moisture_pct
        crop_type = context.crop.type
        band = get_moisture_band(crop_type)
        crop_local = local_crop_name(crop_type)
        over = self.irrigation.constants.over_irrigation_pct

        if moisture > over:
            status, status_local = "very high", "bahut zyada"
            advice = "Over-watering ho rahi hai. Kuch din paani band rakhein."
        elif band.min <= moisture <= band.max:
            status, status_local = "optimal", "bilkul sahi"
            advice = f"{crop_local} ke liye perfect hai. Aaj paani dene ki zaroorat nahi."
        elif moisture > band.max:
            status, status_local = "slightly high", "thodi zyada"
            advice = "Paani kam karein."
        elif moisture >= band.critical_low:
            status, status_local = "slightly low", "thodi kam"
            advice = "Kal irrigation plan karein."
        else:
            status, status_local = "very low", "bahut kam"
            advice = "Turant paani dein! Fasal stress mein hai."

        return {
            "text": f"Soil moisture is {_num(moisture)}% which is {status}. {advice}",
            "localized_text": f"Mitti mein nami {_num(moisture)}% hai jo {status_local} hai. {advice}",
            "value": moisture,
            "unit": "%",
            "confidence_pct": 94,
            "data_used": ["soil_moisture_pct", "crop_type"],
            "urgency": self.irrigation.moisture_urgency(moisture, crop_type),
        }

    def _weather(self, intent_result: IntentResult, context: AdvisoryContext) -> dict:
        weather = context.weather
        rain = weather.rain_probability_pct
        temp = _num(weather.current_temp_c)

        if context.reading.is_raining:
            status, status_local = "It is currently raining.", "Abhi baarish ho rahi hai."
        else:
            status = f"Weather is {weather.condition.value.replace('_', ' ')}."
            status_local = CONDITION_LOCAL.get(weather.condition, "Mausam theek hai.")

        if rain > 70:
            rain_advice = f"Baarish ki {_num(rain)}% sambhavna hai. Irrigation postpone karein."
        elif rain > 40:
            rain_advice = f"Baarish ho sakti hai ({_num(rain)}% chance). Dhyan rakhein."
        else:
            rain_advice = ""

        advisory = weather_advisory(weather.current_temp_c, context.reading.humidity_pct, rain)
        seasonal = weather.source == WeatherSource.SEASONAL
        return {
            "text": _join("Seasonal estimate, live weather unavailable." if seasonal else "",
                          status, f"Temperature: {temp}°C.", f"Rain probability: {_num(rain)}%.",
                          weather.forecast_text),
            "localized_text": _join(SEASONAL_NOTE_LOCAL if seasonal else "",
                                    status_local, f"Temperature {temp}°C hai.", rain_advice,
                                    f"{advisory.title}: {advisory.localized_text}", weather.forecast_text),
            "confidence_pct": 60 if seasonal else 88,
            "data_used": ["is_raining", "current_temp_c", "rain_probability_pct", "humidity_pct", "condition",
                          "forecast_text", "source"],
            "urgency": ADVISORY_URGENCY[advisory.kind],
        }

    # ---------- DECISIONS ----------

    def _verdict(self, context: AdvisoryContext):
        if context.verdict is not None:
            return context.verdict
        return self.irrigation.decide(context.reading, context.crop, context.weather)

    def _irrigation(self, intent_result: IntentResult, context: AdvisoryContext) -> dict:
        verdict = self._verdict(context)
        return {
            "text": verdict.reason_text,
            "localized_text": verdict.reason_text_localized,
            "action": verdict.action.value,
            "value": verdict.amount_mm,
            "unit": "mm",
            "confidence_pct": verdict.confidence_pct,
            "data_used": list(verdict.data_used),
            "urgency": verdict.urgency,
        }

    def _water_amount(self, intent_result: IntentResult, context: AdvisoryContext) -> dict:
        fields = self._irrigation(intent_result, context)
        amount = fields["value"]
        if amount > 0:
            fields["text"] = _join(f"Give {_num(amount)}mm of water.", fields["text"])
            fields["localized_text"] = _join(f"{_num(amount)}mm paani dein.", fields["localized_text"])
        return fields

    def _fertilizer(self, intent_result: IntentResult, context: AdvisoryContext) -> dict:
        entities = intent_result.entities
        crop = context.crop
        decision = self.fertilizer.execute(FertilizerRequest(
            crop_type=entities.crop or crop.type,
            stage=entities.stage or crop.stage.value,
            health_status=crop.health_status
        ))

        localized = decision.localized_text
        if decision.warnings:
            localized = f"{localized} ⚠️ {' '.join(decision.warnings)}"
        localized = f"{localized} Agli application: {decision.next_application}"

        return {
            "text": decision.text,
            "localized_text": localized,
            "action": "fertilize" if decision.recommended else None,
            "confidence_pct": 90,
            "data_used": list(decision.data_used),
        }

    def _crop_health(self, intent_result: IntentResult, context: AdvisoryContext) -> dict:
        report = self.crop_health.assess(intent_result.raw_input, context.reading, context.crop, context.weather)
        primary = report.primary
        return {
            "text": report.text,
            "localized_text": report.localized_text,
            "action": "treat" if primary is not None else None,
            "value": primary.confidence_pct if primary is not None else None,
            "unit": "%" if primary is not None else None,
            "confidence_pct": primary.confidence_pct if primary is not None else 85,
            "data_used": list(report.data_used),
            "urgency": report.urgency,
        }

    def _alerts(self, intent_result: IntentResult, context: AdvisoryContext) -> dict:
        data_used = ["soil_moisture_pct", "is_raining", "crop_type"]
        if not context.alerts:
            return {
                "text": "No active alerts. All systems normal.",
                "localized_text": "Koi alert nahi hai. Sab kuch theek chal raha hai.",
                "confidence_pct": 95,
                "data_used": data_used,
                "urgency": Urgency.LOW,
            }

        order: List[AlertSeverity] = [AlertSeverity.LOW, AlertSeverity.MEDIUM, AlertSeverity.HIGH]
        worst = max((alert.severity for alert in context.alerts), key=order.index)
        return {
            "text": f"Active alerts: {' | '.join(alert.message for alert in context.alerts)}",
            "localized_text": f"Alerts: {' | '.join(alert.localized_message for alert in context.alerts)}",
            "action": "alert",
            "value": len(context.alerts),
            "confidence_pct": 95,
            "data_used": data_used,
            "urgency": SEVERITY_URGENCY[worst],
        }

    # ---------- CONVERSATION ----------

    def _greeting(self, intent_result: IntentResult, context: AdvisoryContext) -> dict:
        return {"text": GREETING_TEXT, "localized_text": GREETING_LOCAL, "confidence_pct": 100}

    def _thanks(self, intent_result: IntentResult, context: AdvisoryContext) -> dict:
        return {
            "text": "You're welcome! Feel free to ask more questions.",
            "localized_text": "Dhanyawad! Aur kuch poochna ho toh zaroor poochein. Jai Jawan Jai Kisan! 🌾",
            "confidence_pct": 100,
        }

    def _help(self, intent_result: IntentResult, context: AdvisoryContext) -> dict:
        return {
            "text": (
                "I can help with: irrigation advice, fertilizer recommendations, "
                "weather updates, crop health check, and alerts."
            ),
            "localized_text": HELP_LOCAL,
            "confidence_pct": 100,
        }

    def _navigation(self, intent_result: IntentResult, context: AdvisoryContext) -> dict:
        text, localized = NAVIGATION_REPLIES[intent_result.intent]
        return {
            "text": text,
            "localized_text": localized,
            "action": "navigate",
            "confidence_pct": round(intent_result.confidence * 100),
        }

    def _unknown(self, intent_result: IntentResult, context: AdvisoryContext) -> dict:
        logger.debug(f"Unrecognized input: {intent_result.raw_input!r}")
        return {"text": UNKNOWN_TEXT, "localized_text": UNKNOWN_LOCAL, "confidence_pct": 0}
