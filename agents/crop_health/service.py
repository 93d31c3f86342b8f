# agents/crop_health/service.py
"""
Crop health service - symptom keywords to likely conditions, scored against field conditions
"""
import unicodedata
from types import MappingProxyType
from typing import Dict, List, Mapping, NamedTuple, Optional, Tuple

from agents.crop_health.models import ConditionScore, CropHealthReport
from core.crop_data import local_crop_name
from core.models import CropProfile, HealthStatus, ReadingSnapshot, Urgency, WeatherSnapshot

class Cause(NamedTuple):
    condition: str
    confidence_pct: float
    triggers: Tuple[str, ...] = ()

SYMPTOM_KEYWORDS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "yellow_leaves": ("पीली पत्तियां", "पीली पत्तियाँ", "पीले पत्ते", "yellow", "peeli", "peele"),
    "brown_spots": ("भूरे धब्बे", "brown spots", "bhure dhabbe"),
    "wilting": ("murjha", "मुरझा", "wilting", "wilt"),
    "white_powder": ("safed powder", "white powder", "सफेद पाउडर"),
    "holes_in_leaves": ("छेद", "holes", "chhed"),
    "aphids": ("aphid", "maahu", "chepa", "माहू"),
})

SYMPTOM_CAUSES: Mapping[str, Tuple[Cause, ...]] = MappingProxyType({
    "yellow_leaves": (
        Cause("nitrogen_deficiency", 70),
        Cause("overwatering", 60, ("high_moisture",)),
        Cause("iron_deficiency", 50),
        Cause("root_damage", 40),
    ),
    "brown_spots": (
        Cause("fungal_infection", 75, ("high_moisture", "recent_rain")),
        Cause("bacterial_blight", 60),
        Cause("potassium_deficiency", 45),
        Cause("sunburn", 30, ("high_temp",)),
    ),
    "wilting": (
        Cause("water_stress", 80, ("low_moisture",)),
        Cause("root_rot", 60, ("high_moisture",)),
        Cause("bacterial_wilt", 50),
        Cause("heat_stress", 70, ("high_temp",)),
    ),
    "white_powder": (
        Cause("powdery_mildew", 90),
        Cause("downy_mildew", 70, ("high_moisture",)),
    ),
    "holes_in_leaves": (
        Cause("caterpillar_attack", 80),
        Cause("beetle_damage", 70),
        Cause("grasshopper", 50),
    ),
    "aphids": (
        Cause("aphid_infestation", 95),
    ),
})

TRIGGER_BONUS: Mapping[str, float] = MappingProxyType({
    "high_moisture": 15,
    "low_moisture": 15,
    "high_temp": 10,
    "recent_rain": 10,
})

TREATMENTS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "nitrogen_deficiency": ("20-25 kg Urea spray karein", "Sinchai ke baad Urea top dressing karein"),
    "fungal_infection": ("Mancozeb 2g/L ya Copper spray karein", "Infected pattiyaan tod kar jalaa dein"),
    "water_stress": ("Turant sinchai karein", "Mulching lagakar moisture bachayein"),
    "aphid_infestation": (
        "Imidacloprid 0.3ml/L ya Neem tel 5ml/L spray karein",
        "Ladybug chhodein - yeh aphid kha lete hain",
    ),
    "powdery_mildew": ("Sulphur 2g/L ya Karathane spray karein", "Doodh ka spray bhi kaam karta hai (1:9 paani)"),
    "caterpillar_attack": (
        "Haath se caterpillar uthayein aur maar dein",
        "Bt spray karein",
        "Neem insecticide bhi effective hai",
    ),
    "overwatering": ("3-5 din sinchai band karein", "Drainage improve karein", "Heavy mitti mein gypsum daalein"),
    "heat_stress": (
        "Subah jaldi ya shaam ko sinchai karein",
        "Mulch lagakar mitti thandi rakhein",
        "Shade net laga sakte hain",
    ),
})

DEFAULT_TREATMENT = ("Local agriculture officer se contact karein",)

SEVERITY_PREFIX = {
    "critical": (Urgency.CRITICAL, "URGENT"),
    "poor": (Urgency.HIGH, "WARNING"),
    "moderate": (Urgency.MEDIUM, "ADVICE"),
}

RECORDED_HEALTH_LOCAL = {
    HealthStatus.FAIR: "theek-thaak",
    HealthStatus.POOR: "kamzor",
}

def _label(condition: str) -> str:
    return condition.replace("_", " ")

def _num(value: float) -> str:
    return f"{value:g}"

class CropHealthService:
    """
    Keyword symptom matching with condition scoring.

    Each named symptom contributes its known causes; a cause gains a bonus
    for every one of its triggers the field currently shows. Scores for the
    same condition add up and are capped at 100.
    """

    @staticmethod
    def detect_symptoms(text: str) -> List[str]:
        text = unicodedata.normalize("NFC", text or "").casefold()
        return [
            symptom for symptom, keywords in SYMPTOM_KEYWORDS.items()
            if any(keyword in text for keyword in keywords)
        ]

    @staticmethod
    def active_triggers(reading: ReadingSnapshot, weather: Optional[WeatherSnapshot]) -> List[str]:
        triggers = []
        if reading.soil_moisture_pct > 70:
            triggers.append("high_moisture")
        if reading.soil_moisture_pct < 30:
            triggers.append("low_moisture")
        if reading.temperature_c > 38:
            triggers.append("high_temp")
        if reading.is_raining or (weather is not None and weather.rainfall_mm > 0):
            triggers.append("recent_rain")
        return triggers

    def score_conditions(self, symptoms: List[str], triggers: List[str]) -> List[ConditionScore]:
        scores: Dict[str, float] = {}
        for symptom in symptoms:
            for cause in SYMPTOM_CAUSES[symptom]:
                bonus = sum(TRIGGER_BONUS[name] for name in cause.triggers if name in triggers)
                scores[cause.condition] = scores.get(cause.condition, 0) + cause.confidence_pct + bonus

        ranked = sorted(scores.items(), key=lambda item: item[1], reverse=True)
        return [ConditionScore(condition=name, confidence_pct=min(100, score)) for name, score in ranked]

    def assess(self, symptom_text: str, reading: ReadingSnapshot, crop: CropProfile,
               weather: Optional[WeatherSnapshot] = None) -> CropHealthReport:
        symptoms = self.detect_symptoms(symptom_text)
        if not symptoms:
            return self.field_check(reading, crop)
        return self.diagnose(symptoms, reading, crop, weather)

    # ---------- DIAGNOSIS ----------

    def diagnose(self, symptoms: List[str], reading: ReadingSnapshot, crop: CropProfile,
                 weather: Optional[WeatherSnapshot] = None) -> CropHealthReport:
        conditions = self.score_conditions(symptoms, self.active_triggers(reading, weather))
        top = conditions[0]

        if len(symptoms) >= 3 or top.confidence_pct > 80:
            overall = "critical" if top.confidence_pct > 85 else "poor"
        else:
            overall = "moderate"
        if overall == "moderate" and crop.health_status == HealthStatus.POOR:
            overall = "poor"

        urgency, prefix = SEVERITY_PREFIX[overall]
        treatments = list(TREATMENTS.get(top.condition, DEFAULT_TREATMENT))
        confidence = _num(top.confidence_pct)
        others = [_label(score.condition) for score in conditions[1:3]]

        data_used = ["soil_moisture_pct", "temperature_c", "is_raining", "crop_type", "health_status"]
        if weather is not None:
            data_used.append("rainfall_mm")

        text = f"Possible {_label(top.condition)} ({confidence}% confidence)."
        if others:
            text = f"{text} Also check: {', '.join(others)}."

        return CropHealthReport(
            overall=overall,
            symptoms=symptoms,
            conditions=conditions,
            treatments=treatments,
            urgency=urgency,
            text=text,
            localized_text=(
                f"{prefix}: {_label(top.condition)} ho sakta hai ({confidence}% confidence). "
                f"Ilaaj: {'; '.join(treatments)}."
            ),
            data_used=data_used
        )

    # ---------- FIELD CHECK ----------

    def field_check(self, reading: ReadingSnapshot, crop: CropProfile) -> CropHealthReport:
        """Status from moisture, temperature and the recorded health status"""
        moisture = reading.soil_moisture_pct
        temp = reading.temperature_c
        crop_local = local_crop_name(crop.type)
        moisture_ok = 35 <= moisture <= 75
        temp_ok = 15 <= temp <= 38
        urgency = None

        if moisture_ok and temp_ok:
            overall, status, status_local = "excellent", "excellent", "bahut achhi"
            advice = f"{crop_local} ki halat bahut achhi hai! Sab kuch normal hai."
        elif moisture_ok:
            overall, status, status_local = "good", "good", "theek"
            advice = f"{crop_local} theek hai lekin temperature extreme hai. Dhyan rakhein."
        elif temp_ok:
            overall, status, status_local = "good", "good", "theek"
            advice = f"{crop_local} theek hai lekin soil moisture adjust karein."
        else:
            overall, status, status_local = "needs_attention", "needs attention", "dhyan dein"
            advice = (
                f"{crop_local} ko attention chahiye. Moisture: {_num(moisture)}%, "
                f"Temp: {_num(temp)}°C - conditions optimal nahi hain."
            )

        recorded = RECORDED_HEALTH_LOCAL.get(crop.health_status)
        if recorded is not None:
            overall, status, status_local = "needs_attention", "needs attention", "dhyan dein"
            advice = (
                f"{advice} Record ke hisaab se fasal ki health {recorded} hai. "
                "Patton ko dhyan se dekhein aur lakshan batayein."
            )
            urgency = Urgency.HIGH if crop.health_status == HealthStatus.POOR else Urgency.MEDIUM

        return CropHealthReport(
            overall=overall,
            urgency=urgency,
            text=f"Crop health status: {status}. {advice}",
            localized_text=f"Fasal ki halat: {status_local}. {advice}",
            data_used=["soil_moisture_pct", "temperature_c", "crop_type", "health_status"]
        )
