# agents/irrigation/service.py
"""
Irrigation service - ordered rule evaluation over the current reading
"""
import logging
from typing import List, Optional

from agents.irrigation.models import (
    IrrigationAction, IrrigationConstants, IrrigationVerdict, WaterSavings
)
from core.crop_data import MoistureBand, get_crop_coefficients, get_moisture_band, local_crop_name
from core.models import CropProfile, GrowthStage, ReadingSnapshot, Urgency, WeatherSnapshot
from core.weather import weather_irrigation_factor

logger = logging.getLogger(__name__)

# Fields behind crop_coefficient and daily_demand_mm, reported with every verdict
DEMAND_FIELDS = ("temperature_c", "humidity_pct", "crop_type", "crop_stage")

def _pct(value: float) -> str:
    return f"{value:g}"

class IrrigationService:
    """
    Rule-based irrigation decisions. First matching rule wins:

    1. raining                      -> stop
    2. moisture > over_irrigation   -> stop (critical above saturation)
    3. moisture within crop band    -> stop
    4. moisture < critical_low      -> irrigate, critical
    5. moisture < band min          -> irrigate, high/medium
    6. above band max, <= over      -> reduce

    Irrigate amounts are scaled by the weather factor from core.weather.
    """

    def __init__(self, constants: IrrigationConstants):
        self.constants = constants

    # ---------- URGENCY (shared with the alert evaluator) ----------

    def moisture_urgency(self, moisture: float, band: MoistureBand) -> Urgency:
        c = self.constants
        if moisture > c.saturation_pct:
            return Urgency.CRITICAL
        if moisture > c.over_irrigation_pct:
            return Urgency.HIGH
        if band.min <= moisture <= band.max:
            return Urgency.LOW
        if moisture < band.critical_low:
            return Urgency.CRITICAL
        if moisture < band.min:
            midpoint = (band.critical_low + band.min) / 2
            return Urgency.HIGH if moisture < midpoint else Urgency.MEDIUM
        midpoint = (band.max + c.over_irrigation_pct) / 2
        return Urgency.MEDIUM if moisture > midpoint else Urgency.LOW

    # ---------- CONFIDENCE ----------

    def band_confidence(self, value: float, low: float, high: float) -> float:
        """Linear falloff: ceiling at the band center, floor at its edges"""
        c = self.constants
        half = (high - low) / 2
        if half <= 0:
            return c.confidence_ceiling_pct
        distance = max(0.0, min(value - low, high - value, half))
        span = c.confidence_ceiling_pct - c.confidence_floor_pct
        return round(c.confidence_floor_pct + span * distance / half)

    # ---------- AMOUNT ----------

    def water_amount(self, temperature: float, critical: bool = False, factor: float = 1.0) -> float:
        c = self.constants
        amount = c.base_irrigation_mm
        if temperature > c.hot_day_threshold_c:
            amount += c.hot_day_extra_mm
        if critical:
            amount *= c.critical_multiplier
        return round(amount * factor, 1)

    # ---------- CROP WATER DEMAND (informational) ----------

    @staticmethod
    def crop_coefficient(crop: CropProfile) -> float:
        kc = get_crop_coefficients(crop.type)
        if crop.stage == GrowthStage.SOWING:
            return kc.initial
        if crop.stage == GrowthStage.VEGETATIVE:
            return round((kc.initial + kc.mid) / 2, 3)
        if crop.stage == GrowthStage.FLOWERING:
            return kc.mid
        return kc.end

    @staticmethod
    def reference_et(reading: ReadingSnapshot) -> float:
        """Simplified temperature/humidity ETo, clamped to 2-10 mm/day"""
        humidity_factor = (100 - reading.humidity_pct) / 100
        eto = (0.12 * reading.temperature_c - 1.5) * (1 + humidity_factor * 0.3)
        return max(2.0, min(10.0, eto))

    # ---------- DECISION ----------

    @staticmethod
    def weather_factor(reading: ReadingSnapshot, weather: Optional[WeatherSnapshot]) -> float:
        """Forecast adjustment; without a weather snapshot the reading's own rain chance is used"""
        if weather is None:
            return weather_irrigation_factor(
                reading.temperature_c, reading.humidity_pct, reading.rain_probability_pct, 0.0
            )
        return weather_irrigation_factor(
            reading.temperature_c, reading.humidity_pct, weather.rain_probability_pct, weather.rainfall_mm
        )

    @staticmethod
    def _used(*fields: str) -> List[str]:
        return list(fields) + [name for name in DEMAND_FIELDS if name not in fields]

    def decide(self, reading: ReadingSnapshot, crop: CropProfile,
               weather: Optional[WeatherSnapshot] = None) -> IrrigationVerdict:
        c = self.constants
        band = get_moisture_band(crop.type)
        moisture = reading.soil_moisture_pct
        kc = self.crop_coefficient(crop)
        extras = {
            "crop_coefficient": kc,
            "daily_demand_mm": round(self.reference_et(reading) * kc, 1)
        }
        m = _pct(moisture)

        if reading.is_raining:
            return IrrigationVerdict(
                should_act=False,
                action=IrrigationAction.STOP,
                amount_mm=0,
                urgency=Urgency.LOW,
                confidence_pct=c.confidence_ceiling_pct,
                reason_text="Rain is currently falling. No irrigation needed.",
                reason_text_localized="Abhi baarish ho rahi hai. Irrigation ki zaroorat nahi.",
                data_used=self._used("is_raining"),
                **extras
            )

        if c.rain_forecast_wait_pct is not None and reading.rain_probability_pct > c.rain_forecast_wait_pct:
            chance = _pct(reading.rain_probability_pct)
            return IrrigationVerdict(
                should_act=False,
                action=IrrigationAction.WAIT,
                amount_mm=0,
                urgency=Urgency.LOW,
                confidence_pct=self.band_confidence(reading.rain_probability_pct, c.rain_forecast_wait_pct, 100),
                reason_text=f"High rain probability ({chance}%). Wait for rain.",
                reason_text_localized=f"Baarish ki {chance}% sambhavna hai. Ruk jaayein, baarish aane wali hai.",
                data_used=self._used("is_raining", "rain_probability_pct"),
                **extras
            )

        urgency = self.moisture_urgency(moisture, band)

        if moisture > c.over_irrigation_pct:
            limit = _pct(c.over_irrigation_pct)
            return IrrigationVerdict(
                should_act=False,
                action=IrrigationAction.STOP,
                amount_mm=0,
                urgency=urgency,
                confidence_pct=self.band_confidence(moisture, c.over_irrigation_pct, 100),
                reason_text=f"Soil moisture ({m}%) is above {limit}%. Over-irrigation risk! Stop watering.",
                reason_text_localized=(
                    f"Mitti mein nami {m}% hai jo {limit}% se zyada hai. "
                    "Over-irrigation ho sakti hai! Paani band rakhein."
                ),
                data_used=self._used("is_raining", "soil_moisture_pct"),
                **extras
            )

        low, high = _pct(band.min), _pct(band.max)

        if band.min <= moisture <= band.max:
            return IrrigationVerdict(
                should_act=False,
                action=IrrigationAction.STOP,
                amount_mm=0,
                urgency=urgency,
                confidence_pct=self.band_confidence(moisture, band.min, band.max),
                reason_text=(
                    f"Soil moisture ({m}%) is in optimal range ({low}-{high}%). "
                    "No irrigation needed today."
                ),
                reason_text_localized=(
                    f"Mitti mein nami {m}% hai jo bilkul sahi hai ({low}-{high}%). "
                    "Aaj paani dene ki zaroorat nahi."
                ),
                data_used=self._used("is_raining", "soil_moisture_pct", "crop_type"),
                **extras
            )

        crop_local = local_crop_name(crop.type)

        if moisture < band.min:
            critical = moisture < band.critical_low
            factor = self.weather_factor(reading, weather)
            amount = self.water_amount(reading.temperature_c, critical=critical, factor=factor)
            mm = _pct(amount)
            if critical:
                reason = f"CRITICAL: Soil moisture ({m}%) is dangerously low! Give {mm}mm water immediately."
                localized = f"EMERGENCY: Mitti mein nami sirf {m}% hai! Turant {mm}mm paani dein. Fasal sukh rahi hai."
                confidence = self.band_confidence(moisture, 0, band.critical_low)
            else:
                reason = f"Soil moisture ({m}%) is low. {crop.type.capitalize()} needs {mm}mm water."
                localized = f"Mitti mein nami {m}% hai jo kam hai. {crop_local} ko {mm}mm paani dein."
                confidence = self.band_confidence(moisture, band.critical_low, band.min)
            forecast = ["rain_probability_pct"] + (["rainfall_mm"] if weather is not None else [])
            return IrrigationVerdict(
                should_act=True,
                action=IrrigationAction.IRRIGATE,
                amount_mm=amount,
                urgency=urgency,
                confidence_pct=confidence,
                reason_text=reason,
                reason_text_localized=localized,
                data_used=self._used(
                    "is_raining", "soil_moisture_pct", "crop_type", "temperature_c", "humidity_pct", *forecast
                ),
                weather_factor=factor,
                **extras
            )

        return IrrigationVerdict(
            should_act=False,
            action=IrrigationAction.REDUCE,
            amount_mm=0,
            urgency=urgency,
            confidence_pct=self.band_confidence(moisture, band.max, c.over_irrigation_pct),
            reason_text=(
                f"Soil moisture ({m}%) is slightly above the optimal range ({low}-{high}%). "
                "Reduce watering."
            ),
            reason_text_localized=(
                f"Mitti mein nami {m}% hai jo sahi range ({low}-{high}%) se thodi zyada hai. "
                "Paani kam karein."
            ),
            data_used=self._used("is_raining", "soil_moisture_pct", "crop_type"),
            **extras
        )

    # ---------- WATER SAVINGS ----------

    @staticmethod
    def calculate_water_savings(traditional_mm: float, recommended_mm: float) -> WaterSavings:
        saved = max(0.0, traditional_mm - recommended_mm)
        percentage = round(saved / traditional_mm * 100) if traditional_mm > 0 else 0
        if percentage > 0:
            text = f"Smart irrigation se {_pct(saved)}mm ({percentage}%) paani bach raha hai!"
        else:
            text = "Aaj recommended amount hi use ho rahi hai."
        return WaterSavings(saved_mm=saved, percentage=percentage, localized_text=text)
