# agents/alerts/service.py
"""
Alert evaluation - a pure sweep over the reading, the crop and the last verdict
"""
from datetime import datetime, timezone
from typing import Mapping, Optional
from types import MappingProxyType

from agents.alerts.models import AlertKind, AlertMemory, AlertRecord, AlertSeverity, AlertSweep
from agents.irrigation.models import IrrigationAction, IrrigationConstants, IrrigationVerdict
from agents.irrigation.service import IrrigationService
from core.crop_data import get_moisture_band, local_crop_name
from core.models import CropProfile, ReadingSnapshot, Urgency

URGENCY_SEVERITY: Mapping[Urgency, AlertSeverity] = MappingProxyType({
    Urgency.CRITICAL: AlertSeverity.HIGH,
    Urgency.HIGH: AlertSeverity.MEDIUM,
    Urgency.MEDIUM: AlertSeverity.LOW,
    Urgency.LOW: AlertSeverity.LOW,
})

def _pct(value: float) -> str:
    return f"{value:g}"

def evaluate_alerts(reading: ReadingSnapshot,
                    crop: CropProfile,
                    last_verdict: Optional[IrrigationVerdict],
                    memory: AlertMemory,
                    irrigation: Optional[IrrigationService] = None,
                    consecutive_over_sweeps: int = 2) -> AlertSweep:
    """
    Evaluate one alert sweep.

    Returns the alerts raised by this sweep and the memory to hand to the
    next one. Nothing is mutated.

    - over_irrigation: moisture above the over-irrigation limit on
      `consecutive_over_sweeps` sweeps in a row, or above saturation at once
    - under_irrigation: moisture below the crop's optimal minimum
    - weather_cancel: rain starts while the last verdict was to irrigate
    """
    irrigation = irrigation or IrrigationService(IrrigationConstants())
    constants = irrigation.constants
    band = get_moisture_band(crop.type)
    moisture = reading.soil_moisture_pct
    timestamp = reading.last_updated or datetime.now(timezone.utc)
    severity = URGENCY_SEVERITY[irrigation.moisture_urgency(moisture, band)]
    m = _pct(moisture)
    alerts = []

    over = moisture > constants.over_irrigation_pct
    consecutive = memory.consecutive_over_sweeps + 1 if over else 0
    if over and (moisture > constants.saturation_pct or consecutive >= consecutive_over_sweeps):
        limit = _pct(constants.over_irrigation_pct)
        alerts.append(AlertRecord(
            kind=AlertKind.OVER_IRRIGATION,
            severity=severity,
            message=f"Soil moisture is {m}%, above {limit}%. Stop irrigation to avoid waterlogging.",
            localized_message=f"Mitti mein nami {m}% hai, {limit}% se zyada. Paani band karein, jalbharav ka khatra hai.",
            timestamp=timestamp
        ))

    if moisture < band.min:
        low = _pct(band.min)
        alerts.append(AlertRecord(
            kind=AlertKind.UNDER_IRRIGATION,
            severity=severity,
            message=f"Soil moisture is {m}%, below the {low}% minimum for {crop.type}. Irrigate soon.",
            localized_message=(
                f"Mitti mein nami {m}% hai jo {local_crop_name(crop.type)} ke liye "
                f"{low}% se kam hai. Jaldi paani dein."
            ),
            timestamp=timestamp
        ))

    pending_irrigation = last_verdict is not None and last_verdict.action == IrrigationAction.IRRIGATE
    if reading.is_raining and not memory.was_raining and pending_irrigation:
        alerts.append(AlertRecord(
            kind=AlertKind.WEATHER_CANCEL,
            severity=AlertSeverity.MEDIUM,
            message="Rain has started. Cancel the planned irrigation.",
            localized_message="Baarish shuru ho gayi hai. Planned sinchai cancel karein.",
            timestamp=timestamp
        ))

    return AlertSweep(
        alerts=alerts,
        memory=AlertMemory(consecutive_over_sweeps=consecutive, was_raining=reading.is_raining)
    )
