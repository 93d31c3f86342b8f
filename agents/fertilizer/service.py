# agents/fertilizer/service.py
"""
Fertilizer service - total (crop, stage) table lookup with health warnings
"""
from typing import Tuple

from agents.fertilizer.models import FertilizerDecision, FertilizerRecommendation, SoilTestAdvice
from core.crop_data import (
    DEFAULT_CROP, DEFAULT_STAGE_ROW, FERTILIZER_DATA, GENERIC_FERTILIZER, NO_FERTILIZER,
    NUTRIENT_REQUIREMENTS, STAGE_NAMES_LOCAL, FertilizerRec, local_crop_name
)
from core.models import HealthStatus

NEXT_APPLICATION = {
    "sowing": "20-25 din baad (vegetative stage par)",
    "vegetative": "25-30 din baad (flowering shuru hone par)",
    "flowering": "Is season mein aur fertilizer nahi",
    "harvesting": "Next season ke liye soil testing karwayein",
}

WEAK_HEALTH = (HealthStatus.POOR, HealthStatus.FAIR)

def lookup(crop_type: str, stage: str) -> Tuple[FertilizerRec, str]:
    """Never fails: unknown crop -> generic row, unknown stage -> the crop's default row"""
    crop_rows = FERTILIZER_DATA.get(crop_type)
    if crop_rows is None:
        return GENERIC_FERTILIZER, "generic"
    row = crop_rows.get(stage)
    if row is None:
        return crop_rows[DEFAULT_STAGE_ROW], "default_stage"
    return row, "table"

class FertilizerService:
    """ICAR-based fertilizer recommendations"""

    def recommend(self, crop_type: str, stage: str, health_status: HealthStatus) -> FertilizerDecision:
        crop_type = (crop_type or "").strip().lower()
        stage = (stage or "").strip().lower()
        row, source = lookup(crop_type, stage)
        fertilizer = FertilizerRecommendation(**row._asdict())
        recommended = row.fertilizer_name != NO_FERTILIZER
        warnings = []

        if source == "generic":
            localized = f"Aapki fasal ke liye {row.fertilizer_name} {row.quantity} recommended hai."
            next_application = "3-4 hafte baad"
        elif source == "default_stage":
            localized = "Is stage ki specific recommendation available nahi hai. General advice follow karein."
            next_application = "Growth stage ke hisaab se"
        elif not recommended:
            crop_local = local_crop_name(crop_type)
            stage_local = STAGE_NAMES_LOCAL.get(stage, stage)
            localized = (
                f"{crop_local} ke {stage_local} stage mein fertilizer dene ki zaroorat nahi hai. "
                "Harvesting ke time khad nahi deni chahiye."
            )
            next_application = NEXT_APPLICATION[stage]
        else:
            crop_local = local_crop_name(crop_type)
            stage_local = STAGE_NAMES_LOCAL.get(stage, stage)
            localized = (
                f"{crop_local} ke {stage_local} stage ke liye {row.fertilizer_name} {row.quantity} "
                f"recommended hai. {row.reason_text}. Fertilizer subah ya shaam mein dalein."
            )
            next_application = NEXT_APPLICATION[stage]

        if recommended:
            warnings.append("Fertilizer dalne ke baad halki sinchai zaroor karein.")
            if stage == "flowering":
                warnings.append("Flowering stage mein zyada nitrogen avoid karein.")
        if health_status in WEAK_HEALTH:
            warnings.append(
                "Fasal ki health kamzor hai: nitrogen kam karein jab tak health theek na ho "
                "(reduce nitrogen until health recovers)."
            )

        if recommended:
            text = f"{row.fertilizer_name} - {row.quantity}. {row.reason_text}"
        else:
            text = f"No fertilizer needed at this stage. {row.reason_text}"

        return FertilizerDecision(
            recommended=recommended,
            fertilizer=fertilizer,
            source=source,
            text=text,
            localized_text=localized,
            next_application=next_application,
            warnings=warnings,
            data_used=["crop_type", "crop_stage", "health_status"]
        )

    @staticmethod
    def soil_test_advice(nitrogen: float, phosphorus: float, potassium: float,
                         crop_type: str) -> SoilTestAdvice:
        """Deficiency advice from available N/P/K (kg/ha)"""
        required = NUTRIENT_REQUIREMENTS.get(crop_type, NUTRIENT_REQUIREMENTS[DEFAULT_CROP])
        deficiencies = []
        recommendations = []

        if nitrogen < required["N"] * 0.5:
            deficiencies.append("Nitrogen (N) ki kami hai")
            recommendations.append(f"Urea {round((required['N'] - nitrogen) * 2.17)} kg/ha dalein")
        if phosphorus < required["P"] * 0.5:
            deficiencies.append("Phosphorus (P) ki kami hai")
            recommendations.append(f"DAP {round((required['P'] - phosphorus) * 2.17)} kg/ha dalein")
        if potassium < required["K"] * 0.5:
            deficiencies.append("Potassium (K) ki kami hai")
            recommendations.append(f"MOP {round((required['K'] - potassium) * 1.67)} kg/ha dalein")

        if not deficiencies:
            text = "Mitti mein sabhi nutrients sufficient hain. Standard dose follow karein."
        else:
            text = f"{', '.join(deficiencies)}. {'. '.join(recommendations)}."

        return SoilTestAdvice(
            deficiencies=deficiencies,
            recommendations=recommendations,
            localized_text=text
        )
