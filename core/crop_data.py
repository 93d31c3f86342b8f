# core/crop_data.py
"""
Static crop reference tables (FAO Kc, ICAR moisture bands and fertilizer doses)
"""
from types import MappingProxyType
from typing import Mapping, NamedTuple

class CropCoefficients(NamedTuple):
    initial: float
    mid: float
    end: float

class MoistureBand(NamedTuple):
    min: float
    max: float
    critical_low: float

class FertilizerRec(NamedTuple):
    fertilizer_name: str
    quantity: str
    timing_text: str
    reason_text: str

DEFAULT_CROP = "wheat"

CROP_KC_VALUES: Mapping[str, CropCoefficients] = MappingProxyType({
    "wheat": CropCoefficients(initial=0.4, mid=1.15, end=0.4),
    "rice": CropCoefficients(initial=1.05, mid=1.2, end=0.9),
    "cotton": CropCoefficients(initial=0.35, mid=1.2, end=0.5),
})

OPTIMAL_MOISTURE: Mapping[str, MoistureBand] = MappingProxyType({
    "wheat": MoistureBand(min=40, max=70, critical_low=25),
    "rice": MoistureBand(min=80, max=100, critical_low=60),
    "cotton": MoistureBand(min=35, max=65, critical_low=20),
})

NO_FERTILIZER = "Koi nahi"

FERTILIZER_DATA: Mapping[str, Mapping[str, FertilizerRec]] = MappingProxyType({
    "wheat": MappingProxyType({
        "sowing": FertilizerRec(
            "DAP (Diammonium Phosphate)", "50 kg/acre", "Sowing ke time",
            "Root development ke liye phosphorus zaroori hai"),
        "vegetative": FertilizerRec(
            "Urea", "40 kg/acre", "Sowing ke 20-25 din baad",
            "Nitrogen se patti aur tana achhe se badhte hain"),
        "flowering": FertilizerRec(
            "MOP (Muriate of Potash)", "25 kg/acre", "Flowering start hone par",
            "Potash se daana bhari hota hai"),
        "harvesting": FertilizerRec(
            NO_FERTILIZER, "0 kg", "N/A",
            "Harvesting stage mein fertilizer nahi chahiye"),
    }),
    "rice": MappingProxyType({
        "sowing": FertilizerRec(
            "DAP", "60 kg/acre", "Transplanting ke time",
            "Seedling establishment ke liye"),
        "vegetative": FertilizerRec(
            "Urea", "50 kg/acre", "Transplanting ke 3-4 hafte baad",
            "Tillers badhane ke liye nitrogen"),
        "flowering": FertilizerRec(
            "MOP", "30 kg/acre", "Panicle initiation par",
            "Grain filling ke liye potassium"),
        "harvesting": FertilizerRec(
            NO_FERTILIZER, "0 kg", "N/A",
            "Harvest ke time fertilizer nahi dena"),
    }),
    "cotton": MappingProxyType({
        "sowing": FertilizerRec(
            "DAP", "45 kg/acre", "Sowing ke time",
            "Root growth ke liye phosphorus"),
        "vegetative": FertilizerRec(
            "Urea", "45 kg/acre", "Sowing ke 30-35 din baad",
            "Vegetative growth ke liye nitrogen boost"),
        "flowering": FertilizerRec(
            "MOP + Borax", "35 kg MOP + 2 kg Borax/acre", "Square formation par",
            "Boll formation aur retention ke liye"),
        "harvesting": FertilizerRec(
            NO_FERTILIZER, "0 kg", "N/A",
            "Picking stage mein fertilizer nahi"),
    }),
})

GENERIC_FERTILIZER = FertilizerRec(
    "NPK Complex (10:26:26)", "40 kg/acre", "General use",
    "Standard balanced fertilizer for unknown crop")

DEFAULT_STAGE_ROW = "vegetative"

# Soil-test nutrient requirement per crop, kg/ha
NUTRIENT_REQUIREMENTS: Mapping[str, Mapping[str, float]] = MappingProxyType({
    "wheat": MappingProxyType({"N": 120, "P": 60, "K": 40}),
    "rice": MappingProxyType({"N": 100, "P": 50, "K": 50}),
    "cotton": MappingProxyType({"N": 80, "P": 40, "K": 40}),
})

CROP_NAMES_LOCAL: Mapping[str, str] = MappingProxyType({
    "wheat": "Gehun",
    "rice": "Dhan",
    "cotton": "Kapas",
})

STAGE_NAMES_LOCAL: Mapping[str, str] = MappingProxyType({
    "sowing": "buwai",
    "vegetative": "vegetative growth",
    "flowering": "flowering",
    "harvesting": "harvesting",
})

def get_moisture_band(crop_type: str) -> MoistureBand:
    return OPTIMAL_MOISTURE.get(crop_type, OPTIMAL_MOISTURE[DEFAULT_CROP])

def get_crop_coefficients(crop_type: str) -> CropCoefficients:
    return CROP_KC_VALUES.get(crop_type, CROP_KC_VALUES[DEFAULT_CROP])

def local_crop_name(crop_type: str) -> str:
    return CROP_NAMES_LOCAL.get(crop_type, crop_type.capitalize())
