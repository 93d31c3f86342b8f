# core/weather.py
"""
Offline weather reference - seasonal estimates, field advisories and the irrigation factor
"""
from datetime import datetime
from types import MappingProxyType
from typing import Mapping, NamedTuple

from core.models import WeatherCondition, WeatherSnapshot, WeatherSource

class SeasonalPattern(NamedTuple):
    min_temp_c: float
    max_temp_c: float
    humidity_pct: float
    rainfall_mm: float
    rainy_days: int
    season: str

class WeatherAdvisory(NamedTuple):
    kind: str
    title: str
    localized_text: str

# North Indian plains monthly normals (IMD)
SEASONAL_PATTERNS: Mapping[int, SeasonalPattern] = MappingProxyType({
    1: SeasonalPattern(7, 21, 70, 18, 2, "winter"),
    2: SeasonalPattern(10, 24, 60, 22, 2, "winter"),
    3: SeasonalPattern(15, 30, 45, 15, 2, "summer"),
    4: SeasonalPattern(21, 37, 35, 10, 1, "summer"),
    5: SeasonalPattern(26, 41, 35, 18, 2, "summer"),
    6: SeasonalPattern(28, 40, 55, 65, 5, "monsoon"),
    7: SeasonalPattern(27, 35, 80, 210, 14, "monsoon"),
    8: SeasonalPattern(26, 34, 82, 230, 13, "monsoon"),
    9: SeasonalPattern(25, 34, 75, 130, 8, "monsoon"),
    10: SeasonalPattern(19, 33, 60, 25, 2, "post-monsoon"),
    11: SeasonalPattern(12, 28, 55, 5, 1, "post-monsoon"),
    12: SeasonalPattern(8, 23, 65, 10, 1, "winter"),
})

SEASON_ADVICE: Mapping[str, str] = MappingProxyType({
    "winter": "Sardi ka mausam hai. Frost se bachne ke liye shaam ko halki sinchai karein.",
    "summer": "Garmi ka mausam hai. Subah jaldi ya shaam ko sinchai karein.",
    "monsoon": "Monsoon ka mausam hai. Drainage ka dhyan rakhein, zyada sinchai na karein.",
    "post-monsoon": "Rabi ki buvai ka samay hai. Mitti ki nami check karke buvai karein.",
})

DEFAULT_WEATHER_MAX_AGE_S = 3 * 3600

def _daytime_factor(hour: int) -> float:
    if 6 <= hour < 10:
        return 0.3
    if 10 <= hour < 16:
        return 0.9
    if 16 <= hour < 20:
        return 0.6
    return 0.2

def seasonal_weather(moment: datetime) -> WeatherSnapshot:
    """Climatology estimate for the given moment, used once cached weather is stale"""
    pattern = SEASONAL_PATTERNS[moment.month]
    span = pattern.max_temp_c - pattern.min_temp_c
    rain_chance = round(pattern.rainy_days / 30 * 100)
    return WeatherSnapshot(
        current_temp_c=round(pattern.min_temp_c + span * _daytime_factor(moment.hour), 1),
        forecast_temp_c=pattern.max_temp_c,
        rainfall_mm=0.0,
        rain_probability_pct=rain_chance,
        condition=WeatherCondition.CLOUDY if pattern.rainy_days >= 8 else WeatherCondition.SUNNY,
        forecast_text=SEASON_ADVICE[pattern.season],
        source=WeatherSource.SEASONAL,
        last_updated=None
    )

def weather_irrigation_factor(temperature_c: float, humidity_pct: float,
                              rain_probability_pct: float, rainfall_mm: float) -> float:
    """Multiplier for the irrigation amount; 1.0 under ordinary conditions"""
    factor = 1.0

    if temperature_c > 38:
        factor *= 1.2
    elif temperature_c < 15:
        factor *= 0.8

    if humidity_pct > 80:
        factor *= 0.85
    elif humidity_pct < 40:
        factor *= 1.1

    if rain_probability_pct > 70:
        factor *= 0.5
    elif rain_probability_pct > 40:
        factor *= 0.75

    if rainfall_mm > 20:
        factor *= 0.3
    elif rainfall_mm > 5:
        factor *= 0.6

    return round(factor, 2)

def weather_advisory(temperature_c: float, humidity_pct: float, rain_probability_pct: float) -> WeatherAdvisory:
    if temperature_c > 40:
        return WeatherAdvisory(
            "alert", "Bahut Zyada Garmi Alert",
            f"Temperature {temperature_c:g}°C hai. Dopahar mein khet ka kaam na karein. "
            "Subah ya shaam ko sinchai karein."
        )
    if rain_probability_pct > 60:
        return WeatherAdvisory(
            "caution", "Baarish Aa Sakti Hai",
            f"{round(rain_probability_pct)}% chance hai baarish ka. Aaj sinchai mat karein. Spray bhi kal karein."
        )
    if humidity_pct > 85:
        return WeatherAdvisory(
            "caution", "Zyada Humidity - Bimari Ka Risk",
            "Hawa mein nami bahut zyada hai. Fungal bimari ka khatra hai, fasal par nazar rakhein."
        )
    return WeatherAdvisory(
        "favorable", "Mausam Sahi Hai",
        "Aaj ka mausam kheti ke kaam ke liye theek hai."
    )
