# tests/test_weather.py
from datetime import datetime, timezone

import pytest

from core.models import WeatherCondition, WeatherSource
from core.weather import seasonal_weather, weather_advisory, weather_irrigation_factor

@pytest.mark.parametrize("hour, expected", [(7, 12.5), (13, 21.5), (18, 17.0), (23, 11.0)])
def test_seasonal_temperature_follows_the_time_of_day(hour, expected):
    moment = datetime(2025, 12, 1, hour, 0, tzinfo=timezone.utc)
    assert seasonal_weather(moment).current_temp_c == expected

def test_monsoon_estimate():
    weather = seasonal_weather(datetime(2025, 7, 15, 12, 0, tzinfo=timezone.utc))
    assert weather.source == WeatherSource.SEASONAL
    assert weather.rain_probability_pct == 47
    assert weather.condition == WeatherCondition.CLOUDY
    assert weather.forecast_temp_c == 35
    assert "Monsoon" in weather.forecast_text

def test_dry_month_estimate():
    weather = seasonal_weather(datetime(2025, 4, 10, 12, 0, tzinfo=timezone.utc))
    assert weather.rain_probability_pct == 3
    assert weather.condition == WeatherCondition.SUNNY
    assert weather.last_updated is None

@pytest.mark.parametrize("temp, humidity, rain, rainfall, expected", [
    (32, 65, 15, 0, 1.0),
    (40, 65, 15, 0, 1.2),
    (12, 65, 15, 0, 0.8),
    (32, 85, 15, 0, 0.85),
    (32, 30, 15, 0, 1.1),
    (32, 65, 80, 0, 0.5),
    (32, 65, 50, 0, 0.75),
    (32, 65, 15, 25, 0.3),
    (32, 65, 15, 10, 0.6),
    (40, 30, 50, 10, 0.59),
])
def test_weather_irrigation_factor(temp, humidity, rain, rainfall, expected):
    assert weather_irrigation_factor(temp, humidity, rain, rainfall) == expected

def test_advisory_heat_comes_first():
    advisory = weather_advisory(42, 90, 80)
    assert advisory.kind == "alert"
    assert advisory.title == "Bahut Zyada Garmi Alert"

def test_advisory_rain():
    advisory = weather_advisory(30, 60, 75)
    assert advisory.kind == "caution"
    assert advisory.localized_text == "75% chance hai baarish ka. Aaj sinchai mat karein. Spray bhi kal karein."

def test_advisory_humidity_and_favorable():
    assert weather_advisory(30, 90, 20).title == "Zyada Humidity - Bimari Ka Risk"
    assert weather_advisory(30, 60, 20).kind == "favorable"
