# tests/test_irrigation.py
import pytest

from agents.irrigation.agent import IrrigationAgent
from agents.irrigation.models import IrrigationAction
from core.config import Settings
from core.crop_data import OPTIMAL_MOISTURE
from core.exceptions import AgentConfigError
from core.models import CropProfile, GrowthStage, ReadingSnapshot, Urgency, WeatherSnapshot

WHEAT = CropProfile(type="wheat", stage=GrowthStage.VEGETATIVE)
RICE = CropProfile(type="rice", stage=GrowthStage.FLOWERING)

@pytest.fixture
def agent(settings):
    return IrrigationAgent(settings)

def reading(**fields) -> ReadingSnapshot:
    return ReadingSnapshot(**fields)

def test_low_moisture_scenario(agent):
    verdict = agent.decide(reading(soil_moisture_pct=35, temperature_c=30), WHEAT)
    assert verdict.action == IrrigationAction.IRRIGATE
    assert verdict.should_act
    assert verdict.urgency == Urgency.MEDIUM
    assert 10 <= verdict.amount_mm <= 20
    assert verdict.amount_mm == 15

def test_over_irrigation_scenario(agent):
    verdict = agent.decide(reading(soil_moisture_pct=85), WHEAT)
    assert verdict.action == IrrigationAction.STOP
    assert verdict.urgency == Urgency.HIGH
    assert verdict.amount_mm == 0

def test_saturated_soil_is_critical(agent):
    verdict = agent.decide(reading(soil_moisture_pct=95), WHEAT)
    assert verdict.action == IrrigationAction.STOP
    assert verdict.urgency == Urgency.CRITICAL

@pytest.mark.parametrize("moisture", [0, 10, 24, 35, 55, 75, 85, 100])
def test_rain_dominates(agent, moisture):
    verdict = agent.decide(reading(soil_moisture_pct=moisture, is_raining=True), WHEAT)
    assert verdict.action == IrrigationAction.STOP
    assert verdict.amount_mm == 0
    assert verdict.urgency == Urgency.LOW
    assert verdict.data_used == ["is_raining", "temperature_c", "humidity_pct", "crop_type", "crop_stage"]

@pytest.mark.parametrize("moisture", [40, 55, 70])
def test_in_band_needs_nothing(agent, moisture):
    verdict = agent.decide(reading(soil_moisture_pct=moisture), WHEAT)
    assert verdict.action == IrrigationAction.STOP
    assert verdict.urgency == Urgency.LOW
    assert verdict.amount_mm == 0

def test_critical_low_moisture(agent):
    verdict = agent.decide(reading(soil_moisture_pct=20, temperature_c=30), WHEAT)
    assert verdict.action == IrrigationAction.IRRIGATE
    assert verdict.urgency == Urgency.CRITICAL
    assert verdict.amount_mm == 22.5
    assert verdict.reason_text.startswith("CRITICAL")
    assert verdict.reason_text_localized.startswith("EMERGENCY")

@pytest.mark.parametrize("moisture, urgency", [(28, Urgency.HIGH), (32.5, Urgency.MEDIUM), (39, Urgency.MEDIUM)])
def test_below_band_urgency_halves(agent, moisture, urgency):
    verdict = agent.decide(reading(soil_moisture_pct=moisture), WHEAT)
    assert verdict.action == IrrigationAction.IRRIGATE
    assert verdict.urgency == urgency

@pytest.mark.parametrize("moisture, urgency", [(72, Urgency.LOW), (75, Urgency.LOW), (78, Urgency.MEDIUM), (80, Urgency.MEDIUM)])
def test_slightly_wet_is_reduce(agent, moisture, urgency):
    verdict = agent.decide(reading(soil_moisture_pct=moisture), WHEAT)
    assert verdict.action == IrrigationAction.REDUCE
    assert verdict.urgency == urgency
    assert not verdict.should_act

def test_hot_day_adds_water(agent):
    warm = agent.decide(reading(soil_moisture_pct=30, temperature_c=35), WHEAT)
    hot = agent.decide(reading(soil_moisture_pct=30, temperature_c=37), WHEAT)
    assert warm.amount_mm == 15
    assert hot.amount_mm == 25

def test_irrigate_data_used(agent):
    verdict = agent.decide(reading(soil_moisture_pct=30), WHEAT)
    assert verdict.data_used == [
        "is_raining", "soil_moisture_pct", "crop_type", "temperature_c", "humidity_pct",
        "rain_probability_pct", "crop_stage",
    ]

def test_data_used_with_weather_names_rainfall(agent):
    verdict = agent.decide(reading(soil_moisture_pct=30), WHEAT, WeatherSnapshot(rainfall_mm=10))
    assert "rainfall_mm" in verdict.data_used
    assert verdict.weather_factor == 0.6
    assert verdict.amount_mm == 9

@pytest.mark.parametrize("moisture", [55, 75, 85])
def test_non_irrigate_verdicts_name_the_demand_fields(agent, moisture):
    verdict = agent.decide(reading(soil_moisture_pct=moisture), WHEAT)
    assert {"humidity_pct", "crop_stage", "temperature_c", "crop_type"} <= set(verdict.data_used)

def test_unknown_crop_uses_default_band(agent):
    verdict = agent.decide(reading(soil_moisture_pct=35), CropProfile(type="maize"))
    assert verdict.action == IrrigationAction.IRRIGATE

def test_rice_band(agent):
    verdict = agent.decide(reading(soil_moisture_pct=70), RICE)
    assert verdict.action == IrrigationAction.IRRIGATE
    assert "Dhan" in verdict.reason_text_localized

def test_defaults_give_an_answer(agent):
    verdict = agent.decide(ReadingSnapshot(), CropProfile())
    assert verdict.action == IrrigationAction.STOP
    assert verdict.crop_coefficient == pytest.approx(0.775)
    assert verdict.daily_demand_mm > 0

@pytest.mark.parametrize("crop_type", list(OPTIMAL_MOISTURE))
def test_properties_over_the_moisture_range(agent, crop_type):
    crop = CropProfile(type=crop_type)
    band = OPTIMAL_MOISTURE[crop_type]
    for moisture in range(0, 101):
        for temperature in (10, 30, 40):
            for raining in (False, True):
                r = reading(soil_moisture_pct=moisture, temperature_c=temperature, is_raining=raining)
                verdict = agent.decide(r, crop)

                assert verdict.amount_mm >= 0
                assert verdict.should_act == (verdict.action == IrrigationAction.IRRIGATE)
                assert 60 <= verdict.confidence_pct <= 98
                assert verdict.reason_text and verdict.reason_text_localized
                if raining:
                    assert verdict.action == IrrigationAction.STOP
                elif band.critical_low <= moisture < band.min and moisture <= 80:
                    assert verdict.action == IrrigationAction.IRRIGATE
                    assert verdict.amount_mm > 0

def test_decisions_are_repeatable(agent):
    r = reading(soil_moisture_pct=33, temperature_c=36)
    assert agent.decide(r, WHEAT) == agent.decide(r, WHEAT)

def test_confidence_peaks_at_band_center(agent):
    center = agent.decide(reading(soil_moisture_pct=55), WHEAT)
    edge = agent.decide(reading(soil_moisture_pct=41), WHEAT)
    assert center.confidence_pct == 98
    assert edge.confidence_pct < center.confidence_pct

def test_rain_forecast_wait_is_off_by_default(agent):
    verdict = agent.decide(reading(soil_moisture_pct=30, rain_probability_pct=90), WHEAT)
    assert verdict.action == IrrigationAction.IRRIGATE

def test_rain_forecast_wait_when_enabled():
    agent = IrrigationAgent(Settings(_env_file=None, irrigation_config={"rain_forecast_wait_pct": 60}))
    verdict = agent.decide(reading(soil_moisture_pct=30, rain_probability_pct=90), WHEAT)
    assert verdict.action == IrrigationAction.WAIT
    assert verdict.amount_mm == 0
    assert "rain_probability_pct" in verdict.data_used

def test_constants_are_overridable():
    agent = IrrigationAgent(Settings(_env_file=None, irrigation_config={"base_irrigation_mm": 20}))
    verdict = agent.decide(reading(soil_moisture_pct=35, temperature_c=30), WHEAT)
    assert verdict.amount_mm == 20

def test_invalid_constants_rejected():
    with pytest.raises(AgentConfigError):
        IrrigationAgent(Settings(_env_file=None, irrigation_config={"over_irrigation_pct": 95}))
    with pytest.raises(AgentConfigError):
        IrrigationAgent(Settings(_env_file=None, irrigation_config={"unknown_knob": 1}))

def test_failure_returns_fallback_verdict(agent, monkeypatch):
    def broken(reading, crop, weather=None):
        raise RuntimeError("sensor glitch")

    monkeypatch.setattr(agent.service, "decide", broken)
    verdict = agent.decide(reading(), WHEAT)
    assert verdict.action == IrrigationAction.WAIT
    assert verdict.amount_mm == 0

def test_shared_urgency_classifier(agent):
    assert agent.moisture_urgency(95, "wheat") == Urgency.CRITICAL
    assert agent.moisture_urgency(85, "wheat") == Urgency.HIGH
    assert agent.moisture_urgency(50, "wheat") == Urgency.LOW
    assert agent.moisture_urgency(20, "wheat") == Urgency.CRITICAL

def test_water_savings(agent):
    savings = agent.water_savings(50, 30)
    assert savings.saved_mm == 20
    assert savings.percentage == 40
    assert agent.water_savings(30, 30).percentage == 0

def test_crop_profiles(agent):
    names = [profile["name"] for profile in agent.get_crop_profiles()]
    assert names == ["wheat", "rice", "cotton"]

@pytest.mark.parametrize("fields, weather, expected", [
    ({"temperature_c": 30}, WeatherSnapshot(rain_probability_pct=80), 7.5),
    ({"temperature_c": 30}, WeatherSnapshot(rain_probability_pct=50), 11.2),
    ({"temperature_c": 30}, WeatherSnapshot(rainfall_mm=25), 4.5),
    ({"temperature_c": 39}, WeatherSnapshot(), 30),
    ({"temperature_c": 30, "humidity_pct": 30}, WeatherSnapshot(), 16.5),
])
def test_weather_scales_the_amount(agent, fields, weather, expected):
    verdict = agent.decide(reading(soil_moisture_pct=35, **fields), WHEAT, weather)
    assert verdict.amount_mm == expected

def test_weather_rain_chance_replaces_the_reading_one(agent):
    wet_reading = reading(soil_moisture_pct=35, temperature_c=30, rain_probability_pct=90)
    assert agent.decide(wet_reading, WHEAT).amount_mm == 7.5
    assert agent.decide(wet_reading, WHEAT, WeatherSnapshot(rain_probability_pct=10)).amount_mm == 15

def test_humid_air_trims_the_amount(agent):
    verdict = agent.decide(reading(soil_moisture_pct=35, temperature_c=30, humidity_pct=90), WHEAT, WeatherSnapshot())
    assert verdict.weather_factor == 0.85
    assert verdict.amount_mm == pytest.approx(12.75, abs=0.05)
