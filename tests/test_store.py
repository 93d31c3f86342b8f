# tests/test_store.py
import pytest

from core.exceptions import ReadingValidationError
from core.models import GrowthStage, WeatherSource

def test_defaults_before_first_update(store):
    reading = store.get()
    assert store.is_default
    assert reading.last_updated is None
    assert reading.soil_moisture_pct == 42
    assert reading.temperature_c == 32
    assert reading.is_raining is False

def test_get_returns_a_copy(store):
    reading = store.get()
    reading.soil_moisture_pct = 10
    assert store.get().soil_moisture_pct == 42

def test_update_then_get_reflects_merged_fields(store, clock):
    before = store.get()
    store.update({"soil_moisture_pct": 35}, temperature_c=30)
    after = store.get()

    assert after.soil_moisture_pct == 35
    assert after.temperature_c == 30
    assert after.humidity_pct == before.humidity_pct
    assert after.last_updated == clock.now
    assert not store.is_default

def test_last_updated_strictly_increases_with_a_stalled_clock(store):
    first = store.update(soil_moisture_pct=50).last_updated
    second = store.update(soil_moisture_pct=51).last_updated
    assert second > first

def test_last_updated_follows_the_clock(store, clock):
    first = store.update(soil_moisture_pct=50).last_updated
    clock.advance(60)
    second = store.update(soil_moisture_pct=51).last_updated
    assert (second - first).total_seconds() == 60

def test_unknown_field_is_rejected(store):
    with pytest.raises(ReadingValidationError):
        store.update(leaf_wetness=3)
    assert store.is_default

def test_last_updated_cannot_be_set_directly(store):
    with pytest.raises(ReadingValidationError):
        store.update(last_updated="2025-01-01T00:00:00Z")

def test_out_of_range_value_is_rejected_and_store_unchanged(store):
    with pytest.raises(ReadingValidationError):
        store.update(soil_moisture_pct=150)
    assert store.get().soil_moisture_pct == 42

def test_validation_error_is_a_value_error(store):
    with pytest.raises(ValueError):
        store.update(humidity_pct=-5)

def test_preview_does_not_store(store):
    preview = store.preview({"soil_moisture_pct": 20})
    assert preview.soil_moisture_pct == 20
    assert store.get().soil_moisture_pct == 42
    assert store.is_default

def test_randomize_stays_in_demo_ranges(store):
    for _ in range(50):
        reading = store.randomize()
        assert 10 <= reading.soil_moisture_pct <= 90
        assert 15 <= reading.temperature_c <= 40
        assert 40 <= reading.humidity_pct <= 80
        assert 0 <= reading.rain_probability_pct <= 100
        assert reading.last_updated is not None

@pytest.mark.parametrize("fields, expected", [
    ({"soil_moisture_pct": 42, "temperature_c": 32}, 41),
    ({"soil_moisture_pct": 42, "temperature_c": 36}, 40),
    ({"soil_moisture_pct": 10.5, "temperature_c": 30}, 10),
    ({"soil_moisture_pct": 50, "is_raining": True}, 55),
    ({"soil_moisture_pct": 93, "is_raining": True}, 95),
])
def test_simulate_tick(store, fields, expected):
    store.update(fields)
    assert store.simulate_tick().soil_moisture_pct == expected

def test_weather_and_crop_updates(store):
    store.update_weather(rain_probability_pct=80, condition="cloudy")
    crop = store.update_crop({"type": " Rice ", "stage": "flowering"})

    assert store.get_weather().rain_probability_pct == 80
    assert crop.type == "rice"
    assert crop.stage == GrowthStage.FLOWERING

def test_invalid_crop_update_is_rejected(store):
    with pytest.raises(ReadingValidationError):
        store.update_crop(stage="ripening")
    with pytest.raises(ReadingValidationError):
        store.update_crop(variety="HD-2967")

def test_revision_counts_reading_changes(store):
    assert store.revision == 0
    store.update(soil_moisture_pct=50)
    store.simulate_tick()
    assert store.revision == 2

    store.preview({"soil_moisture_pct": 20})
    store.update_crop(stage="flowering")
    assert store.revision == 2

def test_sync_reading_keeps_the_remote_stamp(store):
    remote = {
        "soil_moisture_pct": 95,
        "temperature_c": 30,
        "humidity_pct": 70,
        "is_raining": False,
        "rain_probability_pct": 10,
        "last_updated": "2025-12-01T05:30:00Z",
        "sensor_id": "field-2",
    }
    assert store.sync_reading(remote)

    reading = store.get()
    assert reading.soil_moisture_pct == 95
    assert reading.last_updated.isoformat().startswith("2025-12-01T05:30")
    assert store.revision == 1

def test_sync_reading_ignores_an_older_remote_reading(store):
    store.update(soil_moisture_pct=30)
    stale = {**store.get().model_dump(mode="json"), "soil_moisture_pct": 95,
             "last_updated": "2025-11-30T06:00:00Z"}

    assert not store.sync_reading(stale)
    assert store.get().soil_moisture_pct == 30

def test_sync_reading_without_a_stamp_only_fills_a_default_store(store):
    assert store.sync_reading({"soil_moisture_pct": 60})
    assert store.get().soil_moisture_pct == 60

    store.update(soil_moisture_pct=30)
    assert not store.sync_reading({"soil_moisture_pct": 60})
    assert store.get().soil_moisture_pct == 30

def test_sync_reading_rejects_invalid_data(store):
    with pytest.raises(ReadingValidationError):
        store.sync_reading({"soil_moisture_pct": 150})
    assert store.is_default

def test_weather_update_is_stamped_and_source_is_protected(store, clock):
    weather = store.update_weather(rain_probability_pct=30)
    assert weather.last_updated == clock.now
    assert weather.source == WeatherSource.CACHED

    with pytest.raises(ReadingValidationError):
        store.update_weather(source="seasonal")
    with pytest.raises(ReadingValidationError):
        store.update_weather(last_updated="2025-12-01T00:00:00Z")

def test_stale_weather_falls_back_to_the_seasonal_estimate(store, clock):
    store.update_weather(current_temp_c=18, rain_probability_pct=80)
    clock.advance(3 * 3600)
    assert store.get_weather().rain_probability_pct == 80

    clock.advance(1)
    weather = store.get_weather()
    assert weather.source == WeatherSource.SEASONAL
    # December at 06:00: 8 + 15 * 0.3
    assert weather.current_temp_c == 12.5
    assert weather.rain_probability_pct == 3
    assert weather.rainfall_mm == 0

def test_weather_never_updated_is_not_replaced(store, clock):
    clock.advance(24 * 3600)
    assert store.get_weather().source == WeatherSource.CACHED
    assert store.get_weather().current_temp_c == 32
