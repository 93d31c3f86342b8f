# tests/test_api.py
import pytest
from fastapi.testclient import TestClient

from api.app import create_app

@pytest.fixture
def client(assistant):
    return TestClient(create_app(assistant=assistant))

def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"

def test_health(client):
    body = client.get("/api/health").json()
    assert body["success"] is True
    assert body["offline"] is False
    assert body["data"]["status"] == "healthy"

def test_chat(client):
    response = client.post("/api/chat", json={"message": "Aaj paani dena hai kya?"})
    body = response.json()

    assert response.status_code == 200
    assert body["data"]["intent"] == "ASK_IRRIGATION"
    assert body["data"]["action"] == "stop"
    assert body["message"] == body["data"]["localized_text"]

def test_chat_requires_message(client):
    assert client.post("/api/chat", json={}).status_code == 422

def test_irrigation_get_and_what_if(client):
    stored = client.get("/api/irrigation").json()
    what_if = client.post("/api/irrigation", json={"soil_moisture_pct": 35, "temperature_c": 30}).json()

    assert stored["data"]["action"] == "stop"
    assert what_if["data"]["action"] == "irrigate"
    assert what_if["data"]["waterAmount"] == 15
    assert client.get("/api/sensors").json()["data"]["soil_moisture_pct"] == 42

def test_crop_profiles(client):
    body = client.get("/api/irrigation/crops").json()
    names = [crop["name"] for crop in body["data"]]
    assert names == ["wheat", "rice", "cotton"]
    assert body["message"] == "Unknown crops use the wheat profile"

def test_sensor_update(client):
    response = client.post("/api/sensors", json={"soil_moisture_pct": 20})
    body = response.json()

    assert response.status_code == 200
    assert body["message"] == "Sensor data updated"
    assert body["data"]["soil_moisture_pct"] == 20

    alerts = client.get("/api/alerts").json()
    assert alerts["message"] == "1 alerts active"

@pytest.mark.parametrize("payload", [
    {"soil_moisture_pct": 140},
    {"soil_colour": "red"},
])
def test_sensor_update_rejected(client, payload):
    response = client.post("/api/sensors", json=payload)
    body = response.json()

    assert response.status_code == 422
    assert body["success"] is False
    assert body["data"] is None
    assert client.get("/api/sensors").json()["data"]["last_updated"] is None

def test_weather_and_crop(client):
    assert client.post("/api/weather", json={"rain_probability_pct": 75}).status_code == 200
    assert client.get("/api/weather").json()["data"]["rain_probability_pct"] == 75

    assert client.post("/api/crop", json={"type": "maize"}).status_code == 200
    assert client.get("/api/crop").json()["data"]["type"] == "maize"
    assert client.post("/api/crop", json={"stage": "ripening"}).status_code == 422

def test_fertilizer(client):
    body = client.get("/api/fertilizer").json()
    assert body["data"]["recommended"] is True

    soil = client.get("/api/fertilizer/soil-test", params={"nitrogen": 40, "phosphorus": 20, "potassium": 30}).json()
    assert "Urea 174 kg/ha dalein" in soil["data"]["recommendations"]

    assert client.get("/api/fertilizer/soil-test", params={"nitrogen": 40}).status_code == 422
    negative = {"nitrogen": -1, "phosphorus": 20, "potassium": 30}
    assert client.get("/api/fertilizer/soil-test", params=negative).status_code == 422

def test_alerts_empty(client):
    body = client.get("/api/alerts").json()
    assert body["message"] == "No alerts"
    assert body["data"] == []

def test_missing_assistant_is_unavailable():
    client = TestClient(create_app())
    assert client.get("/api/health").status_code == 503

def test_agents_info(client):
    body = client.get("/api/health/agents").json()
    assert set(body["data"]) == {"intent", "irrigation", "fertilizer", "alerts", "crop_health"}
    assert body["data"]["crop_health"]["config"] == {}
    assert body["data"]["alerts"]["config"] == {"consecutive_over_sweeps": 2}
