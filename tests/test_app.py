from fastapi.testclient import TestClient

from city_weather.app import app
from city_weather.errors import (
    CITY_LOOKUP_FAILED_MESSAGE,
    EMPTY_INPUT_MESSAGE,
    FORECAST_UNAVAILABLE_MESSAGE,
    NO_MATCH_MESSAGE,
)

from conftest import FORECAST_HOST

client = TestClient(app)


def test_healthz():
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_index_loads_default_city(open_meteo):
    r = client.get("/")

    assert r.status_code == 200
    assert "Kyiv, Ukraine" in r.text
    assert "Timezone: Europe/Kyiv" in r.text
    assert "Overcast" in r.text
    assert "20°C" in r.text
    assert "Thu, Oct 30" in r.text
    assert r.text.count('class="forecast-card"') == 5
    assert 'value="Kyiv"' in r.text


def test_index_blank_city_shows_error(open_meteo):
    r = client.get("/", params={"city": "   "})

    assert r.status_code == 200
    assert EMPTY_INPUT_MESSAGE in r.text
    assert "forecast-card" not in r.text
    assert open_meteo.requests == []


def test_index_not_found_replaces_forecast(open_meteo):
    open_meteo.geocode = (200, {"results": []})

    r = client.get("/", params={"city": "Atlantis"})

    assert NO_MATCH_MESSAGE in r.text
    assert "current-card" not in r.text
    assert 'value="Atlantis"' in r.text


def test_api_weather_loaded(open_meteo):
    r = client.post("/api/weather", json={"city": "Kyiv"})

    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "loaded"
    assert body["location"] == {
        "name": "Kyiv",
        "country": "Ukraine",
        "latitude": 50.45,
        "longitude": 30.52,
    }
    assert body["timezone"] == "Europe/Kyiv"
    assert body["current"]["meta"] == {"label": "Overcast", "icon": "☁️"}
    assert body["current"]["temperature_display"] == 20
    assert [d["date"] for d in body["days"]] == [
        "2025-10-30", "2025-10-31", "2025-11-01", "2025-11-02", "2025-11-03",
    ]


def test_api_weather_empty_input(open_meteo):
    r = client.post("/api/weather", json={})

    assert r.status_code == 400
    assert r.json() == {"error": EMPTY_INPUT_MESSAGE, "kind": "empty_input"}


def test_api_weather_not_found(open_meteo):
    open_meteo.geocode = (200, {"results": []})

    r = client.post("/api/weather", json={"city": "Atlantis"})

    assert r.status_code == 404
    assert r.json()["kind"] == "not_found"
    assert open_meteo.calls_to(FORECAST_HOST) == []


def test_api_weather_geocoding_down(open_meteo):
    open_meteo.geocode = (503, {"error": True})

    r = client.post("/api/weather", json={"city": "Kyiv"})

    assert r.status_code == 502
    assert r.json()["error"] == CITY_LOOKUP_FAILED_MESSAGE


def test_api_weather_forecast_down(open_meteo):
    open_meteo.forecast = (500, {"error": True})

    r = client.post("/api/weather", json={"city": "Kyiv"})

    assert r.status_code == 502
    assert r.json()["error"] == FORECAST_UNAVAILABLE_MESSAGE
