import httpx
import pytest

from city_weather import services


GEOCODING_HOST = "geocoding-api.open-meteo.com"
FORECAST_HOST = "api.open-meteo.com"

KYIV_GEOCODE = {
    "results": [
        {
            "id": 703448,
            "name": "Kyiv",
            "latitude": 50.45,
            "longitude": 30.52,
            "country_code": "UA",
            "country": "Ukraine",
            "admin1": "Kyiv City",
            "timezone": "Europe/Kyiv",
        }
    ],
    "generationtime_ms": 0.7,
}

KYIV_FORECAST = {
    "latitude": 50.45,
    "longitude": 30.52,
    "timezone": "Europe/Kyiv",
    "current_units": {
        "time": "iso8601",
        "temperature_2m": "°C",
        "apparent_temperature": "°C",
        "relative_humidity_2m": "%",
        "wind_speed_10m": "km/h",
        "weather_code": "wmo code",
    },
    "current": {
        "time": "2025-10-30T14:00",
        "temperature_2m": 20.4,
        "apparent_temperature": 18.6,
        "relative_humidity_2m": 61,
        "wind_speed_10m": 12.7,
        "weather_code": 3,
    },
    "daily": {
        "time": ["2025-10-30", "2025-10-31", "2025-11-01", "2025-11-02", "2025-11-03"],
        "weather_code": [3, 61, 0, 95, 45],
        "temperature_2m_max": [20.4, 18.5, 16.2, 14.9, 13.0],
        "temperature_2m_min": [10.1, 9.5, 8.4, 7.6, 5.5],
        "precipitation_probability_max": [5, 80, 0, 65, 15],
    },
}


class FakeOpenMeteo:
    """Stands in for both Open-Meteo hosts and records every request."""

    def __init__(self):
        self.geocode = (200, KYIV_GEOCODE)
        self.forecast = (200, KYIV_FORECAST)
        self.requests = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host == GEOCODING_HOST:
            status, body = self.geocode
        else:
            status, body = self.forecast
        return httpx.Response(status, json=body)

    def calls_to(self, host):
        return [r for r in self.requests if r.url.host == host]


@pytest.fixture
def open_meteo(monkeypatch):
    fake = FakeOpenMeteo()
    monkeypatch.setattr(
        services,
        "make_client",
        lambda: httpx.AsyncClient(transport=httpx.MockTransport(fake.handler)),
    )
    return fake
