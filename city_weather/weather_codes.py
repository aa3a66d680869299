"""WMO weather interpretation codes as reported by Open-Meteo."""

from types import MappingProxyType
from typing import Any, Mapping

from .models import WeatherMeta


def _meta(label: str, icon: str) -> WeatherMeta:
    return WeatherMeta(label=label, icon=icon)


WEATHER_CODE_MAP: Mapping[int, WeatherMeta] = MappingProxyType({
    0: _meta("Clear sky", "☀️"),
    1: _meta("Mainly clear", "🌤️"),
    2: _meta("Partly cloudy", "⛅"),
    3: _meta("Overcast", "☁️"),
    45: _meta("Fog", "🌫️"),
    48: _meta("Depositing rime fog", "🌫️"),
    51: _meta("Light drizzle", "🌦️"),
    53: _meta("Moderate drizzle", "🌦️"),
    55: _meta("Dense drizzle", "🌧️"),
    56: _meta("Light freezing drizzle", "🌧️"),
    57: _meta("Dense freezing drizzle", "🌧️"),
    61: _meta("Slight rain", "🌦️"),
    63: _meta("Moderate rain", "🌧️"),
    65: _meta("Heavy rain", "🌧️"),
    66: _meta("Light freezing rain", "🌧️"),
    67: _meta("Heavy freezing rain", "🌧️"),
    71: _meta("Slight snow", "🌨️"),
    73: _meta("Moderate snow", "🌨️"),
    75: _meta("Heavy snow", "❄️"),
    77: _meta("Snow grains", "❄️"),
    80: _meta("Rain showers", "🌦️"),
    81: _meta("Moderate rain showers", "🌧️"),
    82: _meta("Violent rain showers", "⛈️"),
    85: _meta("Snow showers", "🌨️"),
    86: _meta("Heavy snow showers", "❄️"),
    95: _meta("Thunderstorm", "⛈️"),
    96: _meta("Thunderstorm with hail", "⛈️"),
    99: _meta("Thunderstorm with heavy hail", "⛈️"),
})

DEFAULT_META = _meta("Unknown conditions", "🌡️")


def weather_meta(code: Any) -> WeatherMeta:
    """Label and icon for a weather code; never fails, unmapped codes get DEFAULT_META."""
    if isinstance(code, bool):
        return DEFAULT_META
    try:
        return WEATHER_CODE_MAP.get(code, DEFAULT_META)
    except TypeError:
        # unhashable payload value
        return DEFAULT_META
