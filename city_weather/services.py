import logging
from typing import Any, Dict, Optional, Tuple

import httpx

from .config import (
    CURRENT_FIELDS,
    DAILY_FIELDS,
    FORECAST_DAYS,
    GEOCODING_LANGUAGE,
    GEOCODING_URL,
    OPEN_METEO,
    REQUEST_TIMEOUT,
    USER_AGENT,
)
from .errors import (
    CITY_LOOKUP_FAILED_MESSAGE,
    FORECAST_UNAVAILABLE_MESSAGE,
    NotFoundError,
    UpstreamError,
    ValidationError,
)
from .models import ForecastPayload, Location

logger = logging.getLogger(__name__)


def make_client() -> httpx.AsyncClient:
    """New HTTP client for the Open-Meteo APIs."""
    return httpx.AsyncClient(timeout=REQUEST_TIMEOUT, headers=USER_AGENT)


async def _get_json(url: str, params: Dict[str, Any], client: Optional[httpx.AsyncClient]) -> Any:
    if client is None:
        async with make_client() as own_client:
            return await _get_json(url, params, own_client)
    r = await client.get(url, params=params)
    r.raise_for_status()
    return r.json()


async def geocode_city(city: str, client: Optional[httpx.AsyncClient] = None) -> Location:
    """Resolve a city name to the single best Open-Meteo match."""
    city = (city or "").strip()
    if not city:
        raise ValidationError()

    params = {
        "name": city,
        "count": 1,
        "language": GEOCODING_LANGUAGE,
        "format": "json",
    }
    try:
        data = await _get_json(GEOCODING_URL, params, client)
    except httpx.HTTPError as e:
        logger.warning(f"Geocoding failed for {city!r}: {e}")
        raise UpstreamError(CITY_LOOKUP_FAILED_MESSAGE) from e

    results = data.get("results") if isinstance(data, dict) else None
    if not results:
        logger.info(f"No geocoding match for {city!r}")
        raise NotFoundError()

    return Location.model_validate(results[0])


async def fetch_forecast(lat: float, lon: float, client: Optional[httpx.AsyncClient] = None) -> ForecastPayload:
    """
    Fetch current conditions plus a fixed 5-day daily forecast.

    Dates come back in the location's own timezone (``timezone=auto``).
    """
    params = {
        "latitude": lat,
        "longitude": lon,
        "current": ",".join(CURRENT_FIELDS),
        "daily": ",".join(DAILY_FIELDS),
        "forecast_days": FORECAST_DAYS,
        "timezone": "auto",
    }
    try:
        data = await _get_json(OPEN_METEO, params, client)
    except httpx.HTTPError as e:
        logger.warning(f"Forecast provider error for ({lat}, {lon}): {e}")
        raise UpstreamError(FORECAST_UNAVAILABLE_MESSAGE) from e

    return ForecastPayload.model_validate(data if isinstance(data, dict) else {})


async def fetch_weather_by_city(city: str, client: Optional[httpx.AsyncClient] = None) -> Tuple[Location, ForecastPayload]:
    """Geocode, then fetch the forecast for the match. The forecast call only runs if geocoding succeeded."""
    if client is None:
        async with make_client() as own_client:
            return await fetch_weather_by_city(city, own_client)

    location = await geocode_city(city, client)
    weather = await fetch_forecast(location.latitude, location.longitude, client)
    return location, weather
