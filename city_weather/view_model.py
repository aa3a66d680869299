"""
Shape raw Open-Meteo data into what the page displays.

Every function here is pure and tolerant: missing or malformed upstream
fields turn into None / empty strings instead of raising.
"""

import math
from datetime import date as _date
from typing import Any, Dict, List, Optional, Sequence

from .models import (
    CurrentConditions,
    CurrentUnits,
    DailyForecastEntry,
    ForecastPayload,
    Location,
    WeatherView,
)
from .weather_codes import weather_meta


def _number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if math.isnan(value) or math.isinf(value):
        return None
    return float(value)


def _code(value: Any) -> Optional[int]:
    num = _number(value)
    if num is None or not num.is_integer():
        return None
    return int(num)


def _unit(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _at(values: Any, index: int) -> Any:
    if not isinstance(values, (list, tuple)) or index >= len(values):
        return None
    return values[index]


def round_half_up(value: Any) -> Optional[int]:
    """Round for display: halves go up (20.5 -> 21, -2.5 -> -2)."""
    num = _number(value)
    if num is None:
        return None
    return math.floor(num + 0.5)


def format_day(value: Any) -> str:
    """'2025-10-30' -> 'Thu, Oct 30'; anything unparseable -> ''."""
    if not isinstance(value, str):
        return ""
    try:
        d = _date.fromisoformat(value[:10])
    except ValueError:
        return ""
    return f"{d:%a}, {d:%b} {d.day}"


def build_forecast_days(daily: Dict[str, Any]) -> List[DailyForecastEntry]:
    """Zip Open-Meteo's parallel daily arrays into one entry per day, in provider order."""
    if not isinstance(daily, dict):
        return []
    times: Sequence[Any] = daily.get("time") or []
    if not isinstance(times, (list, tuple)):
        return []

    codes = daily.get("weather_code")
    tmax = daily.get("temperature_2m_max")
    tmin = daily.get("temperature_2m_min")
    pops = daily.get("precipitation_probability_max")

    out = []
    for i, day in enumerate(times):
        code = _code(_at(codes, i))
        max_temp = _number(_at(tmax, i))
        min_temp = _number(_at(tmin, i))
        rain = _number(_at(pops, i))
        out.append(DailyForecastEntry(
            date=day if isinstance(day, str) else "",
            weather_code=code,
            max_temp=max_temp,
            min_temp=min_temp,
            precipitation_chance=rain,
            day_label=format_day(day),
            meta=weather_meta(code),
            max_temp_display=round_half_up(max_temp),
            min_temp_display=round_half_up(min_temp),
            rain_display=round_half_up(rain),
        ))
    return out


def build_current(current: Dict[str, Any], units: Dict[str, Any]) -> CurrentConditions:
    current = current if isinstance(current, dict) else {}
    units = units if isinstance(units, dict) else {}

    temperature = _number(current.get("temperature_2m"))
    apparent = _number(current.get("apparent_temperature"))
    wind = _number(current.get("wind_speed_10m"))
    humidity = _number(current.get("relative_humidity_2m"))
    code = _code(current.get("weather_code"))

    return CurrentConditions(
        temperature=temperature,
        apparent_temperature=apparent,
        humidity=humidity,
        wind_speed=wind,
        weather_code=code,
        units=CurrentUnits(
            temperature=_unit(units.get("temperature_2m")),
            apparent_temperature=_unit(units.get("apparent_temperature")),
            humidity=_unit(units.get("relative_humidity_2m")),
            wind_speed=_unit(units.get("wind_speed_10m")),
        ),
        meta=weather_meta(code),
        temperature_display=round_half_up(temperature),
        apparent_temperature_display=round_half_up(apparent),
        humidity_display=round_half_up(humidity),
        wind_speed_display=round_half_up(wind),
    )


def build_weather_view(location: Location, payload: ForecastPayload) -> WeatherView:
    return WeatherView(
        location=location,
        timezone=payload.timezone,
        current=build_current(payload.current, payload.current_units),
        days=build_forecast_days(payload.daily),
    )
