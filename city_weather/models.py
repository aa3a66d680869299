from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Dict, List, Optional


class Location(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    country: str = ""
    latitude: float
    longitude: float

    @field_validator("country", mode="before")
    @classmethod
    def _blank_country(cls, v):
        return v or ""

    @property
    def display_name(self) -> str:
        return f"{self.name}, {self.country}" if self.country else self.name


class WeatherMeta(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    icon: str


class ForecastPayload(BaseModel):
    """Raw forecast blocks as returned by Open-Meteo, without shape checks."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    current: Dict[str, Any] = Field(default_factory=dict)
    current_units: Dict[str, Any] = Field(default_factory=dict)
    daily: Dict[str, Any] = Field(default_factory=dict)
    timezone: str = ""

    @field_validator("current", "current_units", "daily", mode="before")
    @classmethod
    def _dict_or_empty(cls, v):
        return v if isinstance(v, dict) else {}

    @field_validator("timezone", mode="before")
    @classmethod
    def _str_or_empty(cls, v):
        return v if isinstance(v, str) else ""


class CurrentUnits(BaseModel):
    model_config = ConfigDict(frozen=True)

    temperature: str = ""
    apparent_temperature: str = ""
    humidity: str = ""
    wind_speed: str = ""


class CurrentConditions(BaseModel):
    model_config = ConfigDict(frozen=True)

    temperature: Optional[float] = None
    apparent_temperature: Optional[float] = None
    humidity: Optional[float] = None
    wind_speed: Optional[float] = None
    weather_code: Optional[int] = None
    units: CurrentUnits = CurrentUnits()

    # display values
    meta: WeatherMeta
    temperature_display: Optional[int] = None
    apparent_temperature_display: Optional[int] = None
    humidity_display: Optional[int] = None
    wind_speed_display: Optional[int] = None


class DailyForecastEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: str
    weather_code: Optional[int] = None
    max_temp: Optional[float] = None
    min_temp: Optional[float] = None
    precipitation_chance: Optional[float] = None

    # display values
    day_label: str = ""
    meta: WeatherMeta
    max_temp_display: Optional[int] = None
    min_temp_display: Optional[int] = None
    rain_display: Optional[int] = None


class WeatherView(BaseModel):
    """Everything the page shows for one completed search."""
    model_config = ConfigDict(frozen=True)

    location: Location
    timezone: str = ""
    current: CurrentConditions
    days: List[DailyForecastEntry] = Field(default_factory=list)
