"""Static settings for the City Weather app."""

# ---------------------------- Upstream --------------------------------

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
OPEN_METEO = "https://api.open-meteo.com/v1/forecast"

USER_AGENT = {"User-Agent": "CityWeather/1.0 (+https://open-meteo.com)"}
REQUEST_TIMEOUT = 10.0  # seconds

GEOCODING_LANGUAGE = "en"

CURRENT_FIELDS = [
    "temperature_2m",
    "apparent_temperature",
    "relative_humidity_2m",
    "wind_speed_10m",
    "weather_code",
]
DAILY_FIELDS = [
    "weather_code",
    "temperature_2m_max",
    "temperature_2m_min",
    "precipitation_probability_max",
]
FORECAST_DAYS = 5

# ------------------------------ App -----------------------------------

DEFAULT_CITY = "Kyiv"
APP_TITLE = "City Weather"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
