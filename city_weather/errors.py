from enum import Enum


class ErrorKind(str, Enum):
    EMPTY_INPUT = "empty_input"
    NOT_FOUND = "not_found"
    SERVICE_UNAVAILABLE = "service_unavailable"
    UNKNOWN = "unknown"


EMPTY_INPUT_MESSAGE = "Please enter a city name."
CITY_LOOKUP_FAILED_MESSAGE = "Could not find that city. Please try another search."
NO_MATCH_MESSAGE = "No matching city found. Try a different name."
FORECAST_UNAVAILABLE_MESSAGE = "Weather service is unavailable right now. Please retry in a moment."
UNKNOWN_ERROR_MESSAGE = "Something went wrong while loading weather data."


class WeatherAppError(Exception):
    """Base error; the message is shown to the user verbatim."""

    kind = ErrorKind.UNKNOWN
    status_code = 500

    def __init__(self, message: str = UNKNOWN_ERROR_MESSAGE):
        super().__init__(message)
        self.message = message


class ValidationError(WeatherAppError):
    kind = ErrorKind.EMPTY_INPUT
    status_code = 400

    def __init__(self, message: str = EMPTY_INPUT_MESSAGE):
        super().__init__(message)


class NotFoundError(WeatherAppError):
    kind = ErrorKind.NOT_FOUND
    status_code = 404

    def __init__(self, message: str = NO_MATCH_MESSAGE):
        super().__init__(message)


class UpstreamError(WeatherAppError):
    kind = ErrorKind.SERVICE_UNAVAILABLE
    status_code = 502


STATUS_BY_KIND = {
    ErrorKind.EMPTY_INPUT: ValidationError.status_code,
    ErrorKind.NOT_FOUND: NotFoundError.status_code,
    ErrorKind.SERVICE_UNAVAILABLE: UpstreamError.status_code,
    ErrorKind.UNKNOWN: WeatherAppError.status_code,
}
