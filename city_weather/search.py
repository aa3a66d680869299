"""
Search workflow: Idle -> Loading -> Loaded | Errored, restartable forever.

The whole view state is one immutable value swapped on each transition, so a
new location can never be shown next to stale weather. Each submission gets a
request id; a completion that is no longer the latest is dropped.
"""

import logging
from typing import Awaitable, Callable, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict

from .config import DEFAULT_CITY
from .errors import UNKNOWN_ERROR_MESSAGE, ErrorKind, ValidationError, WeatherAppError
from .models import ForecastPayload, Location, WeatherView
from .services import fetch_weather_by_city
from .view_model import build_weather_view

logger = logging.getLogger(__name__)


class Idle(BaseModel):
    model_config = ConfigDict(frozen=True)
    status: Literal["idle"] = "idle"


class Loading(BaseModel):
    model_config = ConfigDict(frozen=True)
    status: Literal["loading"] = "loading"
    request_id: int
    query: str


class Loaded(BaseModel):
    model_config = ConfigDict(frozen=True)
    status: Literal["loaded"] = "loaded"
    request_id: int
    query: str
    view: WeatherView


class Errored(BaseModel):
    model_config = ConfigDict(frozen=True)
    status: Literal["errored"] = "errored"
    request_id: int
    query: str
    kind: ErrorKind
    message: str


SearchState = Union[Idle, Loading, Loaded, Errored]

Fetcher = Callable[[str], Awaitable[Tuple[Location, ForecastPayload]]]


class WeatherSearch:
    """Runs city searches and holds the single current view state."""

    def __init__(
        self,
        fetcher: Fetcher = fetch_weather_by_city,
        on_change: Optional[Callable[[SearchState], None]] = None,
    ):
        self._fetch = fetcher
        self._on_change = on_change
        self._state: SearchState = Idle()
        self._generation = 0

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def loading(self) -> bool:
        return isinstance(self._state, Loading)

    def _commit(self, state: SearchState) -> None:
        self._state = state
        if self._on_change is not None:
            self._on_change(state)

    async def start(self) -> SearchState:
        """Initial load with the default city."""
        return await self.submit(DEFAULT_CITY)

    async def submit(self, query: Optional[str]) -> SearchState:
        city = (query or "").strip()
        self._generation += 1
        request_id = self._generation

        if not city:
            err = ValidationError()
            self._commit(Errored(request_id=request_id, query=city, kind=err.kind, message=err.message))
            return self._state

        self._commit(Loading(request_id=request_id, query=city))
        logger.info(f"Searching weather for {city!r} (request {request_id})")

        try:
            location, payload = await self._fetch(city)
            result: SearchState = Loaded(
                request_id=request_id,
                query=city,
                view=build_weather_view(location, payload),
            )
        except WeatherAppError as e:
            result = Errored(request_id=request_id, query=city, kind=e.kind, message=e.message)
        except Exception:
            logger.exception(f"Unexpected failure while searching {city!r}")
            result = Errored(
                request_id=request_id,
                query=city,
                kind=ErrorKind.UNKNOWN,
                message=UNKNOWN_ERROR_MESSAGE,
            )

        if request_id != self._generation:
            logger.debug(f"Discarding stale result for request {request_id} (latest is {self._generation})")
            return self._state

        self._commit(result)
        return result
