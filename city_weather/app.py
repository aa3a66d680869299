import logging
import sys
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel

from .config import APP_TITLE, DEFAULT_CITY, DEFAULT_HOST, DEFAULT_PORT, LOG_FORMAT
from .errors import STATUS_BY_KIND
from .search import Errored, WeatherSearch

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent

app = FastAPI(title=APP_TITLE)
app.mount("/static", StaticFiles(directory=BASE_DIR / "static"), name="static")
templates = Jinja2Templates(directory=BASE_DIR / "templates")


class CityQuery(BaseModel):
    city: Optional[str] = None


@app.get("/", response_class=HTMLResponse)
async def index(request: Request, city: Optional[str] = None):
    search = WeatherSearch()
    # first visit loads the default city
    if city is None:
        state = await search.start()
        query = DEFAULT_CITY
    else:
        state = await search.submit(city)
        query = city

    return templates.TemplateResponse(
        request,
        "index.html",
        {"title": APP_TITLE, "query": query, "state": state},
    )


@app.post("/api/weather")
async def api_weather(body: CityQuery):
    state = await WeatherSearch().submit(body.city)

    if isinstance(state, Errored):
        return JSONResponse(
            {"error": state.message, "kind": state.kind.value},
            status_code=STATUS_BY_KIND[state.kind],
        )

    view = state.view
    return {
        "status": state.status,
        "query": state.query,
        "location": view.location.model_dump(),
        "timezone": view.timezone,
        "current": view.current.model_dump(),
        "days": [day.model_dump() for day in view.days],
    }


@app.get("/healthz")
async def healthz():
    return {"status": "ok"}


def main():
    """Main entry point."""
    import uvicorn

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    port = DEFAULT_PORT
    if len(sys.argv) > 1:
        try:
            port = int(sys.argv[1])
        except ValueError:
            logger.error(f"Invalid port: {sys.argv[1]}")
            sys.exit(1)

    logger.info(f"Starting {APP_TITLE} on port {port}")
    uvicorn.run(app, host=DEFAULT_HOST, port=port, log_level="info")


if __name__ == "__main__":
    main()
