"""Application factory for creating and configuring the FastAPI app."""

from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from lirix import __version__
from lirix.config import get_settings
from lirix.core.lifespan import lifespan
from lirix.core.middleware import setup_middleware
from lirix.middleware.error_handlers import register_error_handlers
from lirix.routers import health_router, view_router, weather_router

STATIC_DIR = Path(__file__).parent.parent / "static"


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    app = FastAPI(
        title="Lirix",
        description="""
        **Lirix** - current weather and forecasts for a fixed set of locations,
        backed by the OpenWeatherMap API.

        ## Pages
        - `/` - Overview of current weather for every configured location
        - `/detail?location=<id>` - Forecast for one location
        - `/about`, `/help`

        ## JSON API
        - `/api/weather/locations` - Configured locations
        - `/api/weather/current/{location_id}` - Current conditions
        - `/api/weather/forecast/{location_id}` - Forecast entries

        ## Rate Limits
        - Weather API endpoints: 60 requests/minute per IP
        """,
        version=__version__,
        lifespan=lifespan,
        license_info={
            "name": "MIT",
        },
    )

    setup_middleware(app, settings)
    register_error_handlers(app)

    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    # View routes (HTML pages) - no prefix
    app.include_router(view_router.router, tags=["views"])
    app.include_router(health_router.router, tags=["health"])
    app.include_router(weather_router.router, prefix="/api/weather", tags=["weather"])

    return app
