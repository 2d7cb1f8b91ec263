"""Application factory for creating and configuring the FastAPI app."""

from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from weather_dashboard import __version__
from weather_dashboard.config import get_settings
from weather_dashboard.core.lifespan import lifespan
from weather_dashboard.core.middleware import setup_middleware
from weather_dashboard.middleware.error_handlers import register_error_handlers
from weather_dashboard.routers import health_router, view_router, weather_router

STATIC_DIR = Path(__file__).parent.parent / "static"


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    app = FastAPI(
        title="Weather Dashboard",
        description="""
        ☀️ **Weather Dashboard** - current conditions for the cities you follow

        Open `/` in a browser to add cities by name and remove their cards.

        ## 🌍 JSON API
        - `GET /api/cities` - cities on the dashboard, in display order
        - `POST /api/cities` - look up a city and add it
        - `DELETE /api/cities/{city}` - remove a city (exact name)
        - `GET /api/weather/current?city=...` - look up without adding

        ## 📊 Health
        - `/health` - basic health check
        - `/health/ready` - readiness probe

        ## ⚡ Rate Limits
        - JSON API: 60 requests/minute per IP
        """,
        version=__version__,
        lifespan=lifespan,
        license_info={
            "name": "MIT",
        },
    )

    setup_middleware(app, settings, weather_router.limiter)
    register_error_handlers(app)

    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    # View routes (HTML page and HTMX fragments) - no prefix
    app.include_router(view_router.router, tags=["views"])
    app.include_router(health_router.router, tags=["health"])
    app.include_router(weather_router.router, prefix="/api", tags=["weather"])

    return app
