"""Middleware configuration."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter

from weather_dashboard.config import Settings
from weather_dashboard.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


def setup_middleware(app: FastAPI, settings: Settings, limiter: Limiter) -> Limiter:
    """Configure all middleware for the application.

    Args:
        app: FastAPI application instance
        settings: Application settings
        limiter: Rate limiter used by the JSON API routes

    Returns:
        The limiter, registered on app.state for slowapi's exception handler
    """
    log_with_context(
        logger,
        "info",
        "Configuring CORS middleware",
        pattern=settings.cors_origin_regex,
        event_type="security_config",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origin_regex=settings.cors_origin_regex,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE"],
        allow_headers=["*"],
    )

    app.state.limiter = limiter
    return limiter
