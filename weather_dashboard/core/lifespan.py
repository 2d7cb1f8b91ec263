"""Application lifespan management."""

import os
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from typing import Any

import httpx
from fastapi import FastAPI

from weather_dashboard import __version__
from weather_dashboard.logging_config import get_logger, log_with_context
from weather_dashboard.middleware.logging_middleware import redact_sensitive_data
from weather_dashboard.state_managers import DashboardStateManager

logger = get_logger(__name__)


async def log_request(request: httpx.Request) -> None:
    """Event hook to log outbound requests with the API key redacted."""
    log_with_context(
        logger,
        "info",
        "HTTP Request",
        method=request.method,
        url=redact_sensitive_data(str(request.url)),
        event_type="http_request",
    )


async def log_response(response: httpx.Response) -> None:
    """Event hook to log provider responses with the API key redacted."""
    log_with_context(
        logger,
        "info",
        "HTTP Response",
        status_code=response.status_code,
        url=redact_sensitive_data(str(response.request.url)),
        event_type="http_response",
    )


def create_http_client(proxy: str | None = None) -> httpx.AsyncClient:
    """Create the shared HTTP client.

    Timeouts stay at httpx defaults; lookups are never retried or cancelled.
    """
    event_hooks: dict[str, list[Callable[..., Any]]] = {
        "request": [log_request],
        "response": [log_response],
    }
    return httpx.AsyncClient(  # nosec B113
        limits=httpx.Limits(
            max_keepalive_connections=5,
            max_connections=10,
            keepalive_expiry=30.0,
        ),
        follow_redirects=True,
        proxy=proxy,
        event_hooks=event_hooks,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan - startup and shutdown events.

    Exceptions raised while serving are logged and re-raised; cleanup always
    runs.
    """
    log_with_context(
        logger,
        "info",
        "Starting Weather Dashboard application",
        version=__version__,
        event_type="app_startup",
    )

    proxy = os.getenv("HTTPS_PROXY") or os.getenv("HTTP_PROXY")
    if proxy:
        log_with_context(
            logger,
            "info",
            "Routing provider traffic through proxy",
            proxy=redact_sensitive_data(proxy),
            event_type="proxy_config",
        )

    client = create_http_client(proxy)
    app.state.http_client = client
    log_with_context(
        logger,
        "info",
        "HTTP client initialized successfully",
        event_type="http_client_ready",
    )

    # Dashboard state lives for the life of the process only
    app.state.dashboard_state = DashboardStateManager()
    await app.state.dashboard_state.initialize()
    log_with_context(
        logger,
        "info",
        "Dashboard state initialized",
        event_type="state_managers_ready",
    )

    try:
        yield
    except Exception as e:
        log_with_context(
            logger,
            "error",
            "Application error during lifespan",
            error=str(e),
            error_type=type(e).__name__,
            event_type="app_error",
        )
        raise
    finally:
        log_with_context(
            logger,
            "info",
            "Shutting down Weather Dashboard application",
            event_type="app_shutdown",
        )

        await app.state.dashboard_state.cleanup()
        log_with_context(
            logger,
            "info",
            "Dashboard state cleaned up",
            event_type="state_managers_cleanup",
        )

        await client.aclose()
        log_with_context(
            logger,
            "info",
            "HTTP client closed",
            event_type="http_client_cleanup",
        )
