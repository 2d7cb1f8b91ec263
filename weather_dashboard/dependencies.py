"""FastAPI dependencies for dependency injection."""

import httpx
from fastapi import Request

from weather_dashboard.state_managers import DashboardStateManager


async def get_http_client(request: Request) -> httpx.AsyncClient:
    """
    Get the shared HTTP client from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        The shared AsyncClient instance.

    Raises:
        RuntimeError: If HTTP client is not initialized.
    """
    client: httpx.AsyncClient | None = getattr(request.app.state, "http_client", None)

    if client is None:
        raise RuntimeError("HTTP client not initialized. This should never happen.")

    return client


async def get_dashboard_state(request: Request) -> DashboardStateManager:
    """
    Get the dashboard state manager from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        The shared DashboardStateManager instance.

    Raises:
        RuntimeError: If the dashboard state is not initialized.
    """
    manager: DashboardStateManager | None = getattr(request.app.state, "dashboard_state", None)

    if manager is None:
        raise RuntimeError("Dashboard state not initialized.")

    return manager
