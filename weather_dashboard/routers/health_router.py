"""Health endpoints."""

from datetime import UTC, datetime

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from weather_dashboard import __version__
from weather_dashboard.models import DetailedHealthResponse, HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Basic health check endpoint.

    Returns simple status for container healthchecks.
    For dependency status, use `/health/ready`.
    """
    return HealthResponse(status="ok", version=__version__)


@router.get("/health/ready", response_model=DetailedHealthResponse)
async def readiness_check(request: Request):
    """Readiness probe - can the application serve traffic?

    Checks that the lifespan created the shared HTTP client and the dashboard
    state. The weather provider itself is not called.

    **Returns:**
    - 200: Application is ready to serve requests
    - 503: Application is not ready
    """
    checks: dict[str, str] = {}

    client = getattr(request.app.state, "http_client", None)
    checks["http_client"] = "ok" if client is not None and not client.is_closed else "failed"

    dashboard_state = getattr(request.app.state, "dashboard_state", None)
    if dashboard_state is None:
        checks["dashboard_state"] = "failed"
    else:
        records = await dashboard_state.get_records()
        checks["dashboard_state"] = f"ok ({len(records)} cities)"

    all_healthy = all(value.startswith("ok") for value in checks.values())
    response = DetailedHealthResponse(
        status="healthy" if all_healthy else "unhealthy",
        version=__version__,
        timestamp=datetime.now(UTC),
        checks=checks,
    )

    if not all_healthy:
        return JSONResponse(status_code=503, content=response.model_dump(mode="json"))
    return response
