"""Page routes serving the dashboard HTML and its HTMX fragments."""

import httpx
from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse

from weather_dashboard.config import Settings, get_settings
from weather_dashboard.dependencies import get_dashboard_state, get_http_client
from weather_dashboard.services import dashboard_service
from weather_dashboard.state_managers import DashboardStateManager
from weather_dashboard.views.template_renderer import TemplateRenderer

router = APIRouter(include_in_schema=False)


@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    state: DashboardStateManager = Depends(get_dashboard_state),
):
    """Render main dashboard page."""
    return TemplateRenderer.render_index(request, await state.snapshot())


@router.post("/cities", response_class=HTMLResponse)
async def submit_city(
    request: Request,
    city: str = Form(default=""),
    client: httpx.AsyncClient = Depends(get_http_client),
    state: DashboardStateManager = Depends(get_dashboard_state),
    settings: Settings = Depends(get_settings),
):
    """Handle the add-city form."""
    outcome = await dashboard_service.submit_city(client, state, city, settings)
    return TemplateRenderer.render_dashboard(request, await state.snapshot(), city_input=outcome.city_input)


@router.post("/cities/remove", response_class=HTMLResponse)
async def remove_city(
    request: Request,
    city: str = Form(default=""),
    state: DashboardStateManager = Depends(get_dashboard_state),
):
    """Handle a card's remove button."""
    await dashboard_service.remove_city(state, city)
    return TemplateRenderer.render_dashboard(request, await state.snapshot())
