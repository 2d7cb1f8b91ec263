"""Template rendering utilities for HTML views."""

from pathlib import Path

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from weather_dashboard.state_managers import DashboardSnapshot

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"
templates = Jinja2Templates(directory=TEMPLATES_DIR)


def is_htmx_request(request: Request) -> bool:
    """True when the request was issued by HTMX rather than a plain form post."""
    return request.headers.get("HX-Request", "").lower() == "true"


class TemplateRenderer:
    """Handles rendering of Jinja2 templates for the dashboard views."""

    @staticmethod
    def _context(snapshot: DashboardSnapshot, city_input: str) -> dict:
        # snapshot.loading is process-wide, so it never disables another client's form
        return {
            "records": snapshot.records,
            "message": snapshot.message,
            "city_input": city_input,
        }

    @staticmethod
    def render_index(request: Request, snapshot: DashboardSnapshot, city_input: str = "") -> HTMLResponse:
        """Render main dashboard page."""
        return templates.TemplateResponse(
            request,
            "index.html",
            TemplateRenderer._context(snapshot, city_input),
        )

    @staticmethod
    def render_dashboard(request: Request, snapshot: DashboardSnapshot, city_input: str = "") -> HTMLResponse:
        """Render the dashboard after a form action.

        HTMX requests get the dashboard fragment to swap in; plain form posts
        (JavaScript disabled) get the full page.

        Args:
            request: FastAPI request object
            snapshot: Dashboard state to render
            city_input: Text to leave in the city field

        Returns:
            HTMLResponse with the fragment or the full page
        """
        if not is_htmx_request(request):
            return TemplateRenderer.render_index(request, snapshot, city_input)
        return templates.TemplateResponse(
            request,
            "partials/dashboard.html",
            TemplateRenderer._context(snapshot, city_input),
        )
