"""Template rendering utilities for HTML views."""

from pathlib import Path

import httpx
from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from lirix.config import Settings
from lirix.services import weather_service

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"
templates = Jinja2Templates(directory=TEMPLATES_DIR)

SITE_NAME = "Lirix"


def page_title(section: str) -> str:
    return f"{SITE_NAME} | {section}"


class TemplateRenderer:
    """Handles rendering of Jinja2 templates for all Lirix pages."""

    @staticmethod
    async def render_overview(
        request: Request,
        client: httpx.AsyncClient,
        settings: Settings,
    ) -> HTMLResponse:
        """Render the overview page with current weather for every configured location.

        Args:
            request: FastAPI request object
            client: HTTP client for API calls
            settings: Settings instance (provided by router via Depends)

        Returns:
            HTMLResponse with the rendered overview
        """
        rows = await weather_service.get_overview(client, settings)

        return templates.TemplateResponse(
            request,
            "index.html",
            {
                "title": page_title("Overview"),
                "weatherdata": rows,
            },
        )

    @staticmethod
    async def render_detail(
        request: Request,
        client: httpx.AsyncClient,
        location_id: str,
        settings: Settings,
    ) -> HTMLResponse:
        """Render the forecast detail page for one location.

        Errors propagate to the exception handlers, which render the error page.
        """
        forecast = await weather_service.get_forecast(client, location_id, settings)

        return templates.TemplateResponse(
            request,
            "detail.html",
            {
                "title": page_title("Detail"),
                "weather": forecast,
            },
        )

    @staticmethod
    def render_about(request: Request) -> HTMLResponse:
        return templates.TemplateResponse(request, "about.html", {"title": page_title("About")})

    @staticmethod
    def render_help(request: Request, settings: Settings) -> HTMLResponse:
        return templates.TemplateResponse(
            request,
            "help.html",
            {
                "title": page_title("Help"),
                "locations": settings.locations,
            },
        )

    @staticmethod
    def render_error(request: Request, message: str, status_code: int = 500) -> HTMLResponse:
        """Render the error page.

        Args:
            request: FastAPI request object
            message: Message shown to the user
            status_code: HTTP status code of the response

        Returns:
            HTMLResponse with the rendered error page
        """
        return templates.TemplateResponse(
            request,
            "error.html",
            {
                "title": page_title("Error"),
                "message": message,
                "status_code": status_code,
            },
            status_code=status_code,
        )
