"""Page routes for serving HTML views."""

import httpx
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse

from lirix.config import Settings, get_settings
from lirix.dependencies import get_http_client
from lirix.views.template_renderer import TemplateRenderer

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def overview(
    request: Request,
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
):
    """Render current weather for each configured location."""
    return await TemplateRenderer.render_overview(request, client, settings)


@router.get("/detail", response_class=HTMLResponse)
async def detail(
    request: Request,
    location: str = Query(..., description="OpenWeatherMap city id"),
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
):
    """Render the forecast for a single location."""
    return await TemplateRenderer.render_detail(request, client, location, settings)


@router.get("/about", response_class=HTMLResponse)
async def about(request: Request):
    """Render the about page."""
    return TemplateRenderer.render_about(request)


@router.get("/help", response_class=HTMLResponse)
async def help_page(request: Request, settings: Settings = Depends(get_settings)):
    """Render the help page."""
    return TemplateRenderer.render_help(request, settings)
