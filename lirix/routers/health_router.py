"""Health endpoints."""

import time

from fastapi import APIRouter, Request

from lirix import __version__
from lirix.models import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Basic health check endpoint for container healthchecks."""
    return HealthResponse(status="ok", version=__version__)


@router.get("/health/live")
async def liveness_check(request: Request):
    """Liveness probe - is the application running?"""
    startup_time = getattr(request.app.state, "startup_time", None)
    uptime = time.time() - startup_time if startup_time else 0.0
    return {
        "status": "alive",
        "uptime_seconds": round(uptime, 1),
        "requests_served": getattr(request.app.state, "request_count", 0),
    }
