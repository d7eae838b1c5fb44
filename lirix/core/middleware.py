"""Middleware configuration."""

import re

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter
from slowapi.util import get_remote_address

from lirix.config import Settings
from lirix.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


def setup_middleware(app: FastAPI, settings: Settings) -> Limiter:
    """Configure all middleware for the application.

    Args:
        app: FastAPI application instance
        settings: Application settings

    Returns:
        Limiter instance for rate limiting
    """
    host = re.escape(settings.api_host)
    origin_pattern = rf"http://(localhost|127\.0\.0\.1|{host}):{settings.api_port}"
    log_with_context(
        logger,
        "info",
        "Configuring CORS middleware with regex pattern",
        event_type="security_config",
        pattern=origin_pattern,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origin_regex=origin_pattern,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Rate limiter (60 requests per minute per IP)
    limiter = Limiter(key_func=get_remote_address, default_limits=["60/minute"])
    app.state.limiter = limiter

    @app.middleware("http")
    async def count_requests(request, call_next):
        """Count total requests served."""
        app.state.request_count = getattr(app.state, "request_count", 0) + 1
        response = await call_next(request)
        return response

    return limiter
