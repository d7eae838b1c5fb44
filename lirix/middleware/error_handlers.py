"""Exception handlers for the application."""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response

from lirix.exceptions import LirixException
from lirix.logging_config import get_logger, log_with_context
from lirix.views.template_renderer import TemplateRenderer

logger = get_logger(__name__)

API_PREFIX = "/api/"


def wants_json(request: Request) -> bool:
    """API routes answer with JSON errors, page routes with an error page."""
    return request.url.path.startswith(API_PREFIX)


async def lirix_exception_handler(request: Request, exc: LirixException) -> Response:
    """Handle custom Lirix exceptions with proper HTTP status codes.

    API callers get a structured JSON body with code, message and details;
    browsers get the rendered error page.
    """
    log_with_context(
        logger,
        "warning",
        "Lirix error",
        error_code=exc.code.value,
        error_message=exc.message,
        status_code=exc.status_code,
        method=request.method,
        path=request.url.path,
        event_type="lirix_error",
    )

    if not wants_json(request):
        return TemplateRenderer.render_error(request, exc.message, status_code=exc.status_code)

    error_content: dict[str, Any] = {"code": exc.code.value, "message": exc.message, "details": exc.details}

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": error_content},
    )


async def general_exception_handler(request: Request, exc: Exception) -> Response:
    """Handle general exceptions with logging."""
    log_with_context(
        logger,
        "error",
        "Unhandled exception",
        error=str(exc),
        error_type=type(exc).__name__,
        method=request.method,
        path=request.url.path,
        event_type="unhandled_error",
    )
    logger.error("Exception traceback:", exc_info=exc)

    # Don't expose internal error details to clients
    if not wants_json(request):
        return TemplateRenderer.render_error(request, "Internal server error", status_code=500)

    return JSONResponse(
        status_code=500,
        content={"error": {"code": "INTERNAL_ERROR", "message": "Internal server error"}},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the application.

    Args:
        app: FastAPI application instance
    """
    from slowapi import _rate_limit_exceeded_handler
    from slowapi.errors import RateLimitExceeded

    app.add_exception_handler(LirixException, lirix_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
