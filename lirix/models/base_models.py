"""Pydantic models for request/response validation."""

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Basic health check response."""

    status: str
    version: str


class LocationInfo(BaseModel):
    """A configured location."""

    location_id: str = Field(..., description="OpenWeatherMap city id")
    location_name: str = Field(..., description="Display name")


class ErrorDetail(BaseModel):
    """Body of a structured error."""

    code: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    """Error response."""

    error: ErrorDetail
