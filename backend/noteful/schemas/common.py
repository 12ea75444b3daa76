"""
Noteful API — Shared Response Schemas
======================================

What:  Error envelopes and the health check payload used across routers.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for API errors.

    Example:
        {
            "error": "validation_error",
            "message": "Missing `title` in request body",
            "details": {"field": "title"},
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class FieldErrorResponse(BaseModel):
    """422 envelope returned by the user registration checks."""
    code: int = Field(default=422)
    reason: str = Field(default="ValidationError")
    message: str
    location: str


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and database status.
    Who:   Returned by GET /health for monitoring and container health checks.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
