"""
Unitip Backend — Shared Schemas
=================================

What:  Error envelope and health models used across routes, plus the
       `responses=` fragments routes declare for OpenAPI.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class ErrorItem(BaseModel):
    """
    One error entry. `path` names the offending field on 400 responses and
    is omitted for 401/403/500.
    """
    path: Optional[str] = Field(default=None, description="Field that failed validation")
    message: str = Field(description="Human-readable error description")


class ErrorResponse(BaseModel):
    """
    Standardized error body for every non-2xx response.

    Example:
        {
            "errors": [{"path": "gender", "message": "Input should be 'male', 'female' or ''"}],
            "request_id": "1f0c2a9b"
        }
    """
    errors: List[ErrorItem] = Field(description="One entry per problem")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")


# ── OpenAPI response fragments ────────────────────────────────────────────
BAD_REQUEST = {400: {"description": "Validation failed", "model": ErrorResponse}}
UNAUTHORIZED = {401: {"description": "Missing or invalid bearer token", "model": ErrorResponse}}
FORBIDDEN = {403: {"description": "Role not permitted", "model": ErrorResponse}}
SERVER_ERROR = {500: {"description": "Server error", "model": ErrorResponse}}
