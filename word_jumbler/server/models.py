"""Pydantic response models for the HTTP API.

WHY: FastAPI uses these schemas for response serialization and for the
generated OpenAPI docs at /docs.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- Python 3.9+ compatible (no PEP 604 unions)
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response body.

    RULES:
    - detail is always a human-readable error message
    """

    detail: str = Field(description="Human-readable error description.")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
