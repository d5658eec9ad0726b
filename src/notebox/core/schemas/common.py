"""
Shared response schemas - errors, health etc
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Response model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(BaseModel):
    """Plain message response, also the shape of every error body."""

    message: str = Field(description="Human-readable message")


class ErrorResponse(MessageResponse):
    """Error response for malformed requests."""

    errors: Optional[list[dict[str, Any]]] = Field(
        default=None, description="Validation error details"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "message": "Invalid request body",
                "errors": [{"loc": ["body", "title"], "msg": "Input should be a valid string"}],
            }
        }
    )


class HealthCheckResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(description="Overall health status")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    version: str = Field(description="Application version")
    checks: dict[str, dict[str, Any]] = Field(description="Individual component health checks")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "healthy",
                "timestamp": "2025-09-13T10:30:00Z",
                "version": "1.0.0",
                "checks": {
                    "database": {
                        "connected": True,
                        "status": "healthy",
                        "response_time_ms": 3.2
                    }
                }
            }
        }
    )
