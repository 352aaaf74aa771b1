"""Health check response schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from kickstart_service.core.schemas.common import HealthStatus


class ComponentHealth(BaseModel):
    """Health of a single component."""

    name: str = Field(description="Component name")
    status: HealthStatus = Field(description="Component health status")
    message: str = Field(default="", description="Status message")
    response_time_ms: float = Field(default=0.0, description="Check latency in milliseconds")


class HealthResponse(BaseModel):
    """Aggregated health check response.

    Example:
        ```json
        {
            "status": "healthy",
            "version": "0.1.0",
            "timestamp": "2025-01-01T00:00:00Z",
            "components": [
                {"name": "application", "status": "healthy",
                 "message": "Application is running", "response_time_ms": 0.0},
                {"name": "database", "status": "healthy",
                 "message": "Database connection successful", "response_time_ms": 1.8}
            ],
            "total_response_time_ms": 2.1
        }
        ```
    """

    status: HealthStatus = Field(description="Overall status, healthy only if every component is")
    version: str = Field(min_length=1, max_length=50, description="Service version")
    timestamp: datetime = Field(description="Check timestamp")
    components: list[ComponentHealth] = Field(default_factory=list)
    total_response_time_ms: float = Field(description="Total check duration in milliseconds")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "healthy",
                "version": "0.1.0",
                "timestamp": "2025-01-01T00:00:00Z",
                "components": [
                    {
                        "name": "application",
                        "status": "healthy",
                        "message": "Application is running",
                        "response_time_ms": 0.0,
                    }
                ],
                "total_response_time_ms": 0.4,
            }
        }
    )

    @property
    def is_healthy(self) -> bool:
        return self.status == HealthStatus.HEALTHY


__all__ = ["ComponentHealth", "HealthResponse"]
