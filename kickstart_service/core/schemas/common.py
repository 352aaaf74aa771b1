"""Common schemas."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class HealthStatus(str, Enum):
    """Health check status values."""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"


class MessageResponse(BaseModel):
    """Simple message response."""

    message: str = Field(min_length=1, max_length=1000, description="Response message")

    model_config = ConfigDict(
        json_schema_extra={"example": {"message": "User with id 1 deleted successfully"}},
    )
