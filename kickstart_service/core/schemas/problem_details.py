"""RFC 7807 Problem Details schema for error responses."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ProblemDetails(BaseModel):
    """RFC 7807 Problem Details for HTTP APIs.

    See: https://datatracker.ietf.org/doc/html/rfc7807

    Extension members (``request_id``, ``errors``) are allowed and kept.
    """

    type: str = Field(
        default="about:blank",
        min_length=1,
        max_length=200,
        description="URI reference identifying the problem type",
    )
    title: str = Field(
        min_length=1, max_length=200, description="Short, human-readable summary of the problem"
    )
    status: int = Field(ge=100, le=599, description="HTTP status code")
    detail: str | None = Field(
        default=None,
        max_length=2000,
        description="Human-readable explanation specific to this occurrence",
    )
    instance: str | None = Field(
        default=None,
        max_length=500,
        description="URI reference identifying the specific occurrence",
    )

    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={
            "example": {
                "type": "invalid-pagination-token",
                "title": "Bad Request",
                "status": 400,
                "detail": "Pagination token is not valid base64",
                "instance": "/api/v1/users",
            }
        },
    )

    def to_response_body(self, request_id: str | None = None) -> dict[str, Any]:
        """Dump for a JSONResponse, dropping unset optional members."""
        body = self.model_dump(mode="json", exclude_none=True)
        if request_id:
            body["request_id"] = request_id
        return body


class FieldError(BaseModel):
    """A single field-level validation failure."""

    field: str | None = Field(default=None, description="Offending field, None for whole-object errors")
    message: str = Field(description="What is wrong with the field")


__all__ = ["FieldError", "ProblemDetails"]
