"""Shared API schemas."""

from .common import HealthStatus, MessageResponse
from .problem_details import FieldError, ProblemDetails

__all__ = ["FieldError", "HealthStatus", "MessageResponse", "ProblemDetails"]
