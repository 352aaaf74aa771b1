"""Health checks: comprehensive, readiness and liveness."""

from .providers import (
    ApplicationHealthProvider,
    DatabaseHealthProvider,
    HealthCheckResult,
    HealthProvider,
)
from .router import router
from .service import HealthService, HealthServiceDep, get_health_service

__all__ = [
    "ApplicationHealthProvider",
    "DatabaseHealthProvider",
    "HealthCheckResult",
    "HealthProvider",
    "HealthService",
    "HealthServiceDep",
    "get_health_service",
    "router",
]
