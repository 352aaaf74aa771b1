"""Health check API endpoints.

- Comprehensive health: /health/ - every component, 503 when any is unhealthy
- Readiness probe: /health/ready - same checks as the comprehensive health
- Liveness probe: /health/live - the process itself, always 200
"""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from kickstart_service.features.health.schemas import HealthResponse

# NOTE: must stay outside TYPE_CHECKING for FastAPI to resolve the Depends() metadata
from kickstart_service.features.health.service import HealthServiceDep  # noqa: TC001

router = APIRouter(prefix="/health", tags=["health"])

_UNAVAILABLE = {503: {"model": HealthResponse, "description": "A component is unhealthy"}}


@router.get(
    "/",
    response_model=HealthResponse,
    responses=_UNAVAILABLE,
    summary="Comprehensive health check",
)
async def health_check(response: Response, service: HealthServiceDep) -> HealthResponse:
    """Check the application and its database."""
    result = await service.check_health()
    if not result.is_healthy:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return result


@router.get(
    "/ready",
    response_model=HealthResponse,
    responses=_UNAVAILABLE,
    summary="Readiness probe",
)
async def readiness_check(response: Response, service: HealthServiceDep) -> HealthResponse:
    """Returns 503 while a dependency is unavailable, so traffic is held back."""
    result = await service.readiness()
    if not result.is_healthy:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return result


@router.get(
    "/live",
    response_model=HealthResponse,
    summary="Liveness probe",
)
async def liveness_check(service: HealthServiceDep) -> HealthResponse:
    """Returns 200 whenever the process can answer."""
    return await service.liveness()
