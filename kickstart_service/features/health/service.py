"""Health check service and its FastAPI dependency.

Example:
    >>> service = HealthService()
    >>> result = await service.check_health()
    >>>
    >>> # With explicit providers
    >>> service = HealthService(providers=[ApplicationHealthProvider()])
"""

from __future__ import annotations

import asyncio
import time
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Annotated

from fastapi import Depends

from kickstart_service.core.schemas.common import HealthStatus
from kickstart_service.core.services.base import BaseService
from kickstart_service.core.settings import get_app_settings, get_db_settings
from kickstart_service.features.health.providers import (
    ApplicationHealthProvider,
    DatabaseHealthProvider,
)
from kickstart_service.features.health.schemas import ComponentHealth, HealthResponse

if TYPE_CHECKING:
    from collections.abc import Sequence

    from kickstart_service.features.health.providers import HealthProvider


class HealthService(BaseService):
    """Runs health providers and aggregates their results.

    Without explicit providers the service always checks the application
    and adds the database check only when the database is configured.
    """

    def __init__(self, providers: Sequence[HealthProvider] | None = None) -> None:
        super().__init__()
        self._app_settings = get_app_settings()
        self._providers = list(providers) if providers is not None else self._default_providers()

    def _default_providers(self) -> list[HealthProvider]:
        providers: list[HealthProvider] = [ApplicationHealthProvider()]

        db_settings = get_db_settings()
        if db_settings.is_configured:
            from kickstart_service.infra.database import get_engine

            providers.append(
                DatabaseHealthProvider(get_engine(), timeout=db_settings.health_check_timeout)
            )
        return providers

    @property
    def provider_names(self) -> list[str]:
        return [p.name for p in self._providers]

    async def _run(self, providers: Sequence[HealthProvider]) -> HealthResponse:
        start_time = time.perf_counter()
        results = await asyncio.gather(*(p.check_health() for p in providers))

        components = [
            ComponentHealth(
                name=provider.name,
                status=result.status,
                message=result.message,
                response_time_ms=round(result.latency_ms, 2),
            )
            for provider, result in zip(providers, results, strict=True)
        ]
        overall = (
            HealthStatus.HEALTHY
            if all(c.status == HealthStatus.HEALTHY for c in components)
            else HealthStatus.UNHEALTHY
        )
        if overall is not HealthStatus.HEALTHY:
            self.logger.warning(
                "Health check failed",
                extra={
                    "unhealthy": [c.name for c in components if c.status != HealthStatus.HEALTHY]
                },
            )

        return HealthResponse(
            status=overall,
            version=self._app_settings.version,
            timestamp=datetime.now(UTC),
            components=components,
            total_response_time_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )

    async def check_health(self) -> HealthResponse:
        """Run every provider."""
        return await self._run(self._providers)

    async def readiness(self) -> HealthResponse:
        """Readiness uses the full check: ready only when every component is healthy."""
        return await self.check_health()

    async def liveness(self) -> HealthResponse:
        """Check the application component only."""
        return await self._run(
            [p for p in self._providers if p.name == "application"]
            or [ApplicationHealthProvider()]
        )


def get_health_service() -> HealthService:
    """Get health service dependency."""
    return HealthService()


HealthServiceDep = Annotated[HealthService, Depends(get_health_service)]


__all__ = ["HealthService", "HealthServiceDep", "get_health_service"]
