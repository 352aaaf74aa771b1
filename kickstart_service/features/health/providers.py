"""Health check providers.

A provider is anything with a ``name`` and an async ``check_health()``;
``HealthService`` runs each registered provider and aggregates the results.

Example:
    >>> class CacheProvider:
    ...     @property
    ...     def name(self) -> str:
    ...         return "cache"
    ...
    ...     async def check_health(self) -> HealthCheckResult:
    ...         return HealthCheckResult(status=HealthStatus.HEALTHY, message="ok")
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from sqlalchemy import text

from kickstart_service.core.schemas.common import HealthStatus

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncEngine

logger = logging.getLogger(__name__)


@dataclass
class HealthCheckResult:
    """Result from a single health check.

    Attributes:
        status: HEALTHY or UNHEALTHY
        message: Human-readable status message
        latency_ms: Check duration in milliseconds
        metadata: Provider-specific details
    """

    status: HealthStatus
    message: str = ""
    latency_ms: float = 0.0
    metadata: dict[str, Any] = field(default_factory=dict)


@runtime_checkable
class HealthProvider(Protocol):
    """Protocol for health check providers."""

    @property
    def name(self) -> str:
        """Component name reported in the health response."""
        ...

    async def check_health(self) -> HealthCheckResult:
        """Perform the check."""
        ...


class ApplicationHealthProvider:
    """Reports the process itself; healthy whenever it can answer."""

    @property
    def name(self) -> str:
        return "application"

    async def check_health(self) -> HealthCheckResult:
        return HealthCheckResult(
            status=HealthStatus.HEALTHY,
            message="Application is running",
        )


class DatabaseHealthProvider:
    """Checks database connectivity with ``SELECT 1`` under a timeout."""

    def __init__(self, engine: AsyncEngine, timeout: float = 2.0) -> None:
        self._engine = engine
        self._timeout = timeout

    @property
    def name(self) -> str:
        return "database"

    async def check_health(self) -> HealthCheckResult:
        """Run the probe query; any failure is reported, never raised."""
        start_time = time.perf_counter()

        try:
            async with asyncio.timeout(self._timeout):
                async with self._engine.connect() as conn:
                    await conn.execute(text("SELECT 1"))

        except TimeoutError:
            latency_ms = (time.perf_counter() - start_time) * 1000
            logger.warning("Database health check timed out", extra={"timeout": self._timeout})
            return HealthCheckResult(
                status=HealthStatus.UNHEALTHY,
                message=f"Timeout after {self._timeout}s",
                latency_ms=latency_ms,
                metadata={"error": "timeout"},
            )

        except Exception as e:
            latency_ms = (time.perf_counter() - start_time) * 1000
            logger.warning("Database health check failed", extra={"error": str(e)})
            return HealthCheckResult(
                status=HealthStatus.UNHEALTHY,
                message=f"Connection failed: {e}",
                latency_ms=latency_ms,
                metadata={"error": str(e)},
            )

        return HealthCheckResult(
            status=HealthStatus.HEALTHY,
            message="Database connection successful",
            latency_ms=(time.perf_counter() - start_time) * 1000,
        )


__all__ = [
    "ApplicationHealthProvider",
    "DatabaseHealthProvider",
    "HealthCheckResult",
    "HealthProvider",
]
