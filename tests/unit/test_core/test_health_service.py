"""Unit tests for HealthService aggregation."""
from __future__ import annotations

import asyncio
from unittest.mock import MagicMock

import pytest

from kickstart_service.core.schemas.common import HealthStatus
from kickstart_service.features.health import (
    ApplicationHealthProvider,
    DatabaseHealthProvider,
    HealthCheckResult,
    HealthProvider,
    HealthService,
)


class StaticProvider:
    """Provider returning a fixed result."""

    def __init__(self, name: str, status: HealthStatus, message: str = "") -> None:
        self._name = name
        self._status = status
        self._message = message

    @property
    def name(self) -> str:
        return self._name

    async def check_health(self) -> HealthCheckResult:
        return HealthCheckResult(status=self._status, message=self._message, latency_ms=1.234)


@pytest.mark.unit
class TestHealthService:
    """Tests for HealthService."""

    @pytest.mark.asyncio
    async def test_all_healthy(self):
        """Overall status is healthy when every component is."""
        service = HealthService(
            providers=[
                ApplicationHealthProvider(),
                StaticProvider("database", HealthStatus.HEALTHY, "ok"),
            ]
        )

        result = await service.check_health()

        assert result.status == HealthStatus.HEALTHY
        assert result.is_healthy
        assert [c.name for c in result.components] == ["application", "database"]
        assert result.components[1].response_time_ms == 1.23
        assert result.version == "0.1.0"
        assert result.total_response_time_ms >= 0

    @pytest.mark.asyncio
    async def test_one_unhealthy_component(self):
        """Any unhealthy component makes the whole check unhealthy."""
        service = HealthService(
            providers=[
                ApplicationHealthProvider(),
                StaticProvider("database", HealthStatus.UNHEALTHY, "down"),
            ]
        )

        result = await service.readiness()

        assert result.status == HealthStatus.UNHEALTHY
        assert result.components[1].message == "down"

    @pytest.mark.asyncio
    async def test_liveness_checks_application_only(self):
        """Liveness ignores dependencies, so a dead database does not fail it."""
        service = HealthService(
            providers=[
                ApplicationHealthProvider(),
                StaticProvider("database", HealthStatus.UNHEALTHY),
            ]
        )

        result = await service.liveness()

        assert result.status == HealthStatus.HEALTHY
        assert [c.name for c in result.components] == ["application"]

    def test_database_omitted_when_disabled(self, monkeypatch):
        """With DB_ENABLED=false only the application is checked."""
        monkeypatch.setenv("DB_ENABLED", "false")

        assert HealthService().provider_names == ["application"]

    def test_providers_satisfy_protocol(self):
        """Built-in providers are HealthProvider instances."""
        assert isinstance(ApplicationHealthProvider(), HealthProvider)
        assert isinstance(DatabaseHealthProvider(MagicMock()), HealthProvider)


@pytest.mark.unit
class TestDatabaseHealthProvider:
    """Tests for DatabaseHealthProvider."""

    @pytest.mark.asyncio
    async def test_select_one_succeeds(self, db_engine):
        """A reachable database is healthy."""
        result = await DatabaseHealthProvider(db_engine).check_health()

        assert result.status == HealthStatus.HEALTHY
        assert result.latency_ms >= 0

    @pytest.mark.asyncio
    async def test_connection_failure_is_reported(self):
        """Connection errors become an unhealthy result, not an exception."""
        engine = MagicMock()
        engine.connect.side_effect = OSError("connection refused")

        result = await DatabaseHealthProvider(engine).check_health()

        assert result.status == HealthStatus.UNHEALTHY
        assert "connection refused" in result.message

    @pytest.mark.asyncio
    async def test_timeout_is_reported(self):
        """A check slower than the timeout is unhealthy."""

        class SlowConnection:
            async def __aenter__(self):
                await asyncio.sleep(1)
                return self

            async def __aexit__(self, *exc):
                return False

        engine = MagicMock()
        engine.connect.return_value = SlowConnection()

        result = await DatabaseHealthProvider(engine, timeout=0.01).check_health()

        assert result.status == HealthStatus.UNHEALTHY
        assert result.metadata == {"error": "timeout"}
