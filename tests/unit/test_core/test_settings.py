"""Unit tests for settings classes and loaders."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from kickstart_service.core.settings import (
    AppSettings,
    LoggingSettings,
    PaginationSettings,
    PostgresSettings,
    get_app_settings,
    get_pagination_settings,
)


@pytest.mark.unit
class TestAppSettings:
    """Tests for AppSettings."""

    def test_defaults(self, monkeypatch):
        """Defaults serve the API under /api/v1 on port 3000."""
        monkeypatch.delenv("APP_ENVIRONMENT", raising=False)
        settings = AppSettings(_env_file=None)

        assert settings.api_prefix == "/api/v1"
        assert settings.port == 3000
        assert settings.environment == "development"

    def test_env_prefix(self, monkeypatch):
        """APP_ variables override defaults."""
        monkeypatch.setenv("APP_PORT", "8080")
        monkeypatch.setenv("APP_DEBUG", "true")

        settings = AppSettings(_env_file=None)

        assert settings.port == 8080
        assert settings.debug is True

    def test_disable_docs(self):
        """disable_docs removes every documentation URL."""
        kwargs = AppSettings(_env_file=None, disable_docs=True).get_fastapi_kwargs()

        assert kwargs["docs_url"] is None
        assert kwargs["redoc_url"] is None
        assert kwargs["openapi_url"] is None

    def test_frozen(self):
        """Settings cannot be mutated after load."""
        settings = AppSettings(_env_file=None)

        with pytest.raises(ValidationError):
            settings.port = 1  # type: ignore[misc]

    def test_loader_is_cached(self):
        """The loader returns the same instance until caches are cleared."""
        assert get_app_settings() is get_app_settings()


@pytest.mark.unit
class TestPostgresSettings:
    """Tests for PostgresSettings URL handling."""

    def test_components_build_url(self):
        """Without a DSN the URL is built from components."""
        settings = PostgresSettings(
            _env_file=None,
            DATABASE_URL=None,
            host="db",
            port=5433,
            user="app",
            password="p@ss word",
            name="users",
        )

        assert settings.get_sqlalchemy_url() == "postgresql+psycopg://app:p%40ss+word@db:5433/users"

    @pytest.mark.parametrize(
        "dsn",
        ["postgres://u:p@h:5432/d", "postgresql://u:p@h:5432/d"],
    )
    def test_plain_dsn_gets_async_driver(self, dsn):
        """Plain PostgreSQL schemes are rewritten for psycopg."""
        settings = PostgresSettings(_env_file=None, DATABASE_URL=dsn)

        assert settings.get_sqlalchemy_url() == "postgresql+psycopg://u:p@h:5432/d"

    def test_other_urls_pass_through(self):
        """Non-PostgreSQL URLs are used unchanged and get no pool sizing."""
        settings = PostgresSettings(_env_file=None, DATABASE_URL="sqlite+aiosqlite:///./dev.db")

        assert settings.get_sqlalchemy_url() == "sqlite+aiosqlite:///./dev.db"
        assert "pool_size" not in settings.sqlalchemy_engine_kwargs()

    def test_postgres_pool_kwargs(self):
        """PostgreSQL URLs get pool sizing options."""
        kwargs = PostgresSettings(_env_file=None, DATABASE_URL=None).sqlalchemy_engine_kwargs()

        assert kwargs["pool_size"] == 5
        assert kwargs["max_overflow"] == 5

    def test_blank_dsn_is_none(self):
        """An empty DATABASE_URL falls back to components."""
        assert PostgresSettings(_env_file=None, DATABASE_URL="  ").dsn is None

    def test_disabled_is_not_configured(self):
        """enabled=False turns the database off regardless of connection info."""
        assert PostgresSettings(_env_file=None, enabled=False).is_configured is False
        assert PostgresSettings(_env_file=None, enabled=True).is_configured is True

    def test_password_is_secret(self):
        """The password is not shown in repr."""
        settings = PostgresSettings(_env_file=None, password="hunter")

        assert "hunter" not in repr(settings)


@pytest.mark.unit
class TestPaginationSettings:
    """Tests for PaginationSettings."""

    def test_defaults(self):
        """Default and maximum page size are both 200; tokens cap at 512."""
        settings = PaginationSettings(_env_file=None)

        assert settings.default_limit == 200
        assert settings.max_limit == 200
        assert settings.max_token_length == 512

    def test_max_limit_cannot_exceed_200(self):
        """The hard ceiling cannot be raised by configuration."""
        with pytest.raises(ValidationError):
            PaginationSettings(_env_file=None, max_limit=500)

    def test_default_within_max(self):
        """default_limit may not exceed max_limit."""
        with pytest.raises(ValidationError):
            PaginationSettings(_env_file=None, default_limit=100, max_limit=50)

    def test_env_override(self, monkeypatch):
        """PAGINATION_ variables are read by the loader."""
        monkeypatch.setenv("PAGINATION_DEFAULT_LIMIT", "25")

        assert get_pagination_settings().default_limit == 25


@pytest.mark.unit
class TestLoggingSettings:
    """Tests for LoggingSettings."""

    def test_file_path_only_when_enabled(self):
        """File logging is off unless enabled."""
        assert LoggingSettings(_env_file=None, file_enabled=False).to_logging_kwargs()["file_path"] is None

        kwargs = LoggingSettings(
            _env_file=None, file_enabled=True, file_path="logs/app.jsonl"
        ).to_logging_kwargs()
        assert kwargs["file_path"] == "logs/app.jsonl"

    def test_env_prefix(self, monkeypatch):
        """LOG_ variables override defaults."""
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("LOG_JSON_LOGS", "false")

        settings = LoggingSettings(_env_file=None)

        assert settings.level == "DEBUG"
        assert settings.json_logs is False
