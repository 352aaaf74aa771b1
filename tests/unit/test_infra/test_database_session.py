"""Tests for engine and session lifecycle."""

from __future__ import annotations

import pytest
from sqlalchemy import inspect, text

from kickstart_service.infra.database import session as session_module


@pytest.fixture
async def sqlite_database(tmp_path, monkeypatch):
    """Point the settings at a throwaway SQLite file and reset the engine."""
    monkeypatch.setenv("DB_ENABLED", "true")
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'app.db'}")
    await session_module.close_database()
    yield
    await session_module.close_database()


@pytest.mark.unit
class TestSessionLifecycle:
    """Tests for the lazily created engine."""

    @pytest.mark.asyncio
    async def test_engine_is_created_once(self, sqlite_database):
        engine = session_module.get_engine()

        assert session_module.get_engine() is engine
        assert session_module.get_session_factory() is session_module.get_session_factory()

    @pytest.mark.asyncio
    async def test_init_database_creates_tables(self, sqlite_database):
        await session_module.init_database(create_tables=True)

        async with session_module.get_engine().connect() as conn:
            tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())

        assert "users" in tables

    @pytest.mark.asyncio
    async def test_session_executes_queries(self, sqlite_database):
        async with session_module.get_async_session() as session:
            value = (await session.execute(text("SELECT 1"))).scalar()

        assert value == 1

    @pytest.mark.asyncio
    async def test_close_resets_engine(self, sqlite_database):
        engine = session_module.get_engine()

        await session_module.close_database()

        assert session_module.get_engine() is not engine
