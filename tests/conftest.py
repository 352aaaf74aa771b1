"""Pytest configuration and shared fixtures.

Organization:
    - Environment: settings that keep tests off external infrastructure
    - Application Fixtures: FastAPI app and HTTP clients
    - Database Fixtures: in-memory SQLite engine, sessions and seeding helpers
"""

from __future__ import annotations

import os
from collections.abc import AsyncGenerator, Awaitable, Callable
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

if TYPE_CHECKING:
    from fastapi import FastAPI
    from sqlalchemy.ext.asyncio import AsyncEngine

    from kickstart_service.core.models import User

# Ensure tests run without external infrastructure
os.environ.setdefault("DB_ENABLED", "false")
os.environ.setdefault("DATABASE_URL", "")
os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ.setdefault("LOG_FILE_ENABLED", "false")

BASE_TIME = datetime(2025, 1, 1, 12, 0, tzinfo=UTC)


# ============================================================================
# Settings
# ============================================================================


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    """Reload settings for every test so monkeypatched env vars take effect."""
    from kickstart_service.core.settings import clear_all_caches

    clear_all_caches()
    yield
    clear_all_caches()


# ============================================================================
# Application Fixtures
# ============================================================================


@pytest.fixture
def app() -> FastAPI:
    """Create a fresh FastAPI application.

    The lifespan does not run under ``ASGITransport``, so no database
    connection or logging listener is started.
    """
    from kickstart_service.app.main import create_app

    return create_app()


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """HTTP client for endpoints that need no database."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def db_client(
    app: FastAPI,
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncClient]:
    """HTTP client whose requests use sessions on the in-memory database.

    Example:
        async def test_list(db_client, seed_users):
            await seed_users(3)
            response = await db_client.get("/api/v1/users")
    """
    from kickstart_service.core.dependencies.database import get_db_session

    async def override_get_db_session() -> AsyncGenerator[AsyncSession]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    try:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()


# ============================================================================
# Database Fixtures
# ============================================================================


@pytest.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine]:
    """Async engine on a fresh in-memory SQLite database with all tables.

    StaticPool keeps a single connection, so every session sees the same
    in-memory database.
    """
    from kickstart_service.core.database import Base
    from kickstart_service.core.models import User  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine."""
    return async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession]:
    """Session for repository and service tests; rolled back afterwards."""
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()


SeedUsers = Callable[..., Awaitable[list["User"]]]


@pytest.fixture
def seed_users(session_factory: async_sessionmaker[AsyncSession]) -> SeedUsers:
    """Insert users with controlled creation times and commit them.

    Args (of the returned coroutine):
        count: Number of users to insert
        start: Creation time of the first user
        step: Gap between consecutive creation times; ``timedelta(0)``
            gives every user the same timestamp

    Returns:
        The inserted users in insertion order
    """
    from kickstart_service.core.models import User

    async def _seed(
        count: int,
        *,
        start: datetime = BASE_TIME,
        step: timedelta = timedelta(seconds=1),
    ) -> list[User]:
        users = [
            User(name=f"Seeded User {_letters(i)}", age=20 + i % 50, created_at=start + step * i)
            for i in range(count)
        ]
        async with session_factory() as session:
            session.add_all(users)
            await session.commit()
        return users

    return _seed


def _letters(index: int) -> str:
    """Spreadsheet-style column label: 0 -> A, 25 -> Z, 26 -> AA."""
    label = ""
    index += 1
    while index:
        index, rem = divmod(index - 1, 26)
        label = chr(ord("A") + rem) + label
    return label
