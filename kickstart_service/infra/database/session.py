"""Database session management with the psycopg3 async driver.

The engine and session factory are created on first use from
``PostgresSettings``, so importing this module never opens a connection
and tests can run with the database disabled.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from kickstart_service.core.settings import get_app_settings, get_db_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from sqlalchemy.ext.asyncio import AsyncEngine

logger = logging.getLogger(__name__)

_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def get_engine() -> AsyncEngine:
    """Return the process-wide async engine, creating it on first call."""
    global _engine

    if _engine is None:
        db_settings = get_db_settings()
        kwargs = db_settings.sqlalchemy_engine_kwargs()
        kwargs["echo"] = kwargs["echo"] or get_app_settings().debug
        _engine = create_async_engine(db_settings.get_sqlalchemy_url(), **kwargs)
    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Return the session factory bound to ``get_engine()``."""
    global _session_factory

    if _session_factory is None:
        _session_factory = async_sessionmaker(
            get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
    return _session_factory


@asynccontextmanager
async def get_async_session() -> AsyncGenerator[AsyncSession]:
    """Get async database session.

    Yields:
        Database session that is closed on exit, including on error and
        cancellation. Uncommitted work is rolled back by ``close()``.

    Example:
        async with get_async_session() as session:
            result = await session.execute(select(User))
            users = result.scalars().all()
    """
    async with get_session_factory()() as session:
        try:
            yield session
        finally:
            await session.close()


async def init_database(*, create_tables: bool = False) -> None:
    """Verify database connectivity, optionally creating tables.

    Args:
        create_tables: Run ``Base.metadata.create_all`` (development only)

    Raises:
        SQLAlchemyError: If the database cannot be reached.
    """
    db_settings = get_db_settings()
    engine = get_engine()
    logger.info(
        "Initializing database connection",
        extra={"create_tables": create_tables, "echo": db_settings.echo},
    )

    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

        if create_tables:
            from kickstart_service.core.database import Base
            from kickstart_service.core.models import User  # noqa: F401

            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            logger.info("Database tables ensured", extra={"tables": sorted(Base.metadata.tables)})
    except Exception as e:
        logger.error("Failed to connect to database", extra={"error": str(e)})
        raise

    logger.info("Database connection established successfully")


async def close_database() -> None:
    """Dispose the engine and forget the session factory.

    This should be called during application shutdown.
    """
    global _engine, _session_factory

    if _engine is None:
        return

    logger.info("Closing database connection")
    await _engine.dispose()
    _engine = None
    _session_factory = None
    logger.info("Database connection closed successfully")


__all__ = [
    "close_database",
    "get_async_session",
    "get_engine",
    "get_session_factory",
    "init_database",
]
