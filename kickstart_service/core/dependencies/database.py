"""Database dependencies for FastAPI route handlers.

Two session getters exist for different use cases:

1. `get_db_session()` (this module) - FastAPI dependency. The session
   lifecycle is tied to the HTTP request and the session is closed when
   the request completes, fails or is cancelled.

2. `get_async_session()` (infra.database) - framework-agnostic async
   context manager for scripts and background work.

Both use the same underlying session factory. Tests override
``get_db_session`` via ``app.dependency_overrides``.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from kickstart_service.infra.database import get_async_session


async def get_db_session() -> AsyncGenerator[AsyncSession]:
    """FastAPI dependency for database session.

    Example:
        @router.get("/users")
        async def list_users(session: SessionDep):
            ...
    """
    async with get_async_session() as session:
        yield session


SessionDep = Annotated[AsyncSession, Depends(get_db_session)]

__all__ = ["SessionDep", "get_db_session"]
