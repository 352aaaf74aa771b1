"""User repository."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select

from kickstart_service.core.database import BaseRepository
from kickstart_service.core.models import User

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from kickstart_service.core.pagination import KeysetRows, PageRequest


class UserRepository(BaseRepository[User]):
    """Data access for users."""

    __slots__ = ()

    async def list_page(
        self,
        session: AsyncSession,
        page_request: PageRequest,
        *,
        max_limit: int | None = None,
    ) -> KeysetRows[User]:
        """Fetch one keyset page of users (plus the sentinel row)."""
        return await self.paginate_keyset(
            session, select(User), page_request, max_limit=max_limit
        )


_user_repository = UserRepository(User)


def get_user_repository() -> UserRepository:
    """Return the shared (stateless) user repository."""
    return _user_repository


__all__ = ["UserRepository", "get_user_repository"]
