"""Minimal generic repository for SQLAlchemy models.

Provides basic CRUD plus keyset pagination with explicit session passing.
For complex queries, use the session directly - this is a convenience, not a cage.

Every query runs inside ``handle_store_errors`` so callers only ever see
``StoreError`` rather than raw SQLAlchemy exceptions.

Example:
    from kickstart_service.core.database import BaseRepository
    from kickstart_service.core.models import User

    class UserRepository(BaseRepository[User]):
        '''User-specific queries beyond basic CRUD.'''

    user_repo = UserRepository(User)
    user = await user_repo.get(session, user_id)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, cast

from sqlalchemy import exists, select

from kickstart_service.core.database.exceptions import handle_store_errors
from kickstart_service.infra.logging import get_lazy_logger

if TYPE_CHECKING:
    from sqlalchemy import Select
    from sqlalchemy.ext.asyncio import AsyncSession
    from sqlalchemy.orm import InstrumentedAttribute

    from kickstart_service.core.pagination.page import KeysetRows, PageRequest


class BaseRepository[T]:
    """Minimal generic repository for CRUD operations.

    Provides:
        - get(session, id) -> T | None
        - exists(session, id) -> bool
        - create(session, instance) -> T
        - save(session, instance) -> T
        - delete(session, instance) -> None
        - paginate_keyset(session, statement, page_request) -> KeysetRows[T]

    The model must expose ``id`` and ``created_at`` columns for keyset pagination.
    """

    __slots__ = ("model", "_logger", "_lazy")

    def __init__(self, model: type[T]) -> None:
        """Initialize repository with model class.

        Args:
            model: SQLAlchemy model class (e.g., User)
        """
        self.model = model
        # Standard logger for INFO/WARNING/ERROR
        self._logger = logging.getLogger(f"repository.{model.__name__}")
        # Lazy logger for DEBUG (zero overhead when DEBUG disabled)
        self._lazy = get_lazy_logger(f"repository.{model.__name__}")

    async def get(self, session: AsyncSession, id: Any) -> T | None:  # noqa: A002
        """Get entity by primary key.

        Returns:
            Entity if found, None otherwise
        """
        with handle_store_errors("db.get"):
            instance = await session.get(self.model, id)

        self._lazy.debug(
            lambda: f"db.get: {self.model.__name__}({id}) -> {'found' if instance else 'not found'}"
        )
        return instance

    async def exists(self, session: AsyncSession, id: Any) -> bool:  # noqa: A002
        """Check whether an entity with this primary key exists."""
        stmt = select(exists().where(self._pk_attr() == id))
        with handle_store_errors("db.exists"):
            found = bool((await session.execute(stmt)).scalar())

        self._lazy.debug(lambda: f"db.exists: {self.model.__name__}({id}) -> {found}")
        return found

    async def create(self, session: AsyncSession, instance: T) -> T:
        """Persist a new entity.

        Adds to session, flushes to get generated values (id, created_at),
        and refreshes to ensure instance is up-to-date.
        """
        with handle_store_errors("db.create"):
            session.add(instance)
            await session.flush()
            await session.refresh(instance)

        entity_id = getattr(instance, "id", None)
        self._lazy.debug(lambda: f"db.create: {self.model.__name__}(id={entity_id})")
        return instance

    async def save(self, session: AsyncSession, instance: T) -> T:
        """Flush pending attribute changes on a loaded entity."""
        with handle_store_errors("db.save"):
            await session.flush()
            await session.refresh(instance)

        entity_id = getattr(instance, "id", None)
        self._lazy.debug(lambda: f"db.save: {self.model.__name__}(id={entity_id})")
        return instance

    async def delete(self, session: AsyncSession, instance: T) -> None:
        """Delete an entity."""
        entity_id = getattr(instance, "id", None)
        with handle_store_errors("db.delete"):
            await session.delete(instance)
            await session.flush()

        self._logger.info(
            "Entity deleted",
            extra={"entity": self.model.__name__, "id": str(entity_id), "operation": "db.delete"},
        )

    async def paginate_keyset(
        self,
        session: AsyncSession,
        statement: Select[tuple[T]],
        page_request: PageRequest,
        *,
        max_limit: int | None = None,
    ) -> KeysetRows[T]:
        """Execute a keyset-paginated query.

        Orders by ``(created_at, id)``, seeks past ``page_request.cursor`` and
        fetches one row more than the page size. Feed the result to
        ``assemble_page`` to build the response.

        Args:
            session: Database session
            statement: SQLAlchemy select statement (without ordering or limit)
            page_request: Decoded cursor and requested page size
            max_limit: Upper bound for the page size (defaults to MAX_PAGE_SIZE)

        Returns:
            KeysetRows with up to ``limit + 1`` rows and the effective limit

        Raises:
            StoreError: If the query fails
        """
        from kickstart_service.core.pagination import MAX_PAGE_SIZE, KeysetFilter, KeysetRows

        keyset = KeysetFilter(
            page_request.cursor,
            created_at=cast("InstrumentedAttribute[Any]", self.model.created_at),  # type: ignore[attr-defined]
            id=self._pk_attr(),
            limit=page_request.limit,
            max_limit=max_limit or MAX_PAGE_SIZE,
        )
        paginated_stmt = keyset.apply(statement)

        with handle_store_errors("db.paginate_keyset"):
            result = await session.execute(paginated_stmt)
            rows = list(result.scalars().all())

        self._lazy.debug(
            lambda: f"db.paginate_keyset: {self.model.__name__}(limit={keyset.limit}, "
            f"after={page_request.cursor.id if page_request.cursor else None}) -> {len(rows)} rows"
        )
        return KeysetRows(rows=rows, limit=keyset.limit)

    def _pk_attr(self) -> InstrumentedAttribute[Any]:
        """Primary key attribute (models here always use ``id``)."""
        return cast("InstrumentedAttribute[Any]", self.model.id)  # type: ignore[attr-defined]


__all__ = ["BaseRepository"]
