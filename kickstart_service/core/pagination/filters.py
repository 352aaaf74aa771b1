"""Keyset filter for SQLAlchemy queries.

The KeysetFilter implements the seek method of pagination:
- Instead of OFFSET, a WHERE condition seeks directly past the cursor
- Cost depends on page size, not on how deep the client has paged
- Records inserted behind the cursor never shift later pages

How it works:
    For ORDER BY created_at ASC, id ASC with cursor at (t1, id1):
    WHERE (created_at > t1) OR (created_at = t1 AND id > id1)

A composite index on ``(created_at, id)`` serves both the ordering and the
seek condition.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import Select, and_, or_

from kickstart_service.core.database.filters import StatementFilter

if TYPE_CHECKING:
    from sqlalchemy.orm import InstrumentedAttribute

    from kickstart_service.core.pagination.cursor import Cursor

DEFAULT_PAGE_SIZE = 200
MAX_PAGE_SIZE = 200


def clamp_limit(
    limit: int | None,
    *,
    default: int = DEFAULT_PAGE_SIZE,
    maximum: int = MAX_PAGE_SIZE,
) -> int:
    """Clamp a requested page size into ``[1, maximum]``.

    ``None`` selects ``default``; zero and negative values become 1.

    Example:
        clamp_limit(None)   # 200
        clamp_limit(0)      # 1
        clamp_limit(10000)  # 200
    """
    if limit is None:
        limit = default
    return max(1, min(limit, maximum))


class KeysetFilter(StatementFilter):
    """Apply keyset pagination to a SQLAlchemy query.

    The filter adds:
    1. ORDER BY created_at ASC, id ASC
    2. WHERE condition to seek past the cursor (if a cursor is given)
    3. LIMIT of one more row than the page size, so the caller can tell
       whether another page exists without a COUNT query

    Example:
        from kickstart_service.core.pagination import KeysetFilter

        stmt = KeysetFilter(
            cursor=page_request.cursor,
            created_at=User.created_at,
            id=User.id,
            limit=50,
        ).apply(select(User))

    Attributes:
        cursor: Decoded cursor (None for the first page)
        limit: Effective page size after clamping
    """

    def __init__(
        self,
        cursor: Cursor | None,
        *,
        created_at: InstrumentedAttribute[Any],
        id: InstrumentedAttribute[Any],  # noqa: A002
        limit: int | None = None,
        max_limit: int = MAX_PAGE_SIZE,
    ) -> None:
        """Initialize keyset filter.

        Args:
            cursor: Decoded cursor (None for first page)
            created_at: Creation timestamp column (primary sort key)
            id: Primary key column (tie-breaker)
            limit: Requested page size; clamped to ``[1, max_limit]``
            max_limit: Upper bound for the page size
        """
        self.cursor = cursor
        self.created_at = created_at
        self.id = id
        self.limit = clamp_limit(limit, default=max_limit, maximum=max_limit)

    def apply(self, statement: Select[Any]) -> Select[Any]:
        """Apply ordering, seek condition and sentinel limit to statement."""
        statement = statement.order_by(self.created_at.asc(), self.id.asc())

        if self.cursor is not None:
            statement = statement.where(
                or_(
                    self.created_at > self.cursor.created_at,
                    and_(
                        self.created_at == self.cursor.created_at,
                        self.id > self.cursor.id,
                    ),
                )
            )

        return statement.limit(self.limit + 1)


__all__ = ["DEFAULT_PAGE_SIZE", "MAX_PAGE_SIZE", "KeysetFilter", "clamp_limit"]
