"""Page request and page assembly.

``PageRequest`` captures what the client asked for after the token has been
decoded and the limit clamped. ``assemble_page`` turns the rows fetched by
the keyset query (up to ``limit + 1`` of them) into a ``PageResult``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from kickstart_service.core.pagination.cursor import (
    MAX_TOKEN_LENGTH,
    Cursor,
    CursorCodec,
    make_cursor,
)
from kickstart_service.core.pagination.filters import MAX_PAGE_SIZE, clamp_limit

if TYPE_CHECKING:
    from collections.abc import Sequence


@dataclass(slots=True, frozen=True)
class PageRequest:
    """Decoded pagination parameters.

    Attributes:
        cursor: Position to resume after (None for the first page)
        limit: Page size, always within ``[1, MAX_PAGE_SIZE]``
    """

    cursor: Cursor | None = None
    limit: int = MAX_PAGE_SIZE

    @classmethod
    def from_query(
        cls,
        next_token: str | None,
        limit: int | None,
        *,
        default_limit: int = MAX_PAGE_SIZE,
        max_limit: int = MAX_PAGE_SIZE,
        max_token_length: int = MAX_TOKEN_LENGTH,
    ) -> PageRequest:
        """Build a request from raw query parameters.

        Raises:
            InvalidTokenError: If ``next_token`` cannot be decoded
        """
        cursor = (
            CursorCodec.decode(next_token, max_length=max_token_length)
            if next_token is not None
            else None
        )
        return cls(
            cursor=cursor,
            limit=clamp_limit(limit, default=default_limit, maximum=max_limit),
        )


@dataclass(frozen=True)
class KeysetRows[T]:
    """Raw output of a keyset query.

    Attributes:
        rows: Up to ``limit + 1`` rows in canonical order
        limit: Effective page size the query was planned with
    """

    rows: Sequence[T]
    limit: int


@dataclass(frozen=True)
class PageResult[T]:
    """One page of records plus the token for the next one.

    Attributes:
        records: At most ``limit`` records in canonical order
        next_cursor: Position of the last record, present iff ``has_more``
        next_token: Encoded ``next_cursor``
        has_more: Whether records exist after this page
    """

    records: Sequence[T]
    next_cursor: Cursor | None
    next_token: str | None
    has_more: bool

    @property
    def count(self) -> int:
        """Number of records on this page."""
        return len(self.records)


def assemble_page[T](rows: Sequence[T], limit: int) -> PageResult[T]:
    """Turn over-fetched rows into a page.

    If more than ``limit`` rows came back, the trailing sentinel row is
    dropped and the page points at the last record kept.

    Args:
        rows: Rows from the keyset query, in canonical order
        limit: Effective page size

    Returns:
        Assembled page

    Raises:
        TokenEncodingError: If the last record cannot be encoded as a cursor
    """
    has_more = len(rows) > limit
    records = list(rows[:limit]) if has_more else list(rows)

    next_cursor: Cursor | None = None
    next_token: str | None = None
    if has_more and records:
        last: Any = records[-1]
        next_cursor = make_cursor(
            getattr(last, "id", None), getattr(last, "created_at", None)
        )
        next_token = CursorCodec.encode_cursor(next_cursor)

    return PageResult(
        records=records,
        next_cursor=next_cursor,
        next_token=next_token,
        has_more=has_more,
    )


def assemble_keyset_rows[T](fetched: KeysetRows[T]) -> PageResult[T]:
    """Assemble a page from a ``KeysetRows`` result."""
    return assemble_page(fetched.rows, fetched.limit)


__all__ = [
    "KeysetRows",
    "PageRequest",
    "PageResult",
    "assemble_keyset_rows",
    "assemble_page",
]
