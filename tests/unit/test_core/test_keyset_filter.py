"""Unit tests for limit clamping and the keyset query filter."""
from __future__ import annotations

from datetime import UTC, datetime

import pytest
from sqlalchemy import select
from sqlalchemy.dialects import postgresql

from kickstart_service.core.models import User
from kickstart_service.core.pagination import (
    MAX_PAGE_SIZE,
    Cursor,
    KeysetFilter,
    PageRequest,
    clamp_limit,
)


def _sql(stmt) -> str:
    return str(stmt.compile(dialect=postgresql.dialect()))


@pytest.mark.unit
class TestClampLimit:
    """Tests for clamp_limit."""

    @pytest.mark.parametrize(
        ("requested", "expected"),
        [
            (None, 200),
            (0, 1),
            (-5, 1),
            (1, 1),
            (50, 50),
            (200, 200),
            (201, 200),
            (10000, 200),
        ],
    )
    def test_clamps_into_range(self, requested, expected):
        """Out-of-range limits are clamped, never rejected."""
        assert clamp_limit(requested) == expected

    def test_custom_bounds(self):
        """Default and maximum are configurable."""
        assert clamp_limit(None, default=20, maximum=50) == 20
        assert clamp_limit(80, default=20, maximum=50) == 50

    def test_max_page_size(self):
        """The hard ceiling is 200."""
        assert MAX_PAGE_SIZE == 200


@pytest.mark.unit
class TestKeysetFilter:
    """Tests for the SQL produced by KeysetFilter."""

    def test_first_page_orders_and_overfetches(self):
        """Without a cursor: canonical order, no seek, limit + 1."""
        keyset = KeysetFilter(None, created_at=User.created_at, id=User.id, limit=10)

        stmt = keyset.apply(select(User))
        sql = _sql(stmt)

        assert "ORDER BY users.created_at ASC, users.id ASC" in sql
        assert "WHERE" not in sql
        assert "LIMIT" in sql
        assert stmt._limit == 11
        assert keyset.limit == 10

    def test_cursor_adds_seek_condition(self):
        """With a cursor: created_at > t OR (created_at = t AND id > id)."""
        cursor = Cursor(id=7, created_at=datetime(2025, 1, 1, tzinfo=UTC))
        keyset = KeysetFilter(cursor, created_at=User.created_at, id=User.id, limit=5)

        sql = _sql(keyset.apply(select(User)))

        assert "WHERE users.created_at > " in sql
        assert "users.created_at = " in sql
        assert "users.id > " in sql
        assert " OR " in sql

    def test_limit_is_clamped(self):
        """The effective limit is clamped before the query is built."""
        low = KeysetFilter(None, created_at=User.created_at, id=User.id, limit=0)
        high = KeysetFilter(None, created_at=User.created_at, id=User.id, limit=10000)
        default = KeysetFilter(None, created_at=User.created_at, id=User.id)

        assert low.limit == 1
        assert high.limit == 200
        assert default.limit == 200
        assert high.apply(select(User))._limit == 201

    def test_max_limit_override(self):
        """A lower max_limit caps the page size and becomes the default."""
        keyset = KeysetFilter(None, created_at=User.created_at, id=User.id, max_limit=25)

        assert keyset.limit == 25


@pytest.mark.unit
class TestPageRequest:
    """Tests for PageRequest.from_query."""

    def test_no_token_means_first_page(self):
        """Absent token: no cursor, default limit."""
        request = PageRequest.from_query(None, None)

        assert request.cursor is None
        assert request.limit == 200

    def test_token_is_decoded(self):
        """A valid token becomes the request cursor."""
        from kickstart_service.core.pagination import CursorCodec

        ts = datetime(2025, 1, 1, tzinfo=UTC)
        request = PageRequest.from_query(CursorCodec.encode(4, ts), 10)

        assert request.cursor == Cursor(id=4, created_at=ts)
        assert request.limit == 10

    def test_empty_token_is_invalid(self):
        """An explicitly empty token is rejected, not treated as absent."""
        from kickstart_service.core.pagination import InvalidTokenError

        with pytest.raises(InvalidTokenError):
            PageRequest.from_query("", None)

    def test_limit_clamped_with_settings(self):
        """Configured default and maximum apply."""
        request = PageRequest.from_query(None, 500, default_limit=50, max_limit=100)

        assert request.limit == 100
