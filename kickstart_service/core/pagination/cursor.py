"""Cursor encoding and decoding for keyset pagination.

A cursor marks the last record a client has seen under the canonical
ordering ``(created_at ASC, id ASC)``. It travels to clients as an opaque
pagination token:

1. JSON object with the record's id and creation timestamp
2. Base64 URL-safe encoded, padding stripped, for use in query strings

Example cursor payload:
    {"id":42,"timestamp":"2025-01-15T10:30:00Z"}

Encoded: eyJpZCI6NDIsInRpbWVzdGFtcCI6IjIwMjUtMDEtMTVUMTA6MzA6MDBaIn0

Tokens are not signed. A client can forge a token for any position, which
only lets it read a page it could also reach by paging forward.
"""

from __future__ import annotations

import base64
import binascii
import re
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_core import PydanticSerializationError

from kickstart_service.core.database.base import MAX_INTEGER_ID, MIN_INTEGER_ID
from kickstart_service.core.pagination.exceptions import (
    InvalidTokenError,
    TokenEncodingError,
)

MAX_TOKEN_LENGTH = 512

# Unpadded base64url. The stdlib decoder silently discards characters outside
# the alphabet, so the alphabet is checked before decoding.
_TOKEN_PATTERN = re.compile(r"[A-Za-z0-9_-]+")


class Cursor(BaseModel):
    """Position of the last record returned on a page.

    ``id`` is bounded to the INTEGER primary key range, so a token naming an
    id the store cannot hold is rejected as invalid rather than reaching the
    query. ``timestamp`` may be naive: SQLite hands back naive datetimes and
    they must survive the round trip; PostgreSQL returns offset-aware ones.

    Attributes:
        id: Primary key of the last record
        created_at: Creation timestamp of the last record (``timestamp`` on the wire)
    """

    id: int = Field(
        ge=MIN_INTEGER_ID,
        le=MAX_INTEGER_ID,
        description="Primary key of the last record seen",
    )
    created_at: datetime = Field(
        alias="timestamp",
        description="Creation timestamp of the last record seen",
    )

    model_config = ConfigDict(frozen=True, strict=True, populate_by_name=True)


def make_cursor(id: Any, created_at: Any) -> Cursor:  # noqa: A002
    """Build a cursor from raw values.

    Raises:
        TokenEncodingError: If ``id`` is not an int in the primary key range or
            ``created_at`` is not a datetime
    """
    try:
        return Cursor(id=id, created_at=created_at)
    except ValidationError as e:
        raise TokenEncodingError(
            f"Cannot build cursor from id={id!r}, created_at={created_at!r}",
            reason="invalid-values",
        ) from e


class CursorCodec:
    """Encode and decode pagination tokens.

    Every method is a pure function of its arguments. ``decode`` raises
    ``InvalidTokenError`` for any string it cannot read and nothing else,
    and ``decode(encode(id, ts))`` always yields a cursor equal to ``(id, ts)``.

    Usage:
        # Encoding
        token = CursorCodec.encode(user.id, user.created_at)

        # Decoding
        cursor = CursorCodec.decode(token)
        print(cursor.id, cursor.created_at)
    """

    @staticmethod
    def encode(id: Any, created_at: Any) -> str:  # noqa: A002
        """Encode a record position to an opaque token.

        Args:
            id: Record primary key
            created_at: Record creation timestamp

        Returns:
            URL-safe base64 string without padding

        Raises:
            TokenEncodingError: If the values cannot be serialized
        """
        return CursorCodec.encode_cursor(make_cursor(id, created_at))

    @staticmethod
    def encode_cursor(cursor: Cursor) -> str:
        """Encode an existing cursor to an opaque token."""
        try:
            payload = cursor.model_dump_json(by_alias=True)
        except PydanticSerializationError as e:
            raise TokenEncodingError(
                "Cannot serialize cursor", reason="serialization-failed"
            ) from e
        return base64.urlsafe_b64encode(payload.encode()).rstrip(b"=").decode("ascii")

    @staticmethod
    def decode(token: str, *, max_length: int = MAX_TOKEN_LENGTH) -> Cursor:
        """Decode an opaque token to a cursor.

        Args:
            token: Token previously produced by ``encode``
            max_length: Longest token accepted; longer input is rejected unread

        Returns:
            Decoded cursor

        Raises:
            InvalidTokenError: If the token is malformed in any way
        """
        if not isinstance(token, str) or not token:
            raise InvalidTokenError("Pagination token is empty", reason="empty")
        if len(token) > max_length:
            raise InvalidTokenError(
                f"Pagination token exceeds {max_length} characters", reason="too-long"
            )
        if _TOKEN_PATTERN.fullmatch(token) is None:
            raise InvalidTokenError(
                "Pagination token contains characters outside the base64url alphabet",
                reason="bad-alphabet",
            )

        padded = token + "=" * (-len(token) % 4)
        try:
            raw = base64.urlsafe_b64decode(padded)
        except (binascii.Error, ValueError) as e:
            raise InvalidTokenError(
                "Pagination token is not valid base64", reason="bad-base64"
            ) from e

        try:
            return Cursor.model_validate_json(raw)
        except ValidationError as e:
            raise InvalidTokenError(
                "Pagination token payload is not a valid cursor", reason="bad-payload"
            ) from e

    @staticmethod
    def is_valid(token: str) -> bool:
        """Return True if ``token`` decodes to a cursor."""
        try:
            CursorCodec.decode(token)
        except InvalidTokenError:
            return False
        return True

    @staticmethod
    def from_record(record: Any) -> str:
        """Create a token pointing at a record.

        Args:
            record: Object with ``id`` and ``created_at`` attributes
                (SQLAlchemy model instance or row)

        Example:
            token = CursorCodec.from_record(user)
        """
        return CursorCodec.encode(
            getattr(record, "id", None),
            getattr(record, "created_at", None),
        )


__all__ = ["MAX_TOKEN_LENGTH", "Cursor", "CursorCodec", "make_cursor"]
