"""Pagination token exceptions.

Both errors carry the underlying cause (when there is one) on ``__cause__``
so handlers can log it without exposing it to clients.
"""

from __future__ import annotations


class PaginationTokenError(Exception):
    """Base exception for pagination token failures."""

    def __init__(self, message: str, *, reason: str | None = None) -> None:
        """Initialize token error.

        Args:
            message: Error description
            reason: Short machine-friendly reason (e.g., "bad-alphabet")
        """
        super().__init__(message)
        self.message = message
        self.reason = reason

    def __str__(self) -> str:
        if self.reason:
            return f"{self.message} (reason={self.reason})"
        return self.message


class InvalidTokenError(PaginationTokenError):
    """A client-supplied token could not be decoded into a cursor.

    Covers bad base64 alphabet, bad padding, non-UTF-8 payloads, non-JSON
    payloads, missing fields and wrongly typed fields. Always a client error.
    """


class TokenEncodingError(PaginationTokenError):
    """A cursor could not be serialized into a token.

    Indicates a server-side fault: the record used to build the cursor
    did not carry a usable ``id`` or ``created_at``.
    """


__all__ = ["InvalidTokenError", "PaginationTokenError", "TokenEncodingError"]
