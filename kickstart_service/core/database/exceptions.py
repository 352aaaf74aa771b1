"""Database repository exceptions.

Custom exceptions for repository operations that provide better
error messages and typing than raw SQLAlchemy exceptions.
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

from sqlalchemy.exc import SQLAlchemyError

if TYPE_CHECKING:
    from collections.abc import Iterator


class RepositoryError(Exception):
    """Base exception for repository operations.

    Carries a message plus a dict of context that is rendered in ``str()``
    and can be attached to structured log records.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """Initialize repository error.

        Args:
            message: Error description
            details: Additional context about the error
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Format error message with details."""
        if self.details:
            details_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class StoreError(RepositoryError):
    """The record store failed to execute a query.

    Wraps the underlying ``SQLAlchemyError`` (also kept on ``__cause__``).
    Not retried; surfaced to clients as a 500.

    Attributes:
        operation: Repository operation that failed (e.g., "db.paginate_keyset")
        original: The SQLAlchemy exception
    """

    def __init__(self, operation: str, original: BaseException):
        self.operation = operation
        self.original = original
        super().__init__(
            f"Store operation {operation} failed",
            details={"operation": operation, "error": type(original).__name__},
        )


@contextmanager
def handle_store_errors(operation: str) -> Iterator[None]:
    """Translate SQLAlchemy errors raised in the block into ``StoreError``.

    Example:
        with handle_store_errors("db.get"):
            result = await session.execute(stmt)
    """
    try:
        yield
    except SQLAlchemyError as e:
        raise StoreError(operation, e) from e


__all__ = ["RepositoryError", "StoreError", "handle_store_errors"]
