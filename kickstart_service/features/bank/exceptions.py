"""Bank domain exceptions.

All bank errors are ``AppException`` subclasses, so the global handlers
render them as problem details without bank-specific wiring.
"""

from __future__ import annotations

from typing import Any

from kickstart_service.core.exceptions import AppException


class BankError(AppException):
    """Base class for bank failures."""

    def __init__(
        self,
        detail: str,
        *,
        status_code: int = 500,
        type: str = "bank-error",
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(status_code=status_code, detail=detail, type=type, extra=extra)


class BankUserNotFoundError(BankError):
    """The account holder does not exist."""

    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(
            f"User with id {user_id} not found",
            status_code=404,
            type="user-not-found",
            extra={"user_id": user_id},
        )


class UserServiceError(BankError):
    """The user service failed for a reason other than a missing user.

    Keeps the original error on ``original`` and reuses its status code and
    extension members when it is itself an ``AppException`` (for example a
    validation failure stays a 400 with its ``errors`` list).
    """

    def __init__(self, original: Exception) -> None:
        self.original = original
        if isinstance(original, AppException):
            super().__init__(
                f"User service error: {original.detail}",
                status_code=original.status_code,
                type=original.type,
                extra=original.extra,
            )
        else:
            super().__init__(
                "User service error",
                status_code=500,
                type="user-service-error",
            )


class InsufficientFundsError(BankError):
    """The account balance does not cover the operation."""

    def __init__(self, user_id: int) -> None:
        super().__init__(
            "Insufficient funds",
            status_code=409,
            type="insufficient-funds",
            extra={"user_id": user_id},
        )


class AccountNotFoundError(BankError):
    """No account exists for the user."""

    def __init__(self, user_id: int) -> None:
        super().__init__(
            "Account not found",
            status_code=404,
            type="account-not-found",
            extra={"user_id": user_id},
        )


__all__ = [
    "AccountNotFoundError",
    "BankError",
    "BankUserNotFoundError",
    "InsufficientFundsError",
    "UserServiceError",
]
