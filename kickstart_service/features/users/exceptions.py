"""User domain exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kickstart_service.core.exceptions import BadRequestException, NotFoundException

if TYPE_CHECKING:
    from collections.abc import Sequence

    from kickstart_service.core.schemas import FieldError


class UserNotFoundError(NotFoundException):
    """No user exists with the requested id."""

    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(
            detail=f"User with id {user_id} not found",
            type="user-not-found",
            extra={"user_id": user_id},
        )


class UserValidationError(BadRequestException):
    """A user payload broke one or more business rules.

    The problem details body carries every violation under ``errors``.
    """

    def __init__(self, errors: Sequence[FieldError]) -> None:
        self.errors = list(errors)
        super().__init__(
            detail=f"User validation failed with {len(self.errors)} error(s)",
            type="validation-error",
            extra={"errors": [error.model_dump() for error in self.errors]},
        )


__all__ = ["UserNotFoundError", "UserValidationError"]
