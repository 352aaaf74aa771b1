"""Business-rule validation for user payloads.

Rules are collected rather than short-circuited, so a client sees every
problem with its payload in one response. An update with no fields is the
one exception: it is rejected on its own.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from kickstart_service.core.schemas import FieldError

if TYPE_CHECKING:
    from kickstart_service.features.users.schemas import UserCreate, UserUpdate

MAX_NAME_LENGTH = 100
MAX_AGE = 150


def validate_name(name: str, field: str = "name") -> list[FieldError]:
    """Check a display name.

    Rules: not blank after trimming, at most 100 characters, no digits.
    """
    errors: list[FieldError] = []

    if not name.strip():
        errors.append(FieldError(field=field, message="Name cannot be empty"))

    if len(name) > MAX_NAME_LENGTH:
        errors.append(
            FieldError(field=field, message=f"Name cannot exceed {MAX_NAME_LENGTH} characters")
        )

    if any(ch.isdigit() for ch in name):
        errors.append(FieldError(field=field, message="Name cannot contain numbers"))

    return errors


def validate_age(age: int, field: str = "age") -> list[FieldError]:
    """Check an age in years. Rules: not negative, not zero, at most 150."""
    errors: list[FieldError] = []

    if age < 0:
        errors.append(FieldError(field=field, message="Age cannot be negative"))

    if age > MAX_AGE:
        errors.append(FieldError(field=field, message=f"Age cannot exceed {MAX_AGE} years"))

    if age == 0:
        errors.append(FieldError(field=field, message="Age must be greater than 0"))

    return errors


def validate_create_user(data: UserCreate) -> list[FieldError]:
    """Validate a creation payload; an empty list means valid."""
    return [*validate_name(data.name), *validate_age(data.age)]


def validate_update_user(data: UserUpdate) -> list[FieldError]:
    """Validate an update payload; an empty list means valid."""
    if data.name is None and data.age is None:
        return [
            FieldError(
                field=None,
                message="At least one field (name or age) must be provided for update",
            )
        ]

    errors: list[FieldError] = []
    if data.name is not None:
        errors.extend(validate_name(data.name))
    if data.age is not None:
        errors.extend(validate_age(data.age))
    return errors


__all__ = [
    "MAX_AGE",
    "MAX_NAME_LENGTH",
    "validate_age",
    "validate_create_user",
    "validate_name",
    "validate_update_user",
]
