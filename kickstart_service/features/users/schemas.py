"""User API schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from fastapi import Path
from pydantic import BaseModel, ConfigDict, Field

from kickstart_service.core.database.base import MAX_INTEGER_ID, MIN_INTEGER_ID
from kickstart_service.core.pagination import TokenPage

# Ids outside the primary key column range are rejected as 422 before any query.
UserIdPath = Annotated[
    int,
    Path(ge=MIN_INTEGER_ID, le=MAX_INTEGER_ID, description="User id"),
]


class UserCreate(BaseModel):
    """Payload for creating a user.

    Only types are checked here; business rules live in ``validation`` so
    that violations are reported together as a 400.
    """

    name: str = Field(description="User's full name", examples=["Ada Lovelace"])
    age: int = Field(description="User's age in years", examples=[36])


class UserUpdate(BaseModel):
    """Partial update payload; omitted fields are left unchanged."""

    name: str | None = Field(default=None, description="New name")
    age: int | None = Field(default=None, description="New age")


class UserResponse(BaseModel):
    """User as returned by the API."""

    id: int
    name: str
    age: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


UserPage = TokenPage[UserResponse]

__all__ = ["UserCreate", "UserIdPath", "UserPage", "UserResponse", "UserUpdate"]
