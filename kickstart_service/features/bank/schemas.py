"""Bank API schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from kickstart_service.core.database.base import MAX_INTEGER_ID, MIN_INTEGER_ID


class AccountInfo(BaseModel):
    """Account details combined from the account holder and the (mock) ledger."""

    user_id: int
    user_name: str
    user_age: int
    account_balance: float = Field(description="Current balance")
    account_status: str = Field(description="Account status, e.g. Active")

    model_config = ConfigDict(frozen=True)


class AccountCreate(BaseModel):
    """Payload for opening an account."""

    user_id: int = Field(
        ge=MIN_INTEGER_ID,
        le=MAX_INTEGER_ID,
        description="Account holder's user id",
    )
    initial_balance: float = Field(default=0.0, description="Opening balance")


class AccountHolderUpdate(BaseModel):
    """Payload for renaming an account holder."""

    name: str | None = Field(default=None, description="New holder name")


class AccountHolderName(BaseModel):
    """Account holder's name."""

    name: str


__all__ = ["AccountCreate", "AccountHolderName", "AccountHolderUpdate", "AccountInfo"]
