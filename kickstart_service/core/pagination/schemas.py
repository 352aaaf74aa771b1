"""Response schemas for token-paginated endpoints."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

from kickstart_service.core.pagination.page import PageResult

T = TypeVar("T")


class TokenPage(BaseModel, Generic[T]):
    """REST-style page with an opaque continuation token.

    Usage:
        @router.get("/users", response_model=TokenPage[UserResponse])
        async def list_users(...):
            result = await service.list_users(session, page_request)
            return TokenPage.from_result(result, UserResponse.model_validate)

    Attributes:
        records: Records on this page
        next_token: Token for the next page (None on the last page)
        has_more: Whether more records exist after this page
        count: Number of records on this page
    """

    records: list[T] = Field(
        default_factory=list,
        description="Records on this page, ordered by creation time then id",
    )
    next_token: str | None = Field(
        default=None,
        description="Pass as next_token to fetch the following page",
    )
    has_more: bool = Field(
        default=False,
        description="Whether more records exist after this page",
    )
    count: int = Field(
        default=0,
        ge=0,
        description="Number of records on this page",
    )

    @classmethod
    def from_result(
        cls,
        result: PageResult[Any],
        transform: Callable[[Any], T],
    ) -> TokenPage[T]:
        """Build a response from an assembled page."""
        return cls(
            records=[transform(record) for record in result.records],
            next_token=result.next_token,
            has_more=result.has_more,
            count=result.count,
        )


__all__ = ["TokenPage"]
