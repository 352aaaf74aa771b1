"""Pagination settings for list endpoints.

Environment variables use PAGINATION_ prefix.
Example: PAGINATION_DEFAULT_LIMIT=50, PAGINATION_MAX_LIMIT=100
"""

from __future__ import annotations

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PaginationSettings(BaseSettings):
    """Pagination configuration settings.

    Attributes:
        default_limit: Page size when the client sends no limit.
        max_limit: Largest page size served; larger requests are clamped.
        max_token_length: Longest pagination token accepted before decoding.

    Example:
        settings = PaginationSettings()
        page_request = PageRequest.from_query(
            next_token, limit,
            default_limit=settings.default_limit,
            max_limit=settings.max_limit,
            max_token_length=settings.max_token_length,
        )
    """

    default_limit: int = Field(
        default=200,
        ge=1,
        le=200,
        description="Default page size when limit not specified",
    )
    max_limit: int = Field(
        default=200,
        ge=1,
        le=200,
        description="Maximum allowed page size (hard limit)",
    )
    max_token_length: int = Field(
        default=512,
        ge=64,
        le=4096,
        description="Pagination tokens longer than this are rejected unread",
    )

    model_config = SettingsConfigDict(
        env_prefix="PAGINATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )

    @model_validator(mode="after")
    def _default_within_max(self) -> PaginationSettings:
        if self.default_limit > self.max_limit:
            msg = "default_limit cannot exceed max_limit"
            raise ValueError(msg)
        return self
