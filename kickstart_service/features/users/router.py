"""Users API router."""
from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from kickstart_service.core.dependencies.database import SessionDep  # noqa: TC001
from kickstart_service.core.pagination import PageRequest
from kickstart_service.core.schemas import MessageResponse
from kickstart_service.core.settings import get_pagination_settings
from kickstart_service.features.users.schemas import (
    UserCreate,
    UserIdPath,
    UserPage,
    UserResponse,
    UserUpdate,
)
from kickstart_service.features.users.service import UserService, get_user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])

UserServiceDep = Annotated[UserService, Depends(get_user_service)]


@router.get(
    "",
    response_model=UserPage,
    summary="List users",
)
async def list_users(
    session: SessionDep,
    service: UserServiceDep,
    next_token: str | None = Query(
        None,
        description="Opaque token from a previous page's next_token",
    ),
    limit: int | None = Query(
        None,
        description="Page size; values outside 1-200 are clamped, default 200",
    ),
) -> UserPage:
    """List users oldest first, one keyset page at a time.

    Pass the ``next_token`` from a response to get the following page. A
    malformed token is rejected with 400; an out-of-range ``limit`` is
    clamped rather than rejected.

    Example:
        ```bash
        curl "http://localhost:3000/api/v1/users?limit=2"
        curl "http://localhost:3000/api/v1/users?limit=2&next_token=eyJpZCI6Miwi..."
        ```
    """
    settings = get_pagination_settings()
    page_request = PageRequest.from_query(
        next_token,
        limit,
        default_limit=settings.default_limit,
        max_limit=settings.max_limit,
        max_token_length=settings.max_token_length,
    )

    result = await service.list_users(session, page_request, max_limit=settings.max_limit)

    return UserPage.from_result(result, UserResponse.model_validate)


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
)
async def create_user(
    data: UserCreate,
    session: SessionDep,
    service: UserServiceDep,
) -> UserResponse:
    """Create a user. Every rule violation is reported in one 400 response."""
    user = await service.create_user(session, data)
    await session.commit()

    return UserResponse.model_validate(user)


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get user",
)
async def get_user(
    user_id: UserIdPath,
    session: SessionDep,
    service: UserServiceDep,
) -> UserResponse:
    """Get a user by id."""
    user = await service.get_user(session, user_id)
    return UserResponse.model_validate(user)


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    summary="Update user",
)
async def update_user(
    user_id: UserIdPath,
    data: UserUpdate,
    session: SessionDep,
    service: UserServiceDep,
) -> UserResponse:
    """Partially update a user; omitted fields keep their values."""
    user = await service.update_user(session, user_id, data)
    await session.commit()

    return UserResponse.model_validate(user)


@router.delete(
    "/{user_id}",
    response_model=MessageResponse,
    summary="Delete user",
)
async def delete_user(
    user_id: UserIdPath,
    session: SessionDep,
    service: UserServiceDep,
) -> MessageResponse:
    """Delete a user by id."""
    await service.delete_user(session, user_id)
    await session.commit()

    logger.info("User deleted via API", extra={"user_id": user_id})
    return MessageResponse(message=f"User with id {user_id} deleted successfully")
