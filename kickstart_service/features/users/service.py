"""Users service layer.

The service is the public interface of the users feature: other features
(the bank) call it and never touch ``UserRepository`` directly. Every
method takes the caller's session and leaves committing to the caller.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from kickstart_service.core.models import User
from kickstart_service.core.pagination import assemble_keyset_rows
from kickstart_service.core.services.base import BaseService
from kickstart_service.features.users.exceptions import UserNotFoundError, UserValidationError
from kickstart_service.features.users.repository import UserRepository, get_user_repository
from kickstart_service.features.users.validation import (
    validate_create_user,
    validate_update_user,
)

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from kickstart_service.core.pagination import PageRequest, PageResult
    from kickstart_service.features.users.schemas import UserCreate, UserUpdate


class UserService(BaseService):
    """CRUD and keyset listing for users."""

    def __init__(self, repository: UserRepository | None = None) -> None:
        super().__init__()
        self.repository = repository or get_user_repository()

    async def create_user(self, session: AsyncSession, data: UserCreate) -> User:
        """Validate and persist a new user.

        Raises:
            UserValidationError: If the payload breaks a business rule
            StoreError: If the insert fails
        """
        errors = validate_create_user(data)
        if errors:
            self.logger.warning(
                "User creation rejected",
                extra={"error_count": len(errors), "fields": [e.field for e in errors]},
            )
            raise UserValidationError(errors)

        user = await self.repository.create(session, User(name=data.name.strip(), age=data.age))
        self.logger.info("User created", extra={"user_id": user.id})
        return user

    async def get_user(self, session: AsyncSession, user_id: int) -> User:
        """Fetch a user by id.

        Raises:
            UserNotFoundError: If no such user exists
        """
        user = await self.repository.get(session, user_id)
        if user is None:
            self.logger.info("User not found", extra={"user_id": user_id})
            raise UserNotFoundError(user_id)
        return user

    async def update_user(
        self, session: AsyncSession, user_id: int, data: UserUpdate
    ) -> User:
        """Apply a partial update.

        Validation runs before the existence check, so an invalid payload is
        rejected even for an unknown id.

        Raises:
            UserValidationError: If the payload is empty or breaks a rule
            UserNotFoundError: If no such user exists
        """
        errors = validate_update_user(data)
        if errors:
            self.logger.warning(
                "User update rejected",
                extra={"user_id": user_id, "error_count": len(errors)},
            )
            raise UserValidationError(errors)

        user = await self.get_user(session, user_id)
        if data.name is not None:
            user.name = data.name.strip()
        if data.age is not None:
            user.age = data.age

        user = await self.repository.save(session, user)
        self.logger.info("User updated", extra={"user_id": user_id})
        return user

    async def delete_user(self, session: AsyncSession, user_id: int) -> None:
        """Delete a user.

        Raises:
            UserNotFoundError: If no such user exists
        """
        user = await self.get_user(session, user_id)
        await self.repository.delete(session, user)

    async def list_users(
        self,
        session: AsyncSession,
        page_request: PageRequest,
        *,
        max_limit: int | None = None,
    ) -> PageResult[User]:
        """Return one page of users in ``(created_at, id)`` order.

        Raises:
            StoreError: If the query fails
            TokenEncodingError: If the next token cannot be built
        """
        fetched = await self.repository.list_page(session, page_request, max_limit=max_limit)
        page = assemble_keyset_rows(fetched)

        self._lazy.debug(
            lambda: f"list_users: limit={fetched.limit} count={page.count} has_more={page.has_more}"
        )
        return page

    async def user_exists(self, session: AsyncSession, user_id: int) -> bool:
        """Check whether a user exists."""
        return await self.repository.exists(session, user_id)

    async def get_user_name(self, session: AsyncSession, user_id: int) -> str:
        """Return a user's name.

        Raises:
            UserNotFoundError: If no such user exists
        """
        user = await self.get_user(session, user_id)
        return user.name


def get_user_service() -> UserService:
    """Get user service dependency."""
    return UserService()


__all__ = ["UserService", "get_user_service"]
