"""Bank service.

Demonstrates one feature consuming another through its service interface:
``BankService`` depends on ``UserService`` only and never on the user
repository or model queries.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from kickstart_service.core.database import StoreError
from kickstart_service.core.services.base import BaseService
from kickstart_service.features.bank.exceptions import BankUserNotFoundError, UserServiceError
from kickstart_service.features.bank.schemas import AccountInfo
from kickstart_service.features.users.exceptions import UserNotFoundError, UserValidationError
from kickstart_service.features.users.schemas import UserUpdate
from kickstart_service.features.users.service import UserService, get_user_service

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from kickstart_service.core.models import User

# Balance and status are not persisted anywhere yet.
MOCK_BALANCE = 1000.0
MOCK_STATUS = "Active"


class BankService(BaseService):
    """Account operations keyed by user id."""

    def __init__(self, user_service: UserService) -> None:
        super().__init__()
        self.user_service = user_service

    async def create_account(
        self, session: AsyncSession, user_id: int, initial_balance: float
    ) -> str:
        """Open an account for an existing user.

        Raises:
            BankUserNotFoundError: If the user does not exist
            UserServiceError: If the user lookup fails
        """
        self.logger.info(
            "Creating account",
            extra={"user_id": user_id, "initial_balance": initial_balance},
        )
        try:
            exists = await self.user_service.user_exists(session, user_id)
        except StoreError as e:
            self.logger.warning("Error checking user existence", extra={"user_id": user_id})
            raise UserServiceError(e) from e

        if not exists:
            self.logger.warning("User not found, cannot create account", extra={"user_id": user_id})
            raise BankUserNotFoundError(user_id)

        return f"Account created for user {user_id} with balance ${initial_balance:.2f}"

    async def get_account_info(self, session: AsyncSession, user_id: int) -> AccountInfo:
        """Combine the holder's details with the account state.

        Raises:
            BankUserNotFoundError: If the user does not exist
        """
        self.logger.info("Getting account info", extra={"user_id": user_id})
        try:
            user = await self.user_service.get_user(session, user_id)
        except UserNotFoundError as e:
            raise BankUserNotFoundError(user_id) from e
        except StoreError as e:
            raise UserServiceError(e) from e

        return AccountInfo(
            user_id=user.id,
            user_name=user.name,
            user_age=user.age,
            account_balance=MOCK_BALANCE,
            account_status=MOCK_STATUS,
        )

    async def update_account_holder(
        self, session: AsyncSession, user_id: int, new_name: str | None
    ) -> User:
        """Rename the account holder through the user service.

        Raises:
            BankUserNotFoundError: If the user does not exist
            UserServiceError: If the new name is rejected or the update fails
        """
        self.logger.info("Updating account holder", extra={"user_id": user_id})
        try:
            user = await self.user_service.update_user(
                session, user_id, UserUpdate(name=new_name)
            )
        except UserNotFoundError as e:
            self.logger.warning("User not found for update", extra={"user_id": user_id})
            raise BankUserNotFoundError(user_id) from e
        except (UserValidationError, StoreError) as e:
            self.logger.warning(
                "Error updating account holder",
                extra={"user_id": user_id, "error": str(e)},
            )
            raise UserServiceError(e) from e

        self.logger.info("Account holder updated", extra={"user_id": user_id})
        return user

    async def get_account_holder_name(self, session: AsyncSession, user_id: int) -> str:
        """Return the account holder's name.

        Raises:
            BankUserNotFoundError: If the user does not exist
        """
        try:
            return await self.user_service.get_user_name(session, user_id)
        except UserNotFoundError as e:
            raise BankUserNotFoundError(user_id) from e
        except StoreError as e:
            raise UserServiceError(e) from e


def get_bank_service() -> BankService:
    """Get bank service dependency."""
    return BankService(get_user_service())


__all__ = ["MOCK_BALANCE", "MOCK_STATUS", "BankService", "get_bank_service"]
