"""Unit tests for BankService with a mocked user service."""
from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from kickstart_service.core.database import StoreError
from kickstart_service.core.schemas import FieldError
from kickstart_service.features.bank.exceptions import (
    AccountNotFoundError,
    BankError,
    BankUserNotFoundError,
    InsufficientFundsError,
    UserServiceError,
)
from kickstart_service.features.bank.service import BankService
from kickstart_service.features.users.exceptions import UserNotFoundError, UserValidationError
from kickstart_service.features.users.service import UserService


@pytest.fixture
def user_service() -> AsyncMock:
    return AsyncMock(spec=UserService)


@pytest.fixture
def bank(user_service) -> BankService:
    return BankService(user_service)


@pytest.fixture
def session() -> MagicMock:
    return MagicMock()


def _store_error() -> StoreError:
    return StoreError("db.get", OperationalError("SELECT", {}, Exception("down")))


@pytest.mark.unit
class TestCreateAccount:
    """Tests for BankService.create_account."""

    @pytest.mark.asyncio
    async def test_existing_user(self, bank, user_service, session):
        user_service.user_exists.return_value = True

        message = await bank.create_account(session, 7, 250.5)

        assert message == "Account created for user 7 with balance $250.50"
        user_service.user_exists.assert_awaited_once_with(session, 7)

    @pytest.mark.asyncio
    async def test_unknown_user(self, bank, user_service, session):
        user_service.user_exists.return_value = False

        with pytest.raises(BankUserNotFoundError) as exc_info:
            await bank.create_account(session, 7, 0)

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_store_failure(self, bank, user_service, session):
        user_service.user_exists.side_effect = _store_error()

        with pytest.raises(UserServiceError) as exc_info:
            await bank.create_account(session, 7, 0)

        assert exc_info.value.status_code == 500
        assert isinstance(exc_info.value.original, StoreError)


@pytest.mark.unit
class TestAccountInfo:
    """Tests for BankService.get_account_info."""

    @pytest.mark.asyncio
    async def test_combines_user_and_mock_ledger(self, bank, user_service, session):
        user_service.get_user.return_value = SimpleNamespace(id=3, name="Ada", age=36)

        info = await bank.get_account_info(session, 3)

        assert info.user_id == 3
        assert info.user_name == "Ada"
        assert info.user_age == 36
        assert info.account_balance == 1000.0
        assert info.account_status == "Active"

    @pytest.mark.asyncio
    async def test_unknown_user(self, bank, user_service, session):
        user_service.get_user.side_effect = UserNotFoundError(3)

        with pytest.raises(BankUserNotFoundError):
            await bank.get_account_info(session, 3)


@pytest.mark.unit
class TestAccountHolder:
    """Tests for holder name lookups and updates."""

    @pytest.mark.asyncio
    async def test_get_name(self, bank, user_service, session):
        user_service.get_user_name.return_value = "Grace"

        assert await bank.get_account_holder_name(session, 1) == "Grace"

    @pytest.mark.asyncio
    async def test_get_name_unknown(self, bank, user_service, session):
        user_service.get_user_name.side_effect = UserNotFoundError(1)

        with pytest.raises(BankUserNotFoundError):
            await bank.get_account_holder_name(session, 1)

    @pytest.mark.asyncio
    async def test_update_delegates_name_only(self, bank, user_service, session):
        user = SimpleNamespace(id=1, name="Grace", age=40)
        user_service.update_user.return_value = user

        result = await bank.update_account_holder(session, 1, "Grace")

        assert result is user
        _, user_id, update = user_service.update_user.await_args.args
        assert user_id == 1
        assert update.name == "Grace"
        assert update.age is None

    @pytest.mark.asyncio
    async def test_update_validation_error_keeps_400(self, bank, user_service, session):
        """Validation failures surface with their status and field errors."""
        user_service.update_user.side_effect = UserValidationError(
            [FieldError(field="name", message="Name cannot contain numbers")]
        )

        with pytest.raises(UserServiceError) as exc_info:
            await bank.update_account_holder(session, 1, "R2D2")

        assert exc_info.value.status_code == 400
        assert exc_info.value.extra["errors"] == [
            {"field": "name", "message": "Name cannot contain numbers"}
        ]

    @pytest.mark.asyncio
    async def test_update_unknown(self, bank, user_service, session):
        user_service.update_user.side_effect = UserNotFoundError(1)

        with pytest.raises(BankUserNotFoundError):
            await bank.update_account_holder(session, 1, "Grace")


@pytest.mark.unit
class TestBankErrors:
    """The bank error hierarchy."""

    @pytest.mark.parametrize(
        ("exc", "status_code"),
        [
            (BankUserNotFoundError(1), 404),
            (AccountNotFoundError(1), 404),
            (InsufficientFundsError(1), 409),
            (UserServiceError(RuntimeError("x")), 500),
        ],
    )
    def test_all_are_bank_errors(self, exc, status_code):
        assert isinstance(exc, BankError)
        assert exc.status_code == status_code
