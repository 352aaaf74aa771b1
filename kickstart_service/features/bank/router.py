"""Bank API router."""
from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status

from kickstart_service.core.dependencies.database import SessionDep  # noqa: TC001
from kickstart_service.core.schemas import MessageResponse
from kickstart_service.features.bank.schemas import (
    AccountCreate,
    AccountHolderName,
    AccountHolderUpdate,
    AccountInfo,
)
from kickstart_service.features.bank.service import BankService, get_bank_service
from kickstart_service.features.users.schemas import UserIdPath, UserResponse  # noqa: TC001

router = APIRouter(prefix="/bank/accounts", tags=["bank"])

BankServiceDep = Annotated[BankService, Depends(get_bank_service)]


@router.post(
    "",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create account",
)
async def create_account(
    data: AccountCreate,
    session: SessionDep,
    service: BankServiceDep,
) -> MessageResponse:
    """Open an account for an existing user."""
    message = await service.create_account(session, data.user_id, data.initial_balance)
    return MessageResponse(message=message)


@router.get(
    "/{user_id}",
    response_model=AccountInfo,
    summary="Get account",
)
async def get_account(
    user_id: UserIdPath,
    session: SessionDep,
    service: BankServiceDep,
) -> AccountInfo:
    """Get account details for a user."""
    return await service.get_account_info(session, user_id)


@router.get(
    "/{user_id}/holder",
    response_model=AccountHolderName,
    summary="Get account holder name",
)
async def get_account_holder(
    user_id: UserIdPath,
    session: SessionDep,
    service: BankServiceDep,
) -> AccountHolderName:
    """Get the account holder's name."""
    name = await service.get_account_holder_name(session, user_id)
    return AccountHolderName(name=name)


@router.put(
    "/{user_id}/holder",
    response_model=UserResponse,
    summary="Update account holder",
)
async def update_account_holder(
    user_id: UserIdPath,
    data: AccountHolderUpdate,
    session: SessionDep,
    service: BankServiceDep,
) -> UserResponse:
    """Rename the account holder. The name goes through user validation."""
    user = await service.update_account_holder(session, user_id, data.name)
    await session.commit()

    return UserResponse.model_validate(user)
