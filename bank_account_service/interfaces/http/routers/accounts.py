"""REST endpoints for bank accounts."""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from bank_account_service.interfaces.http.deps import get_bank_account_service, get_db_session
from bank_account_service.modules.accounts import (
    BankAccountNotFoundError,
    BankAccountValidationError,
)
from bank_account_service.modules.accounts.service import BankAccountService
from bank_account_service.schemas import (
    BankAccountRequestDTO,
    BankAccountResponseDTO,
    BankAccountUpdateDTO,
    ErrorResponse,
)

router = APIRouter()

NOT_FOUND = {404: {"model": ErrorResponse}}


def not_found(exc: BankAccountNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


def invalid(exc: BankAccountValidationError) -> HTTPException:
    return HTTPException(status_code=422, detail=str(exc))


@router.get("", response_model=List[BankAccountResponseDTO])
async def list_bank_accounts(service: BankAccountService = Depends(get_bank_account_service)):
    return await service.list_accounts()


@router.get("/{account_id}", response_model=BankAccountResponseDTO, responses=NOT_FOUND)
async def get_bank_account(
    account_id: str,
    service: BankAccountService = Depends(get_bank_account_service),
):
    try:
        return await service.get_account(account_id)
    except BankAccountNotFoundError as exc:
        raise not_found(exc) from exc


@router.post("", response_model=BankAccountResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_bank_account(
    payload: BankAccountRequestDTO,
    service: BankAccountService = Depends(get_bank_account_service),
    db: AsyncSession = Depends(get_db_session),
):
    try:
        account = await service.add_account(payload.to_domain())
    except BankAccountValidationError as exc:
        raise invalid(exc) from exc
    await db.commit()
    return account


@router.put("/{account_id}", response_model=BankAccountResponseDTO, responses=NOT_FOUND)
async def update_bank_account(
    account_id: str,
    payload: BankAccountUpdateDTO,
    service: BankAccountService = Depends(get_bank_account_service),
    db: AsyncSession = Depends(get_db_session),
):
    try:
        account = await service.update_account(account_id, payload.to_domain())
    except BankAccountNotFoundError as exc:
        raise not_found(exc) from exc
    except BankAccountValidationError as exc:
        raise invalid(exc) from exc
    await db.commit()
    return account


@router.delete("/{account_id}", status_code=status.HTTP_204_NO_CONTENT, responses=NOT_FOUND)
async def delete_bank_account(
    account_id: str,
    service: BankAccountService = Depends(get_bank_account_service),
    db: AsyncSession = Depends(get_db_session),
):
    try:
        await service.delete_account(account_id)
    except BankAccountNotFoundError as exc:
        raise not_found(exc) from exc
    await db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
