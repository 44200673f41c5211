"""Account related dependency providers."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bank_account_service.modules.accounts.service import BankAccountService
from bank_account_service.modules.customers.service import CustomerService

from .database import get_db_session


def get_bank_account_service(db: AsyncSession = Depends(get_db_session)) -> BankAccountService:
    return BankAccountService.with_session(db)


def get_customer_service(db: AsyncSession = Depends(get_db_session)) -> CustomerService:
    return CustomerService.with_session(db)


__all__ = [
    "get_bank_account_service",
    "get_customer_service",
]
