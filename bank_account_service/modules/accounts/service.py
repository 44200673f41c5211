"""Domain services for bank account management."""

from __future__ import annotations

import logging
import math
from dataclasses import replace
from typing import Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from bank_account_service.infrastructure.database.repositories.bank_account_repository import (
    SqlBankAccountRepository,
)
from bank_account_service.infrastructure.database.repositories.customer_repository import (
    SqlCustomerRepository,
)
from bank_account_service.modules.customers.exceptions import CustomerNotFoundError
from bank_account_service.modules.customers.models import Customer
from bank_account_service.modules.customers.repository import CustomerRepository

from .exceptions import BankAccountNotFoundError, BankAccountValidationError
from .mapper import AccountMapper
from .models import (
    CURRENCY_MAX_LENGTH,
    AccountProjection,
    AccountType,
    BankAccount,
    BankAccountRequest,
    BankAccountResponse,
    BankAccountUpdate,
)
from .repository import BankAccountRepository

logger = logging.getLogger(__name__)


class BankAccountService:
    """Encapsulates every bank account use case exposed by the front ends."""

    def __init__(
        self,
        repository: BankAccountRepository,
        customers: CustomerRepository,
        mapper: AccountMapper | None = None,
    ) -> None:
        self._repository = repository
        self._customers = customers
        self._mapper = mapper or AccountMapper()

    @classmethod
    def with_session(cls, session: AsyncSession, mapper: AccountMapper | None = None) -> "BankAccountService":
        return cls(SqlBankAccountRepository(session), SqlCustomerRepository(session), mapper)

    async def list_accounts(self) -> list[BankAccountResponse]:
        accounts = await self._repository.find_all()
        return [self._mapper.from_bank_account(account) for account in accounts]

    async def get_account(self, account_id: str) -> BankAccountResponse:
        account = await self._get(account_id)
        return self._mapper.from_bank_account(account)

    async def find_by_type(self, account_type: AccountType) -> list[BankAccountResponse]:
        accounts = await self._repository.find_by_type(account_type)
        return [self._mapper.from_bank_account(account) for account in accounts]

    async def list_customer_accounts(self, customer_id: int) -> list[BankAccountResponse]:
        accounts = await self._repository.find_by_customer(customer_id)
        return [self._mapper.from_bank_account(account) for account in accounts]

    async def get_projection(self, account_id: str) -> AccountProjection:
        account = await self._get(account_id)
        return self._mapper.to_projection(account)

    async def list_projections(
        self,
        account_type: AccountType | None = None,
        *,
        customer_id: int | None = None,
    ) -> list[AccountProjection]:
        accounts: Sequence[BankAccount]
        if customer_id is not None:
            accounts = await self._repository.find_by_customer(customer_id)
        elif account_type is not None:
            accounts = await self._repository.find_by_type(account_type)
        else:
            accounts = await self._repository.find_all()
        return [self._mapper.to_projection(account) for account in accounts]

    async def add_account(self, request: BankAccountRequest) -> BankAccountResponse:
        self._validate(request.balance, request.currency)
        customer = await self._resolve_customer(request.customer_id)

        account = self._mapper.from_request(request, customer)
        saved = await self._repository.save(account)
        logger.info("Opened %s account %s", saved.type.value if saved.type else "untyped", saved.id)
        return self._mapper.from_bank_account(saved)

    async def update_account(self, account_id: str, payload: BankAccountUpdate) -> BankAccountResponse:
        self._validate(payload.balance, payload.currency)
        current = await self._get(account_id)

        updated = replace(
            current,
            balance=payload.balance if payload.balance is not None else current.balance,
            currency=payload.currency if payload.currency is not None else current.currency,
            type=payload.type if payload.type is not None else current.type,
        )
        saved = await self._repository.save(updated)
        logger.info("Updated account %s", account_id)
        return self._mapper.from_bank_account(saved)

    async def delete_account(self, account_id: str) -> None:
        deleted = await self._repository.delete_by_id(account_id)
        if not deleted:
            logger.warning("Delete requested for unknown account %s", account_id)
            raise BankAccountNotFoundError(account_id)
        logger.info("Deleted account %s", account_id)

    async def _get(self, account_id: str) -> BankAccount:
        account = await self._repository.find_by_id(account_id)
        if account is None:
            logger.warning("Bank account %s not found", account_id)
            raise BankAccountNotFoundError(account_id)
        return account

    async def _resolve_customer(self, customer_id: Optional[int]) -> Optional[Customer]:
        if customer_id is None:
            return None
        customer = await self._customers.find_by_id(customer_id)
        if customer is None:
            raise BankAccountValidationError(str(CustomerNotFoundError(customer_id)))
        return customer

    @staticmethod
    def _validate(balance: Optional[float], currency: Optional[str]) -> None:
        if balance is not None and not math.isfinite(balance):
            raise BankAccountValidationError("balance must be a finite number")
        if currency is not None and not currency.strip():
            raise BankAccountValidationError("currency must not be blank")
        if currency is not None and len(currency) > CURRENCY_MAX_LENGTH:
            raise BankAccountValidationError(f"currency must be at most {CURRENCY_MAX_LENGTH} characters")


__all__ = ["BankAccountService"]
