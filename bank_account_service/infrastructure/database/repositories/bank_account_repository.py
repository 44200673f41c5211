"""SQLAlchemy implementation of the bank account repository."""

from __future__ import annotations

from datetime import timezone
from typing import Sequence

from sqlalchemy import Select, delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from bank_account_service.db.models import BankAccount as BankAccountModel
from bank_account_service.modules.accounts.models import AccountType, BankAccount
from bank_account_service.modules.customers.models import Customer


class SqlBankAccountRepository:
    """Bank account repository backed by SQLAlchemy models."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_all(self) -> Sequence[BankAccount]:
        return await self._fetch(self._ordered())

    async def find_by_id(self, account_id: str) -> BankAccount | None:
        stmt = select(BankAccountModel).where(BankAccountModel.id == account_id)
        result = await self._session.execute(stmt)
        return self._to_domain(result.scalar_one_or_none())

    async def find_by_type(self, account_type: AccountType) -> Sequence[BankAccount]:
        return await self._fetch(self._ordered().where(BankAccountModel.type == account_type.value))

    async def find_by_customer(self, customer_id: int) -> Sequence[BankAccount]:
        return await self._fetch(self._ordered().where(BankAccountModel.customer_id == customer_id))

    async def save(self, account: BankAccount) -> BankAccount:
        model = await self._session.get(BankAccountModel, account.id)
        if model is None:
            model = BankAccountModel(id=account.id, seq=await self._next_seq())
            self._session.add(model)

        model.created_at = account.created_at
        model.balance = account.balance
        model.currency = account.currency
        model.type = account.type.value if account.type is not None else None
        model.customer_id = account.customer_id
        await self._session.flush()

        # reload so the customer relationship reflects customer_id
        stmt = (
            select(BankAccountModel)
            .where(BankAccountModel.id == account.id)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        return self._to_domain(result.scalar_one())

    async def delete_by_id(self, account_id: str) -> bool:
        stmt = delete(BankAccountModel).where(BankAccountModel.id == account_id)
        result = await self._session.execute(stmt)
        return bool(result.rowcount)

    async def _next_seq(self) -> int:
        stmt = select(func.coalesce(func.max(BankAccountModel.seq), 0) + 1)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    @staticmethod
    def _ordered() -> Select:
        # insertion order, independent of clock resolution
        return select(BankAccountModel).order_by(BankAccountModel.seq.asc())

    async def _fetch(self, stmt: Select) -> list[BankAccount]:
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    @staticmethod
    def _to_domain(model: BankAccountModel | None) -> BankAccount | None:
        if model is None:
            return None
        created_at = model.created_at
        if created_at is not None and created_at.tzinfo is None:
            # SQLite drops the offset; values are always written in UTC
            created_at = created_at.replace(tzinfo=timezone.utc)
        customer = None
        if model.customer is not None:
            customer = Customer(id=model.customer.id, name=model.customer.name)
        return BankAccount(
            id=str(model.id),
            created_at=created_at,
            balance=model.balance,
            currency=model.currency,
            type=AccountType(model.type) if model.type else None,
            customer=customer,
        )
