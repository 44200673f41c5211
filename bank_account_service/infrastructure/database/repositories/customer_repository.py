"""SQLAlchemy implementation of the customer repository."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from bank_account_service.db.models import Customer as CustomerModel
from bank_account_service.modules.customers.models import Customer


class SqlCustomerRepository:
    """Customer repository backed by SQLAlchemy models."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_all(self) -> Sequence[Customer]:
        stmt = select(CustomerModel).order_by(CustomerModel.id.asc())
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def find_by_id(self, customer_id: int) -> Customer | None:
        model = await self._session.get(CustomerModel, customer_id)
        return self._to_domain(model) if model else None

    async def save(self, customer: Customer) -> Customer:
        model = None
        if customer.id is not None:
            model = await self._session.get(CustomerModel, customer.id)
        if model is None:
            model = CustomerModel(id=customer.id)
            self._session.add(model)

        model.name = customer.name
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_domain(model)

    async def delete_by_id(self, customer_id: int) -> bool:
        stmt = delete(CustomerModel).where(CustomerModel.id == customer_id)
        result = await self._session.execute(stmt)
        return bool(result.rowcount)

    @staticmethod
    def _to_domain(model: CustomerModel) -> Customer:
        return Customer(id=model.id, name=model.name)
