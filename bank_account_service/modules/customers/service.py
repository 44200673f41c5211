"""Domain services for customers."""

from __future__ import annotations

import logging
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from bank_account_service.infrastructure.database.repositories.customer_repository import (
    SqlCustomerRepository,
)

from .exceptions import CustomerNotFoundError
from .models import Customer
from .repository import CustomerRepository

logger = logging.getLogger(__name__)


class CustomerService:
    """Read access to customers plus the insert path used by seeding."""

    def __init__(self, repository: CustomerRepository) -> None:
        self._repository = repository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "CustomerService":
        return cls(SqlCustomerRepository(session))

    async def list_customers(self) -> Sequence[Customer]:
        return await self._repository.find_all()

    async def get_customer(self, customer_id: int) -> Customer:
        customer = await self._repository.find_by_id(customer_id)
        if customer is None:
            logger.warning("Customer %s not found", customer_id)
            raise CustomerNotFoundError(customer_id)
        return customer

    async def create_customer(self, name: str) -> Customer:
        customer = await self._repository.save(Customer(name=name))
        logger.info("Created customer %s (%s)", customer.id, customer.name)
        return customer
