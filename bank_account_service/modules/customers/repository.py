"""Repository protocol for customers."""

from __future__ import annotations

from typing import Protocol, Sequence

from .models import Customer


class CustomerRepository(Protocol):
    """Abstract repository interface for customer persistence."""

    async def find_all(self) -> Sequence[Customer]:
        ...

    async def find_by_id(self, customer_id: int) -> Customer | None:
        ...

    async def save(self, customer: Customer) -> Customer:
        ...

    async def delete_by_id(self, customer_id: int) -> bool:
        ...
