"""Repository protocol for bank accounts."""

from __future__ import annotations

from typing import Protocol, Sequence

from .models import AccountType, BankAccount


class BankAccountRepository(Protocol):
    """Abstract repository interface for bank account persistence.

    Every finder returns accounts in stored order (oldest first).
    """

    async def find_all(self) -> Sequence[BankAccount]:
        ...

    async def find_by_id(self, account_id: str) -> BankAccount | None:
        ...

    async def save(self, account: BankAccount) -> BankAccount:
        ...

    async def delete_by_id(self, account_id: str) -> bool:
        ...

    async def find_by_type(self, account_type: AccountType) -> Sequence[BankAccount]:
        ...

    async def find_by_customer(self, customer_id: int) -> Sequence[BankAccount]:
        ...
