"""Conversions between stored accounts and the payloads seen by callers."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Callable, Optional

from bank_account_service.modules.customers.models import Customer

from .models import AccountProjection, BankAccount, BankAccountRequest, BankAccountResponse


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AccountMapper:
    """Pure field-by-field mapping; the only place identities are minted."""

    def __init__(
        self,
        id_factory: Callable[[], str] = _new_id,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._id_factory = id_factory
        self._clock = clock

    def from_bank_account(self, account: BankAccount) -> BankAccountResponse:
        return BankAccountResponse(
            id=account.id,
            created_at=account.created_at,
            balance=account.balance,
            currency=account.currency,
            type=account.type,
            customer=account.customer,
        )

    def from_request(
        self,
        request: BankAccountRequest,
        customer: Optional[Customer] = None,
    ) -> BankAccount:
        return BankAccount(
            id=self._id_factory(),
            created_at=self._clock(),
            balance=request.balance,
            currency=request.currency,
            type=request.type,
            customer=customer,
        )

    def from_projection(self, projection: AccountProjection) -> BankAccountResponse:
        return BankAccountResponse(
            id=projection.id,
            type=projection.type,
            balance=projection.balance,
        )

    @staticmethod
    def to_projection(account: BankAccount) -> AccountProjection:
        return AccountProjection(id=account.id, type=account.type, balance=account.balance)


__all__ = ["AccountMapper"]
