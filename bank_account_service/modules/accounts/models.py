"""Domain models for bank accounts."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from bank_account_service.modules.customers.models import Customer


CURRENCY_MAX_LENGTH = 16


class AccountType(str, Enum):
    CURRENT_ACCOUNT = "CURRENT_ACCOUNT"
    SAVING_ACCOUNT = "SAVING_ACCOUNT"


@dataclass(slots=True)
class BankAccount:
    id: str
    created_at: datetime
    balance: Optional[float] = None
    currency: Optional[str] = None
    type: Optional[AccountType] = None
    customer: Optional[Customer] = None

    @property
    def customer_id(self) -> Optional[int]:
        return self.customer.id if self.customer else None


@dataclass(slots=True)
class BankAccountRequest:
    """Fields a caller may supply when opening an account."""

    balance: Optional[float] = None
    currency: Optional[str] = None
    type: Optional[AccountType] = None
    customer_id: Optional[int] = None


@dataclass(slots=True)
class BankAccountUpdate:
    """Partial update; ``None`` means keep the stored value."""

    balance: Optional[float] = None
    currency: Optional[str] = None
    type: Optional[AccountType] = None


@dataclass(slots=True)
class BankAccountResponse:
    id: str
    created_at: Optional[datetime] = None
    balance: Optional[float] = None
    currency: Optional[str] = None
    type: Optional[AccountType] = None
    customer: Optional[Customer] = None


@dataclass(slots=True, frozen=True)
class AccountProjection:
    """Read-only view exposing id, type and balance only."""

    id: str
    type: Optional[AccountType]
    balance: Optional[float]
