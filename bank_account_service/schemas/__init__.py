"""Pydantic schemas used across the project."""
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from bank_account_service.modules.accounts.models import (
    CURRENCY_MAX_LENGTH,
    AccountType,
    BankAccountRequest,
    BankAccountUpdate,
)


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class CustomerResponse(CamelModel):
    id: int
    name: str


class BankAccountRequestDTO(CamelModel):
    """Create payload. ``id`` and ``createdAt`` are assigned by the server."""

    balance: Optional[float] = Field(default=None, allow_inf_nan=False)
    currency: Optional[str] = Field(default=None, max_length=CURRENCY_MAX_LENGTH)
    type: Optional[AccountType] = None
    customer_id: Optional[int] = None

    def to_domain(self) -> BankAccountRequest:
        return BankAccountRequest(
            balance=self.balance,
            currency=self.currency,
            type=self.type,
            customer_id=self.customer_id,
        )


class BankAccountUpdateDTO(CamelModel):
    balance: Optional[float] = Field(default=None, allow_inf_nan=False)
    currency: Optional[str] = Field(default=None, max_length=CURRENCY_MAX_LENGTH)
    type: Optional[AccountType] = None

    def to_domain(self) -> BankAccountUpdate:
        return BankAccountUpdate(balance=self.balance, currency=self.currency, type=self.type)


class BankAccountResponseDTO(CamelModel):
    id: str
    created_at: Optional[datetime] = None
    balance: Optional[float] = None
    currency: Optional[str] = None
    type: Optional[AccountType] = None
    customer: Optional[CustomerResponse] = None


class AccountProjectionDTO(CamelModel):
    id: str
    type: Optional[AccountType] = None
    balance: Optional[float] = None


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str


class ErrorResponse(BaseModel):
    detail: Any


__all__ = [
    "AccountProjectionDTO",
    "BankAccountRequestDTO",
    "BankAccountResponseDTO",
    "BankAccountUpdateDTO",
    "CamelModel",
    "CustomerResponse",
    "ErrorResponse",
    "HealthResponse",
]
