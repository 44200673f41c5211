"""Bank account domain models, mapper and errors."""

from .exceptions import (
    BankAccountError,
    BankAccountNotFoundError,
    BankAccountValidationError,
)
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

__all__ = [
    "CURRENCY_MAX_LENGTH",
    "AccountMapper",
    "AccountProjection",
    "AccountType",
    "BankAccount",
    "BankAccountError",
    "BankAccountNotFoundError",
    "BankAccountRequest",
    "BankAccountResponse",
    "BankAccountUpdate",
    "BankAccountValidationError",
]
