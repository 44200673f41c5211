"""Bank account domain specific exceptions."""


class BankAccountError(Exception):
    """Base class for bank account domain errors."""


class BankAccountNotFoundError(BankAccountError):
    """Raised when the requested account cannot be found."""

    def __init__(self, account_id: str) -> None:
        super().__init__(f"Bank account with id {account_id} not found")
        self.account_id = account_id


class BankAccountValidationError(BankAccountError):
    """Raised when a payload is malformed for the requested operation."""
