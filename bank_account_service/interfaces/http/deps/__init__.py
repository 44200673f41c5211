"""Reusable FastAPI dependencies."""

from .database import get_container, get_db_session
from .account import get_bank_account_service, get_customer_service

__all__ = [
    "get_container",
    "get_db_session",
    "get_bank_account_service",
    "get_customer_service",
]
