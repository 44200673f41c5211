"""Customer domain models and errors."""

from .exceptions import CustomerError, CustomerNotFoundError
from .models import Customer

__all__ = [
    "Customer",
    "CustomerError",
    "CustomerNotFoundError",
]
