"""Customer domain specific exceptions."""


class CustomerError(Exception):
    """Base class for customer domain errors."""


class CustomerNotFoundError(CustomerError):
    """Raised when the requested customer cannot be found."""

    def __init__(self, customer_id: int) -> None:
        super().__init__(f"Customer {customer_id} not found")
        self.customer_id = customer_id
