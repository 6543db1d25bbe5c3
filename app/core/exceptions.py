# app/core/exceptions.py
#
# Checkout failures. Each checkout ends in exactly one of these or a
# committed transaction.


class CheckoutError(Exception):
    """Base class for every checkout failure."""


class InvalidRequest(CheckoutError):
    """Malformed cart: empty, or a quantity that is not positive."""


class NotFound(CheckoutError):
    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"Product {product_id} not found")


class InsufficientStock(CheckoutError):
    def __init__(self, product_id: int, requested: int | None = None, available: int | None = None):
        self.product_id = product_id
        self.requested = requested
        self.available = available

        message = f"Insufficient stock for product {product_id}"
        if requested is not None and available is not None:
            message += f" (requested {requested}, available {available})"
        super().__init__(message)


class PersistenceError(CheckoutError):
    """The underlying store failed; the unit of work was rolled back."""
