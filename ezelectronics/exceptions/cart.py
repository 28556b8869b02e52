"""
Cart-related exceptions.
"""

from .base import EZElectronicsError


class CartException(EZElectronicsError):
    """Base exception for cart-related errors."""
    pass


class CartNotFoundError(CartException):
    """Raised when the customer has no unpaid cart."""

    status_code = 404
    message = "Cart not found"

    def __init__(self, username: str):
        super().__init__(details={'username': username})
        self.username = username


class EmptyCartError(CartException):
    """Raised when trying to checkout a cart without lines."""

    status_code = 400
    message = "Cart is empty"

    def __init__(self, username: str):
        super().__init__(details={'username': username})
        self.username = username


class ProductNotInCartError(CartException):
    """Raised when removing a model that has no line in the current cart."""

    status_code = 404
    message = "Product not in cart"

    def __init__(self, username: str, model: str):
        super().__init__(details={'username': username, 'model': model})
        self.username = username
        self.model = model


class CartBusyError(CartException):
    """Raised when another request still holds the customer's cart lock."""

    status_code = 409
    message = "Cart is being modified by another request"

    def __init__(self, username: str):
        super().__init__(details={'username': username})
        self.username = username
