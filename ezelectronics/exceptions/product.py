"""
Product-related exceptions.
"""

from datetime import date

from .base import EZElectronicsError


class ProductException(EZElectronicsError):
    """Base exception for product-related errors."""
    pass


class ProductNotFoundError(ProductException):
    status_code = 404
    message = "Product not found"

    def __init__(self, model: str):
        super().__init__(details={'model': model})
        self.model = model


class ProductAlreadyExistsError(ProductException):
    status_code = 409
    message = "The product already exists"

    def __init__(self, model: str):
        super().__init__(details={'model': model})
        self.model = model


class OutOfStockError(ProductException):
    """Raised when the product has no available units."""

    status_code = 409
    message = "Product stock is empty"

    def __init__(self, model: str):
        super().__init__(details={'model': model})
        self.model = model


class InsufficientStockError(ProductException):
    """Raised when available units cannot cover the requested quantity."""

    status_code = 409
    message = "Product stock cannot satisfy the requested quantity"

    def __init__(self, model: str, requested: int, available: int):
        super().__init__(
            details={'model': model, 'requested': requested, 'available': available}
        )
        self.model = model
        self.requested = requested
        self.available = available


class ProductInOpenCartError(ProductException):
    """Raised when deleting a product still referenced by an unpaid cart."""

    status_code = 409
    message = "Product is referenced by an open cart"

    def __init__(self, model: str | None = None):
        super().__init__(details={'model': model} if model else None)
        self.model = model


class DateInFutureError(ProductException):
    status_code = 400
    message = "Date cannot be after the current date"

    def __init__(self, value: date):
        super().__init__(details={'date': value.isoformat()})
        self.value = value


class DateBeforeArrivalError(ProductException):
    status_code = 400
    message = "Date cannot be before the product arrival date"

    def __init__(self, model: str, value: date, arrival_date: date):
        super().__init__(
            details={
                'model': model,
                'date': value.isoformat(),
                'arrival_date': arrival_date.isoformat(),
            }
        )
        self.model = model
        self.value = value
        self.arrival_date = arrival_date


class InvalidGroupingError(ProductException):
    """Raised when grouping, category and model filters do not fit together."""

    status_code = 422
    message = "Invalid grouping parameters"

    def __init__(self, reason: str):
        super().__init__(details={'reason': reason})
        self.reason = reason
