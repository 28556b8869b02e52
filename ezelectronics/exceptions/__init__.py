"""
Domain exceptions for EZElectronics.

Exception Hierarchy:
--------------------
EZElectronicsError (base)
├── StorageFailure                 503
├── CartException
│   ├── CartNotFoundError          404
│   ├── EmptyCartError             400
│   ├── ProductNotInCartError      404
│   └── CartBusyError              409
├── ProductException
│   ├── ProductNotFoundError       404
│   ├── ProductAlreadyExistsError  409
│   ├── OutOfStockError            409
│   ├── InsufficientStockError     409
│   ├── ProductInOpenCartError     409
│   ├── DateInFutureError          400
│   ├── DateBeforeArrivalError     400
│   └── InvalidGroupingError       422
├── ReviewException
│   ├── ReviewNotFoundError        404
│   └── ReviewAlreadyExistsError   409
└── UserException
    ├── UserNotFoundError          404
    ├── UserAlreadyExistsError     409
    ├── UnauthenticatedError       401
    ├── ForbiddenError             403
    ├── UserIsAdminError           403
    └── BirthdateInFutureError     400

Services raise specific exceptions; the API translates them in one place
(``ezelectronics.api.errors``).
"""

from .base import EZElectronicsError, StorageFailure
from .cart import CartException, CartNotFoundError, EmptyCartError, ProductNotInCartError, CartBusyError
from .product import (
    ProductException,
    ProductNotFoundError,
    ProductAlreadyExistsError,
    OutOfStockError,
    InsufficientStockError,
    ProductInOpenCartError,
    DateInFutureError,
    DateBeforeArrivalError,
    InvalidGroupingError,
)
from .user import (
    UserException,
    UserNotFoundError,
    UserAlreadyExistsError,
    UnauthenticatedError,
    ForbiddenError,
    UserIsAdminError,
    BirthdateInFutureError,
)
from .review import ReviewException, ReviewNotFoundError, ReviewAlreadyExistsError

__all__ = [
    'EZElectronicsError',
    'StorageFailure',
    'CartException',
    'CartNotFoundError',
    'EmptyCartError',
    'ProductNotInCartError',
    'CartBusyError',
    'ProductException',
    'ProductNotFoundError',
    'ProductAlreadyExistsError',
    'OutOfStockError',
    'InsufficientStockError',
    'ProductInOpenCartError',
    'DateInFutureError',
    'DateBeforeArrivalError',
    'InvalidGroupingError',
    'UserException',
    'UserNotFoundError',
    'UserAlreadyExistsError',
    'UnauthenticatedError',
    'ForbiddenError',
    'UserIsAdminError',
    'BirthdateInFutureError',
    'ReviewException',
    'ReviewNotFoundError',
    'ReviewAlreadyExistsError',
]
