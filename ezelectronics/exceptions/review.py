"""
Review-related exceptions.
"""

from .base import EZElectronicsError


class ReviewException(EZElectronicsError):
    """Base exception for review-related errors."""
    pass


class ReviewNotFoundError(ReviewException):
    status_code = 404
    message = "Review not found"

    def __init__(self, username: str, model: str):
        super().__init__(details={'username': username, 'model': model})
        self.username = username
        self.model = model


class ReviewAlreadyExistsError(ReviewException):
    """Raised when a customer reviews the same product twice."""

    status_code = 409
    message = "Review already exists"

    def __init__(self, username: str, model: str):
        super().__init__(details={'username': username, 'model': model})
        self.username = username
        self.model = model
