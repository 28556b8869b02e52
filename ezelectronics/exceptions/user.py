"""
User and access-related exceptions.
"""

from datetime import date

from .base import EZElectronicsError


class UserException(EZElectronicsError):
    """Base exception for user-related errors."""
    pass


class UserNotFoundError(UserException):
    status_code = 404
    message = "User not found"

    def __init__(self, username: str):
        super().__init__(details={'username': username})
        self.username = username


class UserAlreadyExistsError(UserException):
    status_code = 409
    message = "The username already exists"

    def __init__(self, username: str):
        super().__init__(details={'username': username})
        self.username = username


class UnauthenticatedError(UserException):
    status_code = 401
    message = "Unauthenticated user"


class ForbiddenError(UserException):
    """Raised when the principal's role lacks the capability for a route."""

    status_code = 403
    message = "User is not authorized"

    def __init__(self, username: str, role: str):
        super().__init__(details={'username': username, 'role': role})
        self.username = username
        self.role = role


class UserIsAdminError(UserException):
    """Raised when an admin tries to delete or edit another admin."""

    status_code = 403
    message = "Admins cannot modify other admins"

    def __init__(self, username: str):
        super().__init__(details={'username': username})
        self.username = username


class BirthdateInFutureError(UserException):
    status_code = 400
    message = "Birthdate cannot be in the future"

    def __init__(self, value: date):
        super().__init__(details={'birthdate': value.isoformat()})
        self.value = value
