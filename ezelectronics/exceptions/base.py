"""
Base exception classes for EZElectronics.
"""


class EZElectronicsError(Exception):
    """
    Base exception for all domain errors.

    Every subclass carries a stable, machine-readable ``message`` and the HTTP
    ``status_code`` the API answers with, so a single exception handler can
    translate the whole hierarchy.

    Attributes:
        message: Stable human-readable error message
        details: Optional dict with additional context (username, model, ...)
    """

    status_code = 500
    message = "Internal error"

    def __init__(self, message: str | None = None, details: dict | None = None):
        self.message = message or self.message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        if self.details:
            details_str = ', '.join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.__class__.__name__}('{self.message}', {details_str})"
        return f"{self.__class__.__name__}('{self.message}')"


class StorageFailure(EZElectronicsError):
    """Raised when the database or the lock store fails unexpectedly."""

    status_code = 503
    message = "Storage unavailable"

    def __init__(self, reason: str):
        super().__init__(details={'reason': reason})
        self.reason = reason
