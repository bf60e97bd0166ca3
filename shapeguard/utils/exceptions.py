"""
Exception hierarchy for shapeguard.
"""
from typing import Any, Dict, Optional


class ShapeguardError(Exception):
    """Base exception for all shapeguard errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            'error_type': self.__class__.__name__,
            'error_code': self.error_code,
            'message': self.message,
            'details': self.details
        }


class ValidationError(ShapeguardError):
    """Raised when a value fails validation and the failure is fatal."""
    pass


class AssertionFailedError(ValidationError, AssertionError):
    """
    Raised by assertion wrappers when a validator rejects a value.

    Carries a fixed message and no details: it does not say which
    validator failed or why.
    """

    MESSAGE = "Assertion failed"

    def __init__(self):
        super().__init__(self.MESSAGE)


class ConfigurationError(ShapeguardError):
    """Raised when configuration is missing, unreadable or invalid."""
    pass
