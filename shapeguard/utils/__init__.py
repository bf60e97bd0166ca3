"""
Utility modules for shapeguard.
"""
from .logging_config import get_logger, LoggerFactory, LogContext, StructuredFormatter
from .exceptions import (
    ShapeguardError,
    ValidationError,
    AssertionFailedError,
    ConfigurationError
)

__all__ = [
    'get_logger',
    'LoggerFactory',
    'LogContext',
    'StructuredFormatter',
    'ShapeguardError',
    'ValidationError',
    'AssertionFailedError',
    'ConfigurationError',
]
