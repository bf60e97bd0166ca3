"""
shapeguard: composable runtime validators.

A validator is any callable taking one value and returning a bool. The
primitives, container and schema validators below are combined with
``any_``, ``all_``, ``optional`` and ``nullable``; ``asserts`` turns a
validator into a check that raises.

Example:
    >>> from shapeguard import record, string, number, optional
    >>> user = record({'name': string, 'age': optional(number)})
    >>> user({'name': 'ada'})
    True
"""
from .validation import *
from .validation import __all__ as _validation_all
from .utils import (
    get_logger,
    LoggerFactory,
    LogContext,
    StructuredFormatter,
    ShapeguardError,
    ValidationError,
    AssertionFailedError,
    ConfigurationError
)
from .config import (
    Config,
    ConfigManager,
    ConfigPresets,
    get_config_manager,
    load_config,
    get_config,
    set_config
)

__version__ = "1.0.0"

__all__ = list(_validation_all) + [
    'get_logger',
    'LoggerFactory',
    'LogContext',
    'StructuredFormatter',
    'ShapeguardError',
    'ValidationError',
    'AssertionFailedError',
    'ConfigurationError',
    'Config',
    'ConfigManager',
    'ConfigPresets',
    'get_config_manager',
    'load_config',
    'get_config',
    'set_config',
]
