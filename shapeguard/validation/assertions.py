"""
Bridges from validators to control flow: raise when a value is rejected.
"""
from typing import Any, Callable, TypeVar
import functools
import inspect

from shapeguard.utils.logging_config import get_logger
from shapeguard.utils.exceptions import AssertionFailedError
from .kinds import Validator, describe

logger = get_logger(__name__)

T = TypeVar('T')


def asserts(validator: Validator) -> Callable[[Any], None]:
    """
    Wrap a validator into a function that raises when it rejects a value.

    The returned function returns None for accepted values and raises
    ``AssertionFailedError`` otherwise. The error says nothing about which
    part of the value failed.
    """
    name = describe(validator)

    def check(x: Any) -> None:
        if not validator(x):
            logger.debug(f"{name} rejected a value of type {type(x).__name__}")
            raise AssertionFailedError()

    check.__qualname__ = f"asserts({name})"
    return check


def ensure(validator: Validator, value: T) -> T:
    """
    Return ``value`` unchanged if ``validator`` accepts it, raise otherwise.
    """
    asserts(validator)(value)
    return value


def guard_args(**validators: Validator) -> Callable[[Callable], Callable]:
    """
    Decorator checking named arguments before the function runs.

    Arguments are bound against the function's signature with defaults
    applied, so a defaulted parameter is checked too.

    Example:
        @guard_args(name=string, retries=optional(number))
        def connect(name, retries=Undefined): ...
    """
    def decorator(func: Callable) -> Callable:
        sig = inspect.signature(func)
        unknown = set(validators) - set(sig.parameters)
        if unknown:
            raise TypeError(
                f"{func.__qualname__}() has no parameters named {sorted(unknown)}"
            )
        checks = {param: asserts(validator) for param, validator in validators.items()}

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            bound_args = sig.bind(*args, **kwargs)
            bound_args.apply_defaults()

            for param_name, check in checks.items():
                if param_name in bound_args.arguments:
                    check(bound_args.arguments[param_name])

            return func(*args, **kwargs)

        return wrapper
    return decorator
