"""
Primitive validators.
"""
from typing import Any, TypeGuard

from .kinds import Kind, PRIMITIVE_KINDS, UndefinedType, Validator, kind_of


def boolean(x: Any) -> TypeGuard[bool]:
    """Returns True if and only if x is a boolean."""
    return kind_of(x) is Kind.BOOLEAN


def string(x: Any) -> TypeGuard[str]:
    """Returns True if and only if x is a string."""
    return kind_of(x) is Kind.STRING


def number(x: Any) -> TypeGuard[float]:
    """Returns True if and only if x is a real number, NaN and infinities included."""
    return kind_of(x) is Kind.NUMBER


def empty(x: Any) -> TypeGuard[UndefinedType]:
    """Returns True if and only if x is ``Undefined``."""
    return kind_of(x) is Kind.UNDEFINED


def nil(x: Any) -> TypeGuard[None]:
    """Returns True if and only if x is None."""
    return kind_of(x) is Kind.NULL


def literal(y: Any) -> Validator:
    """
    Returns a validator matching values strictly equal to ``y``.

    Booleans, strings, numbers, None and Undefined compare by value within
    the same kind, so ``literal(1)`` accepts ``1.0`` but not ``True`` or
    ``"1"``. Any other value matches only itself, by identity.
    """
    expected_kind = kind_of(y)

    if expected_kind in PRIMITIVE_KINDS:
        def validate(x: Any) -> bool:
            return kind_of(x) is expected_kind and bool(x == y)
    else:
        def validate(x: Any) -> bool:
            return x is y

    validate.__qualname__ = f"literal({y!r})"
    return validate
