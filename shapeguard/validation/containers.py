"""
Validators for homogeneous containers and nominal types.
"""
import types
from typing import Any, Tuple, Type, Union, get_origin

from shapeguard.utils.logging_config import get_logger
from .kinds import Kind, Validator, describe, kind_of

logger = get_logger(__name__)


def object_(validator: Validator) -> Validator:
    """Returns a validator matching mappings whose every value matches ``validator``."""
    def validate(x: Any) -> bool:
        if kind_of(x) is not Kind.MAPPING:
            return False
        # A class registered as a Mapping may not implement values()
        try:
            values = iter(x.values())
        except (AttributeError, TypeError):
            return False
        return all(validator(value) for value in values)

    validate.__qualname__ = f"object_({describe(validator)})"
    return validate


def array(validator: Validator) -> Validator:
    """Returns a validator matching sequences whose every element matches ``validator``."""
    def validate(x: Any) -> bool:
        return kind_of(x) is Kind.SEQUENCE and all(validator(element) for element in x)

    validate.__qualname__ = f"array({describe(validator)})"
    return validate


def _is_class_spec(base: Any) -> bool:
    # list[int] and friends are not accepted by isinstance
    if isinstance(base, types.GenericAlias):
        return False
    if isinstance(base, (type, types.UnionType)):
        return True
    if get_origin(base) is Union:
        return all(_is_class_spec(item) for item in base.__args__)
    return isinstance(base, tuple) and all(_is_class_spec(item) for item in base)


def instance(base: Union[Type, Tuple[Type, ...]]) -> Validator:
    """
    Returns a validator matching instances of ``base``.

    ``base`` is a class, a tuple of classes, or a union of classes written
    either as ``int | str`` or ``typing.Union[int, str]`` / ``Optional[int]``.
    Given anything else, such as a function or a parametrized generic, the
    validator rejects every value.
    """
    if not _is_class_spec(base):
        logger.debug(f"instance() built with non-class base {base!r}; it will reject all values")

        def validate(x: Any) -> bool:
            return False
    else:
        def validate(x: Any) -> bool:
            return isinstance(x, base)

    validate.__qualname__ = f"instance({getattr(base, '__name__', repr(base))})"
    return validate
