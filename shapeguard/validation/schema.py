"""
Schema validators for heterogeneous containers.

Both validators are open: keys or trailing elements the schema does not
mention never cause a rejection.
"""
from types import MappingProxyType
from typing import Any, Hashable, Mapping

from .kinds import Kind, Undefined, Validator, describe, kind_of


def _lookup(x: Mapping, key: Hashable) -> Any:
    # get() rather than x[key]: defaultdict must not grow. Some mappings
    # (os.environ) raise TypeError for keys of the wrong type, and a class
    # registered as a Mapping may lack get() entirely.
    try:
        return x.get(key, Undefined)
    except (AttributeError, TypeError):
        return Undefined


def record(schema: Mapping[Hashable, Validator]) -> Validator:
    """
    Returns a validator matching mappings whose values match the schema.

    For every key of ``schema`` the validator at that key receives the
    input's value, or ``Undefined`` when the key is missing, so a field
    validated by ``optional(...)`` may be left out.

    Args:
        schema: Mapping from key to validator. It is copied, so mutating it
            afterwards does not change the returned validator.
    """
    fields = MappingProxyType(dict(schema))

    def validate(x: Any) -> bool:
        if kind_of(x) is not Kind.MAPPING:
            return False
        return all(validator(_lookup(x, key)) for key, validator in fields.items())

    validate.__qualname__ = "record({%s})" % ", ".join(
        f"{key!r}: {describe(validator)}" for key, validator in fields.items()
    )
    return validate


def tuple_(*schema: Validator) -> Validator:
    """
    Returns a validator matching sequences whose leading elements match the schema.

    ``schema[i]`` receives ``x[i]``, or ``Undefined`` when the input is
    shorter than the schema. The input must be a sequence even when the
    schema is empty.
    """
    positions = tuple(schema)

    def validate(x: Any) -> bool:
        if kind_of(x) is not Kind.SEQUENCE:
            return False
        length = len(x)
        return all(
            validator(x[i] if i < length else Undefined)
            for i, validator in enumerate(positions)
        )

    validate.__qualname__ = "tuple_(%s)" % ", ".join(describe(validator) for validator in positions)
    return validate
