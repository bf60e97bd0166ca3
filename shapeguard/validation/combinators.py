"""
Combinators building validators out of validators.

Constituents are evaluated left to right and evaluation stops as soon as the
result is known. Nothing is cached between calls.
"""
from typing import Any

from .kinds import Validator, describe
from .primitives import empty, nil


def any_(*validators: Validator) -> Validator:
    """Returns a validator matching values that match at least one of ``validators``."""
    constituents = tuple(validators)

    def validate(x: Any) -> bool:
        for validator in constituents:
            if validator(x):
                return True
        return False

    validate.__qualname__ = "any_(%s)" % ", ".join(describe(v) for v in constituents)
    return validate


def all_(*validators: Validator) -> Validator:
    """Returns a validator matching values that match every one of ``validators``."""
    constituents = tuple(validators)

    def validate(x: Any) -> bool:
        for validator in constituents:
            if not validator(x):
                return False
        return True

    validate.__qualname__ = "all_(%s)" % ", ".join(describe(v) for v in constituents)
    return validate


def optional(validator: Validator) -> Validator:
    """Returns a validator matching ``Undefined`` or whatever ``validator`` matches."""
    return any_(empty, validator)


def nullable(validator: Validator) -> Validator:
    """Returns a validator matching None or whatever ``validator`` matches."""
    return any_(nil, validator)
