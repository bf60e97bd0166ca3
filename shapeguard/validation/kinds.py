"""
Value kinds shared by every validator.

A value resolves to exactly one ``Kind`` through ``kind_of``. Primitive and
container validators compare against that single discriminant instead of
probing the value repeatedly.
"""
from collections.abc import Mapping, Sequence
from enum import Enum
from numbers import Real
from typing import Any, Callable, Final, Literal

import numpy as np

Validator = Callable[[Any], bool]


class UndefinedType:
    """
    Sentinel for a value that is absent altogether.

    Record and tuple validators pass it for keys or indices missing from
    the input, which is what lets ``optional`` fields be left out. It is
    distinct from ``None``.
    """

    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> Literal[False]:
        return False

    def __repr__(self) -> str:
        return "Undefined"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return "Undefined"


Undefined: Final = UndefinedType()


class Kind(Enum):
    """Closed set of kinds a value can have."""

    BOOLEAN = "boolean"
    STRING = "string"
    NUMBER = "number"
    UNDEFINED = "undefined"
    NULL = "null"
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    OTHER = "other"


PRIMITIVE_KINDS = frozenset({
    Kind.BOOLEAN,
    Kind.STRING,
    Kind.NUMBER,
    Kind.UNDEFINED,
    Kind.NULL,
})

# Sequences of characters or bytes are not element containers here.
_TEXT_TYPES = (str, bytes, bytearray)


def kind_of(x: Any) -> Kind:
    """
    Resolve a value to its kind.

    Numbers are ``numbers.Real`` values other than booleans, so numpy
    integer and floating scalars count but ``numpy.timedelta64``, ``complex``
    and ``decimal.Decimal`` resolve to ``Kind.OTHER``.
    """
    if x is Undefined:
        return Kind.UNDEFINED
    if x is None:
        return Kind.NULL
    # bool subclasses int, so it must be tested before numbers
    if isinstance(x, (bool, np.bool_)):
        return Kind.BOOLEAN
    if isinstance(x, str):
        return Kind.STRING
    # numpy.timedelta64 subclasses numpy.signedinteger but is a duration
    if isinstance(x, Real) and not isinstance(x, np.timedelta64):
        return Kind.NUMBER
    if isinstance(x, Mapping):
        return Kind.MAPPING
    if isinstance(x, np.ndarray):
        return Kind.SEQUENCE if x.ndim >= 1 else Kind.OTHER
    if isinstance(x, Sequence) and not isinstance(x, _TEXT_TYPES):
        return Kind.SEQUENCE
    return Kind.OTHER


def is_object(x: Any) -> bool:
    """Returns True if x is a keyed container (a mapping, not a sequence)."""
    return kind_of(x) is Kind.MAPPING


def is_sequence(x: Any) -> bool:
    """Returns True if x is an ordered sequence other than text."""
    return kind_of(x) is Kind.SEQUENCE


def describe(validator: Validator) -> str:
    """Readable name of a validator, for log messages."""
    return getattr(validator, '__qualname__', None) or repr(validator)
