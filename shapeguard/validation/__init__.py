"""
Validator algebra for shapeguard.
"""
from .kinds import (
    Validator,
    Undefined,
    UndefinedType,
    Kind,
    kind_of,
    is_object,
    is_sequence
)
from .primitives import (
    boolean,
    string,
    number,
    empty,
    nil,
    literal
)
from .containers import (
    object_,
    array,
    instance
)
from .schema import (
    record,
    tuple_
)
from .combinators import (
    any_,
    all_,
    optional,
    nullable
)
from .assertions import (
    asserts,
    ensure,
    guard_args
)

__all__ = [
    'Validator',
    'Undefined',
    'UndefinedType',
    'Kind',
    'kind_of',
    'is_object',
    'is_sequence',
    'boolean',
    'string',
    'number',
    'empty',
    'nil',
    'literal',
    'object_',
    'array',
    'instance',
    'record',
    'tuple_',
    'any_',
    'all_',
    'optional',
    'nullable',
    'asserts',
    'ensure',
    'guard_args',
]
