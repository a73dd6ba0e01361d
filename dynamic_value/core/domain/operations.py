# dynamic_value/core/domain/operations.py

"""Operators over dynamic values

Indexing, persistent field updates, merging, arithmetic and traversal. Keys
and operands may be given as values or as plain JSON-like Python data; plain
data is converted with ``from_python`` first.
"""

# Standard library imports
from collections.abc import Callable
from collections.abc import Iterable
from functools import reduce
from math import copysign
from math import floor
from math import inf
from math import isfinite

# Local imports
from dynamic_value.core.domain.coercion import to_integer
from dynamic_value.core.domain.coercion import to_number
from dynamic_value.core.domain.coercion import to_text
from dynamic_value.core.domain.conversion import from_python
from dynamic_value.core.domain.exceptions import IndexOutOfRange
from dynamic_value.core.domain.exceptions import KeyNotFound
from dynamic_value.core.domain.exceptions import TypeMismatch
from dynamic_value.core.domain.value import Array
from dynamic_value.core.domain.value import Boolean
from dynamic_value.core.domain.value import NULL
from dynamic_value.core.domain.value import Null
from dynamic_value.core.domain.value import Number
from dynamic_value.core.domain.value import Object
from dynamic_value.core.domain.value import Text
from dynamic_value.core.domain.value import Value
from dynamic_value.core.domain.value import order_key

type Transform = Callable[[Value], Value]

# ============================================================================
# Indexing
# ============================================================================


def _position(key: Value) -> int | None:
    """Floor of the key as a position, None when it is not finite"""
    number = to_number(key)
    if not isfinite(number):
        return None
    return floor(number)


def get(container: Value, key: object) -> Value:
    """Look up ``key`` in ``container``

    Object keys go through ``to_text``; array and text positions go through
    ``to_integer``. A missing key or out-of-range position, infinities and NaN
    included, is Null (empty Text for text), never an error.

    Raises:
        TypeMismatch: If the container is a number, boolean or null, or the
            key cannot be coerced
    """
    key_value = from_python(key)
    match container:
        case Object(fields=fields):
            return fields.get(to_text(key_value), NULL)
        case Array(items=items):
            index = _position(key_value)
            if index is not None and 0 <= index < len(items):
                return items[index]
            return NULL
        case Text(value=text):
            index = _position(key_value)
            if index is not None and 0 <= index < len(text):
                return Text(text[index])
            return Text("")
        case _:
            raise TypeMismatch("cannot index this type of value")


def lookup(container: Value, key: object) -> Value:
    """Strict ``get`` for callers that require the key to be present

    Raises:
        KeyNotFound: If an object has no such key
        IndexOutOfRange: If an array or text has no such position
        TypeMismatch: As for ``get``
    """
    key_value = from_python(key)
    match container:
        case Object(fields=fields):
            name = to_text(key_value)
            if name not in fields:
                raise KeyNotFound(name)
            return fields[name]
        case Array(items=items):
            index = _position(key_value)
            if index is None or not 0 <= index < len(items):
                raise IndexOutOfRange(to_number(key_value) if index is None else index)
            return items[index]
        case Text(value=text):
            index = _position(key_value)
            if index is None or not 0 <= index < len(text):
                raise IndexOutOfRange(to_number(key_value) if index is None else index)
            return Text(text[index])
        case _:
            raise TypeMismatch("cannot index this type of value")


def get_path(container: Value, keys: Iterable[object], strict: bool = False) -> Value:
    """Apply ``get`` (or ``lookup`` when strict) for each key in turn"""
    step = lookup if strict else get
    current = container
    for key in keys:
        current = step(current, key)
    return current


# ============================================================================
# Persistent updates
# ============================================================================


def set_field(key: object, value: object, container: Value) -> Object:
    """Return a copy of the object with ``key`` mapped to ``value``

    Raises:
        TypeMismatch: If the container is not an object
    """
    if not isinstance(container, Object):
        raise TypeMismatch("not an object")
    updated = dict(container.fields)
    updated[to_text(from_python(key))] = from_python(value)
    return Object(updated)


def modify_field(key: object, transform: Transform, container: Value) -> Object:
    """Return a copy of the object with ``transform`` applied at ``key``

    An absent key is not an error: the object comes back unchanged.

    Raises:
        TypeMismatch: If the container is not an object
    """
    if not isinstance(container, Object):
        raise TypeMismatch("not an object")
    name = to_text(from_python(key))
    if name not in container.fields:
        return container
    updated = dict(container.fields)
    updated[name] = transform(updated[name])
    return Object(updated)


# ============================================================================
# Merge
# ============================================================================


def merge(left: Value, right: Value) -> Value:
    """Best-effort append of two values

    Null is the identity, arrays concatenate, objects union with the right
    side winning, and anything else is joined as text.
    """
    match left, right:
        case Null(), _:
            return right
        case _, Null():
            return left
        case Array(items=head), Array(items=tail):
            return Array(tuple(head) + tuple(tail))
        case Object(fields=base), Object(fields=overrides):
            return Object({**base, **overrides})
        case Text(value=head), Text(value=tail):
            return Text(head + tail)
        case Text(value=head), Number() | Boolean():
            return Text(head + to_text(right))
        case Number() | Boolean(), Text(value=tail):
            return Text(to_text(left) + tail)
        case _:
            return Text(to_text(left) + to_text(right))


def merge_all(values: Iterable[Value]) -> Value:
    """Fold ``merge`` over the values, starting from Null"""
    return reduce(merge, values, NULL)


# ============================================================================
# Arithmetic
# ============================================================================


def add(left: object, right: object) -> Number:
    return Number(to_number(from_python(left)) + to_number(from_python(right)))


def subtract(left: object, right: object) -> Number:
    return add(left, negate(right))


def multiply(left: object, right: object) -> Number:
    return Number(to_number(from_python(left)) * to_number(from_python(right)))


def divide(left: object, right: object) -> Number:
    return multiply(left, reciprocal(right))


def negate(value: object) -> Number:
    return Number(-to_number(from_python(value)))


def absolute(value: object) -> Number:
    return Number(abs(to_number(from_python(value))))


def signum(value: object) -> Number:
    """-1, 0 or 1; zero and NaN keep their own value"""
    number = to_number(from_python(value))
    if number > 0:
        return Number(1.0)
    if number < 0:
        return Number(-1.0)
    return Number(number)


def reciprocal(value: object) -> Number:
    """1/x, with zero giving an infinity of the same sign"""
    number = to_number(from_python(value))
    if number == 0:
        return Number(copysign(inf, number))
    return Number(1.0 / number)


def quot_rem(left: object, right: object) -> tuple[Number, Number]:
    """Integer quotient truncated toward zero, and the matching remainder

    Raises:
        ZeroDivisionError: If the divisor is zero
    """
    dividend = to_integer(from_python(left))
    divisor = to_integer(from_python(right))
    if divisor == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    return Number(quotient), Number(dividend - quotient * divisor)


def compare(left: object, right: object) -> int:
    """Total structural comparison: -1, 0 or 1"""
    left_key = order_key(from_python(left))
    right_key = order_key(from_python(right))
    return (left_key > right_key) - (left_key < right_key)


# ============================================================================
# Traversal
# ============================================================================


def to_list(value: Value) -> list[Value]:
    """Elements of an array, ``{key, value}`` objects for an object's entries,
    or the value itself for a scalar"""
    match value:
        case Array(items=items):
            return list(items)
        case Object(fields=fields):
            return [Object({"key": Text(key), "value": item}) for key, item in fields.items()]
        case _:
            return [value]


def to_keys(value: Value) -> list[Value]:
    """Keys of an object as text

    An array yields its elements rather than its indices.
    """
    match value:
        case Array(items=items):
            return list(items)
        case Object(fields=fields):
            return [Text(key) for key in fields]
        case _:
            return [value]


def to_elems(value: Value) -> list[Value]:
    match value:
        case Array(items=items):
            return list(items)
        case Object(fields=fields):
            return list(fields.values())
        case _:
            return [value]


# ============================================================================
# Construction
# ============================================================================


def from_list(values: Iterable[object]) -> Array:
    return Array([from_python(item) for item in values])


def from_dict(pairs: Iterable[tuple[object, object]]) -> Object:
    """Build an object from key/value pairs

    Keys go through ``to_text``; a later duplicate key overwrites an earlier one.
    """
    return Object({to_text(from_python(key)): from_python(item) for key, item in pairs})


__all__ = [
    "Transform",
    "absolute",
    "add",
    "compare",
    "divide",
    "from_dict",
    "from_list",
    "get",
    "get_path",
    "lookup",
    "merge",
    "merge_all",
    "modify_field",
    "multiply",
    "negate",
    "quot_rem",
    "reciprocal",
    "set_field",
    "signum",
    "subtract",
    "to_elems",
    "to_keys",
    "to_list",
]
