# dynamic_value/core/domain/coercion.py

"""Coercion rules between value variants

Every conversion either returns a result or raises ``TypeMismatch``; nothing
is silently defaulted except Null, which reads as zero and as false.
"""

# Standard library imports
from math import floor
from math import isfinite
from re import compile

# Local imports
from dynamic_value.core.domain.conversion import encode_pretty
from dynamic_value.core.domain.exceptions import TypeMismatch
from dynamic_value.core.domain.value import Array
from dynamic_value.core.domain.value import Boolean
from dynamic_value.core.domain.value import Number
from dynamic_value.core.domain.value import Object
from dynamic_value.core.domain.value import Text
from dynamic_value.core.domain.value import Value

# ASCII digits only so parsing does not depend on locale or Unicode digit classes
NUMERIC_PREFIX = compile(r"[+-]?[0-9]+(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")


def parse_number_prefix(text: str) -> float | None:
    """Parse the leading number of ``text``, ignoring anything after it

    Returns:
        The parsed float, or None if the text does not start with a number
    """
    found = NUMERIC_PREFIX.match(text)
    if found is None:
        return None
    return float(found.group())


def to_number(value: Value) -> float:
    """Treat a value as a number

    Raises:
        TypeMismatch: For booleans, objects, arrays and non-numeric text
    """
    match value:
        case Number(value=number):
            return number
        case Text(value=text):
            parsed = parse_number_prefix(text)
            if parsed is None:
                raise TypeMismatch(f"cannot treat string as number: {text}")
            return parsed
        case Boolean():
            raise TypeMismatch("cannot treat bool as number")
        case Object():
            raise TypeMismatch("cannot treat object as number")
        case Array():
            raise TypeMismatch("cannot treat array as number")
        case _:
            return 0.0


def to_integer(value: Value) -> int:
    """Floor of ``to_number``"""
    number = to_number(value)
    if not isfinite(number):
        raise TypeMismatch(f"cannot treat {number} as integer")
    return floor(number)


def to_text(value: Value) -> str:
    """Text passes through raw, anything else becomes pretty-printed JSON"""
    if isinstance(value, Text):
        return value.value
    return encode_pretty(value)


def to_boolean(value: Value) -> bool:
    """Truthiness of a value

    Containers are true when non-empty and numbers when non-zero. Text reads
    "true"/"false" case-insensitively and is otherwise true when it has any
    non-blank content.
    """
    match value:
        case Object(fields=fields):
            return len(fields) > 0
        case Array(items=items):
            return len(items) > 0
        case Boolean(value=flag):
            return flag
        case Number(value=number):
            return number != 0
        case Text(value=text):
            trimmed = text.strip().lower()
            if trimmed == "true":
                return True
            if trimmed == "false":
                return False
            return trimmed != ""
        case _:
            return False


__all__ = [
    "NUMERIC_PREFIX",
    "parse_number_prefix",
    "to_boolean",
    "to_integer",
    "to_number",
    "to_text",
]
