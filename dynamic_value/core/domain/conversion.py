# dynamic_value/core/domain/conversion.py

"""Structural conversion between dynamic values and plain Python data

These are the hooks the JSON and CSV codecs are written against: a value maps
onto the ``JSONType`` shapes one to one (Object <-> dict, Array <-> list,
Text <-> str, Number <-> int/float, Boolean <-> bool, Null <-> None).
"""

# Standard library imports
from collections.abc import Mapping
from json import dumps
from math import isfinite

# Local imports
from dynamic_value.core.domain.exceptions import TypeMismatch
from dynamic_value.core.domain.value import Array
from dynamic_value.core.domain.value import BaseValue
from dynamic_value.core.domain.value import Boolean
from dynamic_value.core.domain.value import NULL
from dynamic_value.core.domain.value import Number
from dynamic_value.core.domain.value import Object
from dynamic_value.core.domain.value import Text
from dynamic_value.core.domain.value import Value
from dynamic_value.core.types.json import JSONType

# Integral floats beyond this magnitude keep their float rendering
_MAX_EXACT_INTEGER = 2**53

PRETTY_INDENT = 4


def from_python(data: object) -> Value:
    """Convert JSON-like Python data into a value

    Values pass through unchanged. Tuples are treated like lists. Mapping keys
    go through the same text coercion as ``from_dict``: strings are kept and
    anything else is rendered as JSON, so ``{1.0: x}`` has the key "1" and
    ``{True: x}`` the key "true".

    Raises:
        TypeMismatch: If the data contains something with no JSON shape
    """
    if isinstance(data, BaseValue):
        return data  # type: ignore[return-value]
    if data is None:
        return NULL
    # bool before int: bool is an int subclass
    if isinstance(data, bool):
        return Boolean(data)
    if isinstance(data, (int, float)):
        return Number(data)
    if isinstance(data, str):
        return Text(data)
    if isinstance(data, Mapping):
        return Object({_key_text(key): from_python(item) for key, item in data.items()})
    if isinstance(data, (list, tuple)):
        return Array([from_python(item) for item in data])
    raise TypeMismatch(f"cannot convert {type(data).__name__} to a dynamic value")


def _key_text(key: object) -> str:
    if isinstance(key, str):
        return key
    value = from_python(key)
    if isinstance(value, Text):
        return value.value
    return encode_pretty(value)


def to_python(value: Value) -> JSONType:
    """Convert a value into plain Python data

    Integral numbers come back as ``int`` so they render without a trailing
    ``.0``; non-finite numbers have no JSON form and become ``None``.
    """
    match value:
        case Object(fields=fields):
            return {key: to_python(item) for key, item in fields.items()}
        case Array(items=items):
            return [to_python(item) for item in items]
        case Text(value=text):
            return text
        case Number(value=number):
            if not isfinite(number):
                return None
            if number.is_integer() and abs(number) < _MAX_EXACT_INTEGER:
                return int(number)
            return number
        case Boolean(value=flag):
            return flag
        case _:
            return None


def encode_json(value: Value, indent: int | None = None, ensure_ascii: bool = False) -> str:
    """Render a value as JSON text, compact unless ``indent`` is given"""
    if indent is None:
        return dumps(to_python(value), ensure_ascii=ensure_ascii, separators=(",", ":"))
    return dumps(to_python(value), ensure_ascii=ensure_ascii, indent=indent)


def encode_pretty(value: Value) -> str:
    """Pretty-printed JSON, the display form of every non-text value"""
    return encode_json(value, indent=PRETTY_INDENT)


__all__ = ["PRETTY_INDENT", "encode_json", "encode_pretty", "from_python", "to_python"]
