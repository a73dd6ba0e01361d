# dynamic_value/core/domain/value.py

"""The dynamic value type

A value is one of six immutable variants. Containers never expose their
storage for mutation: ``Object`` keeps a read-only view over a private dict
and ``Array`` keeps a tuple, so every "update" builds a new value that shares
the untouched children with the old one.

Ordering is total across variants (Object < Array < Text < Number < Boolean
< Null) so values can be sorted and deduplicated regardless of kind.
"""

# Standard library imports
from collections.abc import Iterator
from collections.abc import Mapping
from collections.abc import Sequence
from dataclasses import dataclass
from dataclasses import field
from math import inf
from math import isnan
from types import MappingProxyType
from typing import ClassVar

# Local imports
from dynamic_value.core.domain.enums import ValueKind


class BaseValue:
    """Behaviour shared by every variant"""

    __slots__ = ()

    kind: ClassVar[ValueKind]

    # Indexing never raises for a missing position, so the legacy
    # __getitem__ iteration protocol would never terminate.
    __iter__ = None

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BaseValue):
            return NotImplemented
        return order_key(self) < order_key(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, BaseValue):
            return NotImplemented
        return order_key(self) <= order_key(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, BaseValue):
            return NotImplemented
        return order_key(self) > order_key(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, BaseValue):
            return NotImplemented
        return order_key(self) >= order_key(other)

    def __getitem__(self, key: object) -> "Value":
        """``value[key]`` is the lenient indexing operator"""
        # Local imports
        from dynamic_value.core.domain.operations import get

        return get(self, key)

    def __bool__(self) -> bool:
        # Local imports
        from dynamic_value.core.domain.coercion import to_boolean

        return to_boolean(self)

    def __str__(self) -> str:
        # Local imports
        from dynamic_value.core.domain.coercion import to_text

        return to_text(self)


@dataclass(frozen=True, slots=True, eq=False)
class Object(BaseValue):
    """Mapping from text keys to values"""

    fields: Mapping[str, "Value"] = field(default_factory=dict)

    kind: ClassVar[ValueKind] = ValueKind.OBJECT

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Object):
            return NotImplemented
        return dict(self.fields) == dict(other.fields)

    def __hash__(self) -> int:
        return hash(frozenset(self.fields.items()))

    def __len__(self) -> int:
        return len(self.fields)

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def __contains__(self, key: object) -> bool:
        return key in self.fields

    def __repr__(self) -> str:
        return f"Object({dict(self.fields)!r})"


@dataclass(frozen=True, slots=True)
class Array(BaseValue):
    """Ordered sequence of values"""

    items: Sequence["Value"] = ()

    kind: ClassVar[ValueKind] = ValueKind.ARRAY

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator["Value"]:
        return iter(self.items)

    def __contains__(self, item: object) -> bool:
        return item in self.items


@dataclass(frozen=True, slots=True)
class Text(BaseValue):
    value: str = ""

    kind: ClassVar[ValueKind] = ValueKind.TEXT


@dataclass(frozen=True, slots=True, eq=False)
class Number(BaseValue):
    """A number; integral or not, every number is stored as a float

    Integers too large for a float become an infinity of the same sign. NaN
    equals itself and sorts after every other number.
    """

    value: float = 0.0

    kind: ClassVar[ValueKind] = ValueKind.NUMBER

    def __post_init__(self) -> None:
        try:
            number = float(self.value)
        except OverflowError:
            number = inf if self.value > 0 else -inf
        object.__setattr__(self, "value", number)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return _number_key(self.value) == _number_key(other.value)

    def __hash__(self) -> int:
        return hash(_number_key(self.value))


@dataclass(frozen=True, slots=True)
class Boolean(BaseValue):
    value: bool = False

    kind: ClassVar[ValueKind] = ValueKind.BOOLEAN

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", bool(self.value))


@dataclass(frozen=True, slots=True)
class Null(BaseValue):
    """Absence of a value, JSON ``null``"""

    kind: ClassVar[ValueKind] = ValueKind.NULL


type Value = Object | Array | Text | Number | Boolean | Null

NULL = Null()
TRUE = Boolean(True)
FALSE = Boolean(False)

type OrderKey = tuple[int, object]


def _number_key(number: float) -> tuple[bool, float]:
    # NaN takes a fixed place after every other number
    if isnan(number):
        return (True, 0.0)
    return (False, number)


def order_key(value: BaseValue) -> OrderKey:
    """Build a sort key implementing the total structural ordering

    The variant rank comes first, so payloads of different kinds are never
    compared with each other.
    """
    match value:
        case Object(fields=fields):
            payload: object = tuple(sorted((k, order_key(v)) for k, v in fields.items()))
        case Array(items=items):
            payload = tuple(order_key(item) for item in items)
        case Text(value=text):
            payload = text
        case Number(value=number):
            payload = _number_key(number)
        case Boolean(value=flag):
            payload = flag
        case _:
            payload = ()
    return (value.kind.rank, payload)


__all__ = [
    "Array",
    "BaseValue",
    "Boolean",
    "FALSE",
    "NULL",
    "Null",
    "Number",
    "Object",
    "OrderKey",
    "TRUE",
    "Text",
    "Value",
    "order_key",
]
