# dynamic_value/core/domain/enums.py

"""Domain enumerations for dynamic values"""

# Standard library imports
from enum import Enum


class ValueKind(Enum):
    """Variant tag of a dynamic value

    Members are declared in cross-variant sort order: every Object sorts
    before every Array, every Array before every Text, and so on.
    """

    OBJECT = "object"
    ARRAY = "array"
    TEXT = "text"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"

    @property
    def rank(self) -> int:
        """Position of this variant in the cross-variant ordering"""
        return _RANKS[self]


_RANKS: dict[ValueKind, int] = {kind: index for index, kind in enumerate(ValueKind)}
