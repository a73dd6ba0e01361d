# dynamic_value/core/domain/exceptions.py

"""Error taxonomy for dynamic values

Each error also derives from the closest builtin exception so that callers
can catch it with an ordinary ``except TypeError`` / ``except KeyError``.
"""


class DynamicValueError(Exception):
    """Base exception for all dynamic value errors."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail)


class TypeMismatch(DynamicValueError, TypeError):
    """An operand's variant cannot satisfy the requested coercion or operation."""


class ParseError(DynamicValueError, ValueError):
    """External text failed to parse as JSON or CSV."""


class KeyNotFound(DynamicValueError, KeyError):
    """Strict lookup of a key absent from an object."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"no such key: {key!r}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.detail


class IndexOutOfRange(DynamicValueError, IndexError):
    """Strict lookup of an index outside an array or text."""

    def __init__(self, index: int | float):
        self.index = index
        super().__init__(f"no such index: {index}")
