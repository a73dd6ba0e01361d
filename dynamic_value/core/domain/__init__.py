# dynamic_value/core/domain/__init__.py

"""Core domain: the value type, its coercions and its operators"""

# Local imports
from dynamic_value.core.domain.coercion import to_boolean
from dynamic_value.core.domain.coercion import to_integer
from dynamic_value.core.domain.coercion import to_number
from dynamic_value.core.domain.coercion import to_text
from dynamic_value.core.domain.conversion import encode_json
from dynamic_value.core.domain.conversion import from_python
from dynamic_value.core.domain.conversion import to_python
from dynamic_value.core.domain.enums import ValueKind
from dynamic_value.core.domain.exceptions import DynamicValueError
from dynamic_value.core.domain.exceptions import IndexOutOfRange
from dynamic_value.core.domain.exceptions import KeyNotFound
from dynamic_value.core.domain.exceptions import ParseError
from dynamic_value.core.domain.exceptions import TypeMismatch
from dynamic_value.core.domain.operations import absolute
from dynamic_value.core.domain.operations import add
from dynamic_value.core.domain.operations import compare
from dynamic_value.core.domain.operations import divide
from dynamic_value.core.domain.operations import from_dict
from dynamic_value.core.domain.operations import from_list
from dynamic_value.core.domain.operations import get
from dynamic_value.core.domain.operations import get_path
from dynamic_value.core.domain.operations import lookup
from dynamic_value.core.domain.operations import merge
from dynamic_value.core.domain.operations import merge_all
from dynamic_value.core.domain.operations import modify_field
from dynamic_value.core.domain.operations import multiply
from dynamic_value.core.domain.operations import negate
from dynamic_value.core.domain.operations import quot_rem
from dynamic_value.core.domain.operations import reciprocal
from dynamic_value.core.domain.operations import set_field
from dynamic_value.core.domain.operations import signum
from dynamic_value.core.domain.operations import subtract
from dynamic_value.core.domain.operations import to_elems
from dynamic_value.core.domain.operations import to_keys
from dynamic_value.core.domain.operations import to_list
from dynamic_value.core.domain.value import Array
from dynamic_value.core.domain.value import Boolean
from dynamic_value.core.domain.value import NULL
from dynamic_value.core.domain.value import Null
from dynamic_value.core.domain.value import Number
from dynamic_value.core.domain.value import Object
from dynamic_value.core.domain.value import Text
from dynamic_value.core.domain.value import Value

__all__ = [
    # Values
    "Array",
    "Boolean",
    "NULL",
    "Null",
    "Number",
    "Object",
    "Text",
    "Value",
    "ValueKind",
    # Errors
    "DynamicValueError",
    "IndexOutOfRange",
    "KeyNotFound",
    "ParseError",
    "TypeMismatch",
    # Coercion
    "to_boolean",
    "to_integer",
    "to_number",
    "to_text",
    # Conversion
    "encode_json",
    "from_python",
    "to_python",
    # Operators
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
