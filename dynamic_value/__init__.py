# dynamic_value/__init__.py

"""Dynamic Value Package

A single dynamically-typed value for JSON-like data: indexing, persistent
field updates, coercions, merging, and conversion to and from JSON, CSV and
HTTP responses.
"""

# Local imports
# Codecs and collaborators
from dynamic_value.adapters.codecs import parse_csv
from dynamic_value.adapters.codecs import parse_json
from dynamic_value.adapters.codecs import read_csv_file
from dynamic_value.adapters.codecs import read_json_file
from dynamic_value.adapters.codecs import serialize_csv
from dynamic_value.adapters.codecs import serialize_csv_named
from dynamic_value.adapters.codecs import serialize_json
from dynamic_value.adapters.codecs import write_csv_file
from dynamic_value.adapters.codecs import write_json_file
from dynamic_value.adapters.http import HttpClient

# Value model
from dynamic_value.core.domain import Array
from dynamic_value.core.domain import Boolean
from dynamic_value.core.domain import DynamicValueError
from dynamic_value.core.domain import IndexOutOfRange
from dynamic_value.core.domain import KeyNotFound
from dynamic_value.core.domain import NULL
from dynamic_value.core.domain import Null
from dynamic_value.core.domain import Number
from dynamic_value.core.domain import Object
from dynamic_value.core.domain import ParseError
from dynamic_value.core.domain import Text
from dynamic_value.core.domain import TypeMismatch
from dynamic_value.core.domain import Value
from dynamic_value.core.domain import ValueKind

# Operators
from dynamic_value.core.domain import absolute
from dynamic_value.core.domain import add
from dynamic_value.core.domain import compare
from dynamic_value.core.domain import divide
from dynamic_value.core.domain import from_dict
from dynamic_value.core.domain import from_list
from dynamic_value.core.domain import from_python
from dynamic_value.core.domain import get
from dynamic_value.core.domain import get_path
from dynamic_value.core.domain import lookup
from dynamic_value.core.domain import merge
from dynamic_value.core.domain import merge_all
from dynamic_value.core.domain import modify_field
from dynamic_value.core.domain import multiply
from dynamic_value.core.domain import negate
from dynamic_value.core.domain import quot_rem
from dynamic_value.core.domain import reciprocal
from dynamic_value.core.domain import set_field
from dynamic_value.core.domain import signum
from dynamic_value.core.domain import subtract
from dynamic_value.core.domain import to_boolean
from dynamic_value.core.domain import to_elems
from dynamic_value.core.domain import to_integer
from dynamic_value.core.domain import to_keys
from dynamic_value.core.domain import to_list
from dynamic_value.core.domain import to_number
from dynamic_value.core.domain import to_python
from dynamic_value.core.domain import to_text

# Configuration
from dynamic_value.infrastructure.config import ConfigLoader
from dynamic_value.infrastructure.config import get_config

# Version info
__version__ = "0.1.0"

__all__: list[str] = [
    # Values
    "Value",
    "ValueKind",
    "Object",
    "Array",
    "Text",
    "Number",
    "Boolean",
    "Null",
    "NULL",
    # Errors
    "DynamicValueError",
    "TypeMismatch",
    "ParseError",
    "KeyNotFound",
    "IndexOutOfRange",
    # Construction
    "from_list",
    "from_dict",
    "from_python",
    "to_python",
    # Indexing and updates
    "get",
    "get_path",
    "lookup",
    "set_field",
    "modify_field",
    # Coercion
    "to_number",
    "to_integer",
    "to_text",
    "to_boolean",
    "to_list",
    "to_keys",
    "to_elems",
    # Arithmetic and ordering
    "add",
    "subtract",
    "multiply",
    "divide",
    "negate",
    "absolute",
    "signum",
    "reciprocal",
    "quot_rem",
    "compare",
    # Merge
    "merge",
    "merge_all",
    # Codecs
    "parse_json",
    "serialize_json",
    "read_json_file",
    "write_json_file",
    "parse_csv",
    "serialize_csv",
    "serialize_csv_named",
    "read_csv_file",
    "write_csv_file",
    # Collaborators and configuration
    "HttpClient",
    "ConfigLoader",
    "get_config",
    # Version
    "__version__",
]
