# dynamic_value/core/types/__init__.py

"""Type definitions for dynamic_value

Pure type aliases and protocols with no implementation logic.
"""

# Local imports
from dynamic_value.core.types.json import JSONDict
from dynamic_value.core.types.json import JSONList
from dynamic_value.core.types.json import JSONPrimitive
from dynamic_value.core.types.json import JSONType
from dynamic_value.core.types.protocols import CSVRow
from dynamic_value.core.types.protocols import CSVWriter
from dynamic_value.core.types.protocols import Headers
from dynamic_value.core.types.protocols import HttpTransport

__all__ = [
    # JSON
    "JSONDict",
    "JSONList",
    "JSONPrimitive",
    "JSONType",
    # Protocols
    "CSVRow",
    "CSVWriter",
    "Headers",
    "HttpTransport",
]
