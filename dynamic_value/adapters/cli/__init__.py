# dynamic_value/adapters/cli/__init__.py

"""CLI adapter for dynamic_value"""

# Local imports
from dynamic_value.adapters.cli.main import main
from dynamic_value.adapters.cli.parser import create_argument_parser
from dynamic_value.adapters.cli.parser import format_from_suffix
from dynamic_value.adapters.cli.parser import infer_format

__all__ = [
    "create_argument_parser",
    "format_from_suffix",
    "infer_format",
    "main",
]
