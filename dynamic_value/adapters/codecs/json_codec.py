# dynamic_value/adapters/codecs/json_codec.py

"""JSON text and file conversion for dynamic values"""

# Standard library imports
from json import loads
from logging import getLogger
from pathlib import Path

# Local imports
from dynamic_value.core.domain.conversion import encode_json
from dynamic_value.core.domain.conversion import from_python
from dynamic_value.core.domain.exceptions import ParseError
from dynamic_value.core.domain.value import Value
from dynamic_value.infrastructure.config import get_config

logger = getLogger(__name__)


def _reject_constant(name: str) -> float:
    # json.loads accepts NaN/Infinity by default; they are not JSON
    raise ValueError(f"invalid JSON constant {name}")


def parse_json(text: str) -> Value:
    """Parse JSON text into a value

    Args:
        text: JSON document

    Returns:
        The decoded value; every number becomes a float, and integers too
        large for one become an infinity

    Raises:
        ParseError: If the text is not valid JSON
    """
    try:
        data = loads(text, parse_int=float, parse_constant=_reject_constant)
    except ValueError as e:
        logger.debug(f"JSON parse failed: {e}")
        raise ParseError(f"unable to parse JSON: {e}") from e
    return from_python(data)


def serialize_json(value: Value, indent: int | None = None, compact: bool = False) -> str:
    """Render a value as JSON text

    Args:
        value: Value to render
        indent: Indentation width, defaults to the configured width
        compact: If True, emit a single line with no whitespace

    Returns:
        JSON text
    """
    json_config = get_config().json
    if compact:
        return encode_json(value, ensure_ascii=json_config.ensure_ascii)
    if indent is None:
        indent = json_config.indent
    return encode_json(value, indent=indent, ensure_ascii=json_config.ensure_ascii)


def read_json_file(path: str | Path) -> Value:
    """Same as ``parse_json`` but from a file"""
    logger.debug(f"Reading JSON from {path}")
    return parse_json(Path(path).read_text(encoding="utf-8"))


def write_json_file(path: str | Path, value: Value, indent: int | None = None) -> None:
    """Write a value to a file as pretty-printed JSON"""
    logger.debug(f"Writing JSON to {path}")
    Path(path).write_text(serialize_json(value, indent=indent), encoding="utf-8")
