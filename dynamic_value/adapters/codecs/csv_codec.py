# dynamic_value/adapters/codecs/csv_codec.py

"""CSV text and file conversion for dynamic values

Rows read without a header become arrays of fields; rows read with a header
become objects keyed by column name. Fields are sniffed one by one: numbers,
then true/false, then null, and anything else stays text.
"""

# Standard library imports
from collections.abc import Iterable
from csv import Error as CSVError
from csv import reader
from csv import writer
from io import StringIO
from logging import getLogger
from pathlib import Path

# Local imports
from dynamic_value.core.domain.coercion import NUMERIC_PREFIX
from dynamic_value.core.domain.conversion import encode_json
from dynamic_value.core.domain.exceptions import ParseError
from dynamic_value.core.domain.exceptions import TypeMismatch
from dynamic_value.core.domain.value import Array
from dynamic_value.core.domain.value import Boolean
from dynamic_value.core.domain.value import NULL
from dynamic_value.core.domain.value import Null
from dynamic_value.core.domain.value import Number
from dynamic_value.core.domain.value import Object
from dynamic_value.core.domain.value import Text
from dynamic_value.core.domain.value import Value
from dynamic_value.core.types.protocols import CSVRow
from dynamic_value.core.types.protocols import CSVWriter
from dynamic_value.infrastructure.config import get_config

logger = getLogger(__name__)


# ============================================================================
# Fields
# ============================================================================


def decode_field(raw: str) -> Value:
    """Interpret a single CSV field"""
    stripped = raw.strip()
    if NUMERIC_PREFIX.fullmatch(stripped):
        return Number(float(stripped))
    match stripped.lower():
        case "true":
            return Boolean(True)
        case "false":
            return Boolean(False)
        case "null":
            return NULL
        case _:
            return Text(raw)


def encode_field(value: Value) -> str:
    """Text is written raw, everything else as compact JSON"""
    if isinstance(value, Text):
        return value.value
    return encode_json(value)


def _record_fields(row: Value) -> CSVRow:
    match row:
        case Object(fields=fields):
            return [encode_field(item) for item in fields.values()]
        case Array(items=items):
            return [encode_field(item) for item in items]
        case Null():
            return []
        case _:
            return [encode_field(row)]


# ============================================================================
# Reading
# ============================================================================


def _read_records(text: str) -> list[list[str]]:
    csv_config = get_config().csv
    try:
        records = list(
            reader(StringIO(text, newline=""), delimiter=csv_config.delimiter, strict=True)
        )
    except CSVError as e:
        logger.debug(f"CSV parse failed: {e}")
        raise ParseError(f"unable to parse CSV: {e}") from e
    # Blank lines come back as empty records
    return [record for record in records if record]


def parse_csv(text: str, has_header: bool = False) -> list[Value]:
    """Parse CSV text into rows

    Args:
        text: CSV document
        has_header: If True, the first record names the columns and each
            row becomes an object; otherwise each row is an array

    Returns:
        One value per data row

    Raises:
        ParseError: If the CSV is malformed or a row does not match the header
    """
    records = _read_records(text)
    if not has_header:
        return [Array([decode_field(raw) for raw in record]) for record in records]

    if not records:
        return []

    header, *body = records
    rows: list[Value] = []
    for line_number, record in enumerate(body, start=2):
        if len(record) != len(header):
            raise ParseError(
                f"unable to parse CSV: record {line_number} has {len(record)} fields, "
                f"header has {len(header)}"
            )
        rows.append(Object({name: decode_field(raw) for name, raw in zip(header, record)}))
    logger.debug(f"Parsed {len(rows)} named CSV rows with columns {header}")
    return rows


# ============================================================================
# Writing
# ============================================================================


def _new_writer(buffer: StringIO) -> CSVWriter:
    csv_config = get_config().csv
    return writer(
        buffer, delimiter=csv_config.delimiter, lineterminator=csv_config.line_terminator
    )


def serialize_csv(rows: Iterable[Value]) -> str:
    """Render rows as CSV without a header

    Objects contribute their values, arrays their elements, scalars a single
    field and Null an empty record.
    """
    buffer = StringIO()
    csv_writer = _new_writer(buffer)
    for row in rows:
        csv_writer.writerow(_record_fields(row))
    return buffer.getvalue()


def serialize_csv_named(rows: Iterable[Value]) -> str:
    """Render objects as CSV with a header taken from the first row's keys

    Keys missing from a later row give empty fields; extra keys are dropped.

    Raises:
        TypeMismatch: If any row is not an object
    """
    rows = list(rows)
    if not rows:
        return ""

    buffer = StringIO()
    csv_writer = _new_writer(buffer)
    header: list[str] | None = None
    for row in rows:
        if not isinstance(row, Object):
            raise TypeMismatch("cannot make a CSV row out of a non-object")
        if header is None:
            header = list(row.fields)
            csv_writer.writerow(header)
        csv_writer.writerow(
            [encode_field(row.fields[name]) if name in row.fields else "" for name in header]
        )
    return buffer.getvalue()


# ============================================================================
# Files
# ============================================================================


def read_csv_file(path: str | Path, has_header: bool = False) -> list[Value]:
    """Same as ``parse_csv`` but from a file"""
    logger.debug(f"Reading CSV from {path}")
    with open(path, "r", encoding=get_config().csv.encoding, newline="") as f:
        return parse_csv(f.read(), has_header=has_header)


def write_csv_file(path: str | Path, rows: Iterable[Value], named: bool = False) -> None:
    """Write rows to a CSV file, with a header when ``named``"""
    logger.debug(f"Writing CSV to {path}")
    text = serialize_csv_named(rows) if named else serialize_csv(rows)
    with open(path, "w", encoding=get_config().csv.encoding, newline="") as f:
        f.write(text)
