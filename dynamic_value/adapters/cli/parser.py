# dynamic_value/adapters/cli/parser.py

"""Command-line argument parser configuration"""

# Standard library imports
from argparse import ArgumentParser
from pathlib import Path

FORMATS = ("json", "csv")


def format_from_suffix(path: str | None) -> str | None:
    """Data format named by a file suffix, None when unknown"""
    if not path:
        return None
    suffix = Path(path).suffix.lower().lstrip(".")
    return suffix if suffix in FORMATS else None


def infer_format(path: str, explicit: str | None) -> str:
    """Pick the data format from an explicit choice or the file suffix

    Raises:
        ValueError: If neither gives a known format
    """
    inferred = explicit or format_from_suffix(path)
    if inferred:
        return inferred
    raise ValueError(f"cannot infer format of {path!r}; pass --from/--to")


def create_argument_parser() -> ArgumentParser:
    """Create and configure argument parser with all CLI options"""
    parser = ArgumentParser(
        prog="dynamic-value",
        description="Convert, query and fetch JSON and CSV data as dynamic values",
    )

    # Options shared by every command
    parser.add_argument("--config", help="Path to JSON configuration file")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Console logging level (default: DEBUG if logging.debug is configured, else INFO)",
    )
    parser.add_argument(
        "--log-file", help="Also log to this file (default: logging.log_file from the config)"
    )
    parser.add_argument(
        "--silent", action="store_true", help="Suppress console logging (output is still printed)"
    )
    parser.add_argument(
        "--disable-file-logging",
        action="store_true",
        help="Never log to a file, even when --log-file is given",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    convert = commands.add_parser("convert", help="Convert between JSON and CSV")
    convert.add_argument("input", help="Input file")
    convert.add_argument("--output", "-o", help="Output file (default: stdout)")
    convert.add_argument(
        "--from", dest="source_format", choices=FORMATS, help="Input format (default: suffix)"
    )
    convert.add_argument(
        "--to", dest="target_format", choices=FORMATS, help="Output format (default: suffix)"
    )
    convert.add_argument(
        "--header", action="store_true", help="CSV input starts with a header record"
    )

    get = commands.add_parser("get", help="Print the value at a key path of a JSON file")
    get.add_argument("input", help="JSON file")
    get.add_argument("keys", nargs="+", help="Keys or indexes, applied in order")
    get.add_argument(
        "--strict", action="store_true", help="Fail on a missing key instead of printing null"
    )

    fetch = commands.add_parser("fetch", help="HTTP GET a URL and print the body")
    fetch.add_argument("url", help="URL to fetch")
    fetch.add_argument(
        "--json", action="store_true", help="Parse and pretty-print the body as JSON"
    )

    return parser
