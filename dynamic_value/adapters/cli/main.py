# dynamic_value/adapters/cli/main.py

"""
Dynamic Value Tool - CLI Main Module

Command-line interface for converting between JSON and CSV, querying JSON
documents and fetching data over HTTP, all through dynamic values.
"""

# Standard library imports
from argparse import Namespace
from logging import getLogger
from time import time

# Local imports
from dynamic_value.adapters.cli.parser import create_argument_parser
from dynamic_value.adapters.cli.parser import format_from_suffix
from dynamic_value.adapters.cli.parser import infer_format
from dynamic_value.adapters.codecs import parse_json
from dynamic_value.adapters.codecs import read_csv_file
from dynamic_value.adapters.codecs import read_json_file
from dynamic_value.adapters.codecs import serialize_csv
from dynamic_value.adapters.codecs import serialize_csv_named
from dynamic_value.adapters.codecs import serialize_json
from dynamic_value.adapters.http import HttpClient
from dynamic_value.core.domain import Array
from dynamic_value.core.domain import DynamicValueError
from dynamic_value.core.domain import Object
from dynamic_value.core.domain import Value
from dynamic_value.core.domain import get_path
from dynamic_value.core.domain import to_elems
from dynamic_value.core.domain import to_text
from dynamic_value.core.types import HttpTransport
from dynamic_value.infrastructure.config import reset_config
from dynamic_value.infrastructure.logging import log_run_summary
from dynamic_value.infrastructure.logging import setup_logging

logger = getLogger(__name__)


def _render(value: Value, target_format: str) -> tuple[str, int]:
    """Render a value in the target format, with the number of records"""
    if target_format == "json":
        return serialize_json(value), len(to_elems(value))

    rows = to_elems(value) if isinstance(value, Array) else [value]
    if rows and all(isinstance(row, Object) for row in rows):
        return serialize_csv_named(rows), len(rows)
    return serialize_csv(rows), len(rows)


def run_convert(args: Namespace) -> str:
    source_format = infer_format(args.input, args.source_format)
    target_format = args.target_format or format_from_suffix(args.output) or source_format
    logger.info(f"Converting {args.input} from {source_format} to {target_format}")

    start_time = time()
    if source_format == "json":
        value = read_json_file(args.input)
    else:
        value = Array(read_csv_file(args.input, has_header=args.header))

    text, record_count = _render(value, target_format)
    if args.output:
        with open(args.output, "w", encoding="utf-8", newline="") as f:
            f.write(text)

    log_run_summary("convert", args.input, args.output, record_count, start_time, time())
    return "" if args.output else text


def run_get(args: Namespace) -> str:
    document = read_json_file(args.input)
    return to_text(get_path(document, args.keys, strict=args.strict))


def fetch_text(client: HttpTransport, url: str, as_json: bool = False) -> str:
    """GET a URL through ``client``, re-rendering the body when it is JSON

    Raises:
        ParseError: If ``as_json`` is set and the body is not valid JSON
    """
    body = client.get(url)
    if as_json:
        return serialize_json(parse_json(body))
    return body


def run_fetch(args: Namespace) -> str:
    with HttpClient() as client:
        return fetch_text(client, args.url, as_json=args.json)


COMMANDS = {
    "convert": run_convert,
    "get": run_get,
    "fetch": run_fetch,
}


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point"""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    # Config first: its logging section supplies defaults for the logging options
    logging_config = reset_config(args.config).logging
    log_file = args.log_file or logging_config.log_file
    log_level = args.log_level or ("DEBUG" if logging_config.debug else "INFO")

    setup_logging(
        log_file=log_file,
        log_level=log_level,
        silent=args.silent,
        disable_file_logging=args.disable_file_logging or log_file is None,
    )

    try:
        output = COMMANDS[args.command](args)
    except (DynamicValueError, ValueError, OSError) as e:
        logger.error(f"{args.command} failed: {e}")
        raise SystemExit(1) from e

    if output:
        print(output, end="" if output.endswith("\n") else "\n")
