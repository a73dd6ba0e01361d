# dynamic_value/infrastructure/logging/_setup.py

"""Logging configuration and setup for CLI"""

# Standard library imports
from datetime import datetime
from logging import DEBUG
from logging import FileHandler
from logging import Formatter
from logging import INFO
from logging import StreamHandler
from logging import getLevelNamesMapping
from logging import getLogger
from os import makedirs
from os.path import exists


def get_default_log_path() -> str:
    """Generate default log file path with timestamp"""
    # Create logs directory if it doesn't exist
    log_dir = "logs"
    if not exists(log_dir):
        makedirs(log_dir)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"{log_dir}/dynamic_value_{timestamp}.log"


def set_up_logging(
    log_file: str | None = None,
    log_level: str = "INFO",
    silent: bool = False,
    disable_file_logging: bool = False,
) -> str | None:
    """Configure logging for the application

    Args:
        log_file: Path to log file (auto-generated if None and file logging enabled)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        silent: If True, suppress console output
        disable_file_logging: If True, disable file logging

    Returns:
        Path to log file if file logging is enabled, None otherwise
    """
    # Convert log level string to logging constant
    level = getLevelNamesMapping().get(log_level.upper(), INFO)

    # Configure root logger
    root_logger = getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers
    root_logger.handlers = []

    # Console gets the short format, file gets the logger name as well
    console_formatter = Formatter("%(asctime)s - %(levelname)s - %(message)s")
    file_formatter = Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    # Add console handler unless silent
    if not silent:
        console_handler = StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(console_formatter)
        root_logger.addHandler(console_handler)

    # Add file handler unless disabled
    if not disable_file_logging:
        if log_file is None:
            log_file = get_default_log_path()

        file_handler = FileHandler(log_file)
        file_handler.setLevel(DEBUG)  # Always log debug to file
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)
        # The root level gates the file handler too
        root_logger.setLevel(DEBUG)

        logger = getLogger(__name__)
        logger.info(f"Logging to file: {log_file}")

        return log_file

    return None


def log_run_summary(
    command: str,
    source: str,
    target: str | None,
    record_count: int,
    start_time: float,
    end_time: float,
) -> None:
    """Log a summary of a finished CLI command

    Args:
        command: Name of the CLI command that ran
        source: Input file or URL
        target: Output file, None when written to stdout
        record_count: Number of top-level records handled
        start_time: Processing start time
        end_time: Processing end time
    """
    logger = getLogger(__name__)

    elapsed = end_time - start_time

    summary_lines = [
        "=" * 60,
        f"{command.upper()} COMPLETE",
        "=" * 60,
        f"Source: {source}",
        f"Target: {target or '<stdout>'}",
        f"Records: {record_count:,}",
        f"Elapsed: {elapsed:.3f}s",
        "=" * 60,
    ]

    logger.info("\n".join(summary_lines))
