# dynamic_value/infrastructure/logging/__init__.py

"""Logging infrastructure for dynamic_value.

This module provides centralized logging configuration and setup.
"""

# Local imports
from dynamic_value.infrastructure.logging._setup import get_default_log_path
from dynamic_value.infrastructure.logging._setup import log_run_summary
from dynamic_value.infrastructure.logging._setup import set_up_logging as setup_logging

__all__ = ["setup_logging", "get_default_log_path", "log_run_summary"]
