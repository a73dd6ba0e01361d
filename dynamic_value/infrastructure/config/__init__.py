# dynamic_value/infrastructure/config/__init__.py

"""Configuration infrastructure for dynamic_value.

This module manages configuration loading, validation, and models.
"""

# Local imports
from dynamic_value.infrastructure.config._loader import ConfigLoader
from dynamic_value.infrastructure.config._loader import get_config
from dynamic_value.infrastructure.config._loader import reset_config
from dynamic_value.infrastructure.config._models import AppConfig
from dynamic_value.infrastructure.config._models import CsvConfig
from dynamic_value.infrastructure.config._models import HttpConfig
from dynamic_value.infrastructure.config._models import JsonConfig
from dynamic_value.infrastructure.config._models import LoggingConfig

__all__ = [
    "AppConfig",
    "ConfigLoader",
    "CsvConfig",
    "HttpConfig",
    "JsonConfig",
    "LoggingConfig",
    "get_config",
    "reset_config",
]
