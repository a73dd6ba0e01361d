# dynamic_value/infrastructure/config/_loader.py

"""Main configuration loader using Pydantic models"""

# Standard library imports
from logging import getLogger

# Local imports
from dynamic_value.core.types.json import JSONDict
from dynamic_value.infrastructure.config._models import AppConfig
from dynamic_value.infrastructure.config._models import CsvConfig
from dynamic_value.infrastructure.config._models import HttpConfig
from dynamic_value.infrastructure.config._models import JsonConfig
from dynamic_value.infrastructure.config._models import LoggingConfig

logger = getLogger(__name__)


class ConfigLoader:
    """Configuration loader exposing each config section"""

    def __init__(self, config_path: str | None = None):
        """Initialize configuration loader

        Args:
            config_path: Path to JSON configuration file, None for auto-detection
        """
        self.config_path = config_path
        self._app_config = AppConfig.load(config_path)
        logger.debug(f"Loaded configuration from {config_path or 'defaults'}")

    @property
    def config(self) -> JSONDict:
        """Full config as a plain dict"""
        return self._app_config.to_dict()

    @property
    def json(self) -> JsonConfig:
        """JSON codec configuration"""
        return self._app_config.json_codec

    @property
    def csv(self) -> CsvConfig:
        """CSV codec configuration"""
        return self._app_config.csv

    @property
    def http(self) -> HttpConfig:
        """HTTP client configuration"""
        return self._app_config.http

    @property
    def logging(self) -> LoggingConfig:
        """Logging configuration"""
        return self._app_config.logging


# Global default instance
_default_config: ConfigLoader | None = None


def get_config(config_path: str | None = None) -> ConfigLoader:
    """Get configuration loader instance

    Args:
        config_path: Path to configuration file, None for default

    Returns:
        ConfigLoader instance
    """
    global _default_config

    if config_path:
        return ConfigLoader(config_path)

    if _default_config is None:
        _default_config = ConfigLoader(None)

    return _default_config


def reset_config(config_path: str | None = None) -> ConfigLoader:
    """Replace the cached default instance

    Args:
        config_path: Path to configuration file, None for auto-detection

    Returns:
        The new default ConfigLoader
    """
    global _default_config

    _default_config = ConfigLoader(config_path)
    return _default_config
