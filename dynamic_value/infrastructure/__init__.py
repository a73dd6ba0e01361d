# dynamic_value/infrastructure/__init__.py

"""System infrastructure components for configuration and logging."""

# Local imports
from dynamic_value.infrastructure.config import ConfigLoader
from dynamic_value.infrastructure.config import get_config

__all__ = ["ConfigLoader", "get_config"]
