# dynamic_value/infrastructure/config/_models.py

"""Pydantic models for configuration with validation"""

# Standard library imports
from json import JSONDecodeError
from json import load
from logging import getLogger
from pathlib import Path

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import ValidationError
from pydantic import field_validator

# Local imports
from dynamic_value.core.types.json import JSONDict

logger = getLogger(__name__)


class JsonConfig(BaseModel):
    """JSON codec configuration"""

    indent: int = Field(4, ge=0, description="Indentation used when pretty-printing")
    ensure_ascii: bool = Field(False, description="Escape non-ASCII characters")


class CsvConfig(BaseModel):
    """CSV codec configuration"""

    delimiter: str = Field(",", description="Field separator")
    line_terminator: str = Field("\r\n", description="Record terminator used when writing")
    encoding: str = Field("utf-8", description="Encoding for CSV files")

    @field_validator("delimiter")
    @classmethod
    def validate_delimiter(cls, v: str) -> str:
        """The csv module only accepts a single-character delimiter"""
        if len(v) != 1:
            raise ValueError(f"delimiter must be a single character, got {v!r}")
        return v


class HttpConfig(BaseModel):
    """HTTP collaborator configuration"""

    user_agent: str = Field(
        "dynamic-value", description="User-Agent header sent with every request"
    )
    timeout: float = Field(30.0, gt=0, description="Request timeout in seconds")
    raise_for_status: bool = Field(False, description="Raise on 4xx/5xx responses")


class LoggingConfig(BaseModel):
    """Logging configuration"""

    debug: bool = Field(False, description="Enable debug logging")
    log_file: str | None = Field(None, description="Log file path")


class AppConfig(BaseModel):
    """Root application configuration model"""

    json_codec: JsonConfig = Field(default_factory=JsonConfig, alias="json")
    csv: CsvConfig = Field(default_factory=CsvConfig)
    http: HttpConfig = Field(default_factory=HttpConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def load(cls, config_path: Path | str | None = None) -> "AppConfig":
        """Load configuration from JSON file with defaults

        Args:
            config_path: Path to configuration JSON file

        Returns:
            Validated AppConfig instance
        """
        # Convert to Path if string
        if isinstance(config_path, str):
            config_path = Path(config_path)

        # If no path provided, try to find config.json in current directory
        if config_path is None:
            config_path = Path("config.json")
            if not config_path.exists():
                return cls()

        if not config_path.exists():
            logger.warning(f"Config file {config_path} not found. Using defaults.")
            return cls()

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = load(f)
            return cls.model_validate(data)
        except (OSError, JSONDecodeError, ValidationError) as e:
            logger.warning(f"Failed to load config from {config_path}: {e}. Using defaults.")
            return cls()

    def to_dict(self) -> JSONDict:
        """Convert to dictionary keyed the way the config file is written"""
        return self.model_dump(by_alias=True)
