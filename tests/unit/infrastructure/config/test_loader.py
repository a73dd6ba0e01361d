# tests/unit/infrastructure/config/test_loader.py

"""Test configuration loading and management"""

# Standard library imports
from json import dumps
from logging import WARNING

# Third party imports
from pydantic import ValidationError
import pytest

# Local imports
from dynamic_value.infrastructure.config import AppConfig
from dynamic_value.infrastructure.config import ConfigLoader
from dynamic_value.infrastructure.config import CsvConfig
from dynamic_value.infrastructure.config import get_config
from dynamic_value.infrastructure.config import reset_config


class TestConfigLoader:
    """Test the ConfigLoader class"""

    def test_default_config_values(self):
        """Test that default configuration values are loaded correctly"""
        config = ConfigLoader()

        assert config.json.indent == 4
        assert config.json.ensure_ascii is False
        assert config.csv.delimiter == ","
        assert config.csv.line_terminator == "\r\n"
        assert config.csv.encoding == "utf-8"
        assert config.http.user_agent == "dynamic-value"
        assert config.http.timeout == 30.0
        assert config.http.raise_for_status is False
        assert config.logging.debug is False
        assert config.logging.log_file is None

    def test_custom_config_file(self, tmp_path):
        """Test loading from custom JSON configuration file"""
        config_path = tmp_path / "custom.json"
        config_path.write_text(
            dumps({"json": {"indent": 2}, "http": {"timeout": 5, "user_agent": "probe"}})
        )

        config = ConfigLoader(str(config_path))

        assert config.json.indent == 2
        assert config.http.timeout == 5.0
        assert config.http.user_agent == "probe"
        # Unspecified sections fall back to defaults
        assert config.csv.delimiter == ","

    def test_config_dict_uses_file_keys(self):
        config = ConfigLoader()
        assert set(config.config) == {"json", "csv", "http", "logging"}

    def test_invalid_json_falls_back_to_defaults(self, tmp_path, caplog):
        config_path = tmp_path / "broken.json"
        config_path.write_text("{not json")

        with caplog.at_level(WARNING):
            config = ConfigLoader(str(config_path))

        assert config.json.indent == 4
        assert "Failed to load config" in caplog.text

    def test_invalid_values_fall_back_to_defaults(self, tmp_path, caplog):
        config_path = tmp_path / "invalid.json"
        config_path.write_text(dumps({"http": {"timeout": -1}}))

        with caplog.at_level(WARNING):
            config = ConfigLoader(str(config_path))

        assert config.http.timeout == 30.0
        assert "Failed to load config" in caplog.text

    def test_missing_file_falls_back_to_defaults(self, tmp_path, caplog):
        with caplog.at_level(WARNING):
            config = ConfigLoader(str(tmp_path / "absent.json"))

        assert config.csv.delimiter == ","
        assert "not found" in caplog.text

    def test_config_json_in_working_directory(self, tmp_path, monkeypatch):
        (tmp_path / "config.json").write_text(dumps({"csv": {"delimiter": "\t"}}))
        monkeypatch.chdir(tmp_path)

        assert ConfigLoader().csv.delimiter == "\t"


class TestConfigModels:
    """Test validation on the pydantic models"""

    def test_delimiter_must_be_single_character(self):
        with pytest.raises(ValidationError):
            CsvConfig(delimiter=";;")

    def test_negative_indent_rejected(self):
        with pytest.raises(ValidationError):
            AppConfig.model_validate({"json": {"indent": -1}})

    def test_json_section_alias(self):
        config = AppConfig.model_validate({"json": {"indent": 8}})
        assert config.json_codec.indent == 8
        assert config.to_dict()["json"]["indent"] == 8


class TestGetConfig:
    """Test the cached default instance"""

    def test_default_instance_cached(self):
        assert get_config() is get_config()

    def test_path_gives_fresh_instance(self, tmp_path):
        config_path = tmp_path / "c.json"
        config_path.write_text("{}")
        assert get_config(str(config_path)) is not get_config()

    def test_reset_replaces_default(self, tmp_path):
        config_path = tmp_path / "c.json"
        config_path.write_text(dumps({"json": {"indent": 3}}))
        before = get_config()

        after = reset_config(str(config_path))

        assert after is get_config()
        assert after is not before
        assert get_config().json.indent == 3
