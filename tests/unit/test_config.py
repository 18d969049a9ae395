"""Unit tests for configuration module."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError
from pydantic_settings import SettingsConfigDict

from crawltally.core.config import Settings


class IsolatedSettings(Settings):
    """Settings that ignore any .env file in the working directory."""

    model_config = SettingsConfigDict(env_file=None)


class TestConfigLoading:
    """Test configuration loading from environment variables."""

    def test_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            settings = IsolatedSettings()

        assert settings.log_level == "WARNING"
        assert settings.log_file is None
        assert settings.group_by == "none"
        assert settings.output_format == "json"
        assert settings.suffix_list_urls == []
        assert settings.suffix_cache_dir is None
        assert settings.include_private_suffixes is True

    def test_config_loads_from_env(self) -> None:
        env_vars = {
            "CRAWLTALLY_LOG_LEVEL": "debug",
            "CRAWLTALLY_LOG_FILE": "/tmp/crawltally.log",
            "CRAWLTALLY_GROUP_BY": "registered-domain",
            "CRAWLTALLY_OUTPUT_FORMAT": "TABLE",
            "CRAWLTALLY_SUFFIX_LIST_URLS": '["https://publicsuffix.org/list/public_suffix_list.dat"]',
            "CRAWLTALLY_SUFFIX_CACHE_DIR": "/tmp/psl",
            "CRAWLTALLY_INCLUDE_PRIVATE_SUFFIXES": "false",
        }

        with patch.dict(os.environ, env_vars, clear=True):
            settings = IsolatedSettings()

        assert settings.log_level == "DEBUG"
        assert settings.log_file == Path("/tmp/crawltally.log")
        assert settings.group_by == "registered-domain"
        assert settings.output_format == "table"
        assert settings.suffix_list_urls == [
            "https://publicsuffix.org/list/public_suffix_list.dat"
        ]
        assert settings.suffix_cache_dir == Path("/tmp/psl")
        assert settings.include_private_suffixes is False


class TestConfigValidation:
    """Test configuration validation rules."""

    @pytest.mark.parametrize(
        ("env_name", "field", "value"),
        [
            ("CRAWLTALLY_LOG_LEVEL", "log_level", "LOUD"),
            ("CRAWLTALLY_GROUP_BY", "group_by", "path"),
            ("CRAWLTALLY_OUTPUT_FORMAT", "output_format", "xml"),
        ],
    )
    def test_rejects_invalid_values(self, env_name: str, field: str, value: str) -> None:
        with patch.dict(os.environ, {env_name: value}, clear=True):
            with pytest.raises(ValidationError) as exc_info:
                IsolatedSettings()

        errors = exc_info.value.errors()
        assert any(error["loc"] == (field,) for error in errors), (
            f"Expected validation error for {field}"
        )

    def test_keyword_arguments_override_env(self) -> None:
        with patch.dict(os.environ, {"CRAWLTALLY_GROUP_BY": "host"}, clear=True):
            settings = IsolatedSettings(group_by="none")

        assert settings.group_by == "none"
