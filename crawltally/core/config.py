"""Configuration module for the crawl log summariser.

Provides Pydantic-based configuration management with environment variable
support and field validation.

Example:
    >>> from crawltally.core.config import Settings
    >>> settings = Settings(group_by="host")
    >>> print(settings.output_format)
    'json'
"""

import logging
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

GROUP_BY_CHOICES = ("none", "host", "registered-domain")
OUTPUT_FORMATS = ("json", "table")


class Settings(BaseSettings):
    """crawltally configuration.

    Every field can be set through an environment variable prefixed with
    ``CRAWLTALLY_`` (e.g. ``CRAWLTALLY_GROUP_BY=host``) or a ``.env`` file.

    Attributes:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path for a rotating file log
        group_by: Default grouping (none, host, registered-domain)
        output_format: Default report format (json, table)
        suffix_list_urls: Public suffix list URLs to fetch; empty means the
            snapshot bundled with tldextract is used and nothing is fetched
        suffix_cache_dir: Directory for tldextract's suffix list cache
        include_private_suffixes: Treat PSL private-section entries
            (e.g. blogspot.com) as public suffixes

    Raises:
        ValidationError: If values are invalid

    Example:
        >>> settings = Settings(log_level="debug")
        >>> settings.log_level
        'DEBUG'
    """

    # Logging
    log_level: str = "WARNING"
    log_file: Path | None = None

    # Report defaults
    group_by: str = "none"
    output_format: str = "json"

    # Public suffix lookup
    suffix_list_urls: list[str] = []
    suffix_cache_dir: Path | None = None
    include_private_suffixes: bool = True

    model_config = SettingsConfigDict(
        env_prefix="CRAWLTALLY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls: type["Settings"], v: str) -> str:
        """Validate log_level names a standard logging level.

        Args:
            cls: The Settings class (provided by Pydantic)
            v: Log level name, any case

        Returns:
            Upper-cased log level name

        Raises:
            ValueError: If the name is not a logging level
        """
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"log_level must be a logging level name, got {v!r}")
        return level

    @field_validator("group_by")
    @classmethod
    def validate_group_by(cls: type["Settings"], v: str) -> str:
        """Validate group_by is a supported grouping.

        Raises:
            ValueError: If group_by is not one of GROUP_BY_CHOICES
        """
        value = v.lower()
        if value not in GROUP_BY_CHOICES:
            raise ValueError(
                f"group_by must be one of {', '.join(GROUP_BY_CHOICES)}"
            )
        return value

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls: type["Settings"], v: str) -> str:
        """Validate output_format is a supported report format.

        Raises:
            ValueError: If output_format is not one of OUTPUT_FORMATS
        """
        value = v.lower()
        if value not in OUTPUT_FORMATS:
            raise ValueError(
                f"output_format must be one of {', '.join(OUTPUT_FORMATS)}"
            )
        return value
