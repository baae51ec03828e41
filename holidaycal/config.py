"""Settings management using Pydantic for type validation and configuration."""

import logging
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError
from .store import DEFAULT_STORE_KEY

logger = logging.getLogger(__name__)

VALID_RENDERERS = ("console", "html")


class HolidayCalSettings(BaseSettings):
    """Application settings with environment variable support."""

    # Holiday data
    data_file: Optional[Path] = Field(
        default=None, description="JSON/YAML state snapshot holding the holiday records"
    )
    store_key: str = Field(
        default=DEFAULT_STORE_KEY, description="Dotted key path of the records in the snapshot"
    )

    # Year selector
    year_span: int = Field(
        default=5, ge=0, description="Years offered on each side of the current year"
    )

    # Display
    renderer: str = Field(default="console", description="Output renderer: console or html")
    console_width: int = Field(default=70, ge=35, description="Console display width")
    highlight_color: str = Field(default="#f48665", description="Holiday highlight colour (HTML)")

    # Logging
    log_level: str = Field(default="INFO", description="Root log level")

    model_config = SettingsConfigDict(
        env_prefix="HOLIDAYCAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("renderer")
    @classmethod
    def _validate_renderer(cls, value: str) -> str:
        value = value.lower()
        if value not in VALID_RENDERERS:
            raise ValueError(f"renderer must be one of {', '.join(VALID_RENDERERS)}")
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()


def _read_config_file(path: Path) -> dict[str, Any]:
    """Read a YAML config file into a mapping."""
    try:
        with path.open(encoding="utf-8") as f:
            config_data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Config file {path} is not valid YAML: {e}") from e

    # safe_load returns None for empty files
    if config_data is None:
        return {}
    if not isinstance(config_data, dict):
        raise ConfigurationError("Config file must contain a mapping at top level")
    return config_data


def load_settings(
    path: Optional[Union[str, Path]] = None, **overrides: Any
) -> HolidayCalSettings:
    """Load settings from defaults, environment, an optional YAML file and overrides.

    Precedence, lowest first: defaults, ``HOLIDAYCAL_*`` environment variables,
    config file values, keyword overrides (``None`` overrides are ignored).

    Args:
        path: Optional YAML config file; a missing file is ignored
        **overrides: Explicit values, typically from the command line

    Returns:
        HolidayCalSettings instance

    Raises:
        ConfigurationError: If the file is unreadable or the values are invalid
    """
    values: dict[str, Any] = {}
    if path:
        p = Path(path)
        if p.exists():
            values.update(_read_config_file(p))
            logger.info(f"Loaded configuration from {p}")
        else:
            logger.info(f"Config file {p} not found; using defaults")

    values.update({k: v for k, v in overrides.items() if v is not None})

    try:
        settings = HolidayCalSettings(**values)
    except ValueError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e

    logger.debug(f"Configuration values: {settings!r}")
    return settings
