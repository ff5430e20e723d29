"""
Configuration Management.

Loads overrides from LIGHTWAVE_* environment variables and settings from a
YAML file. Nothing is required: every setting has a default, so the CLI
works against a local server out of the box.

Environment:
    LIGHTWAVE_URL      - Server base URL
    LIGHTWAVE_TIMEOUT  - Request timeout in seconds
    LIGHTWAVE_CONFIG   - Path to the YAML config file

Settings (YAML, default ~/.config/lightwave/config.yaml):
    server   - base_url, timeout
    output   - default output format (json or text)
    logging  - level, format, console and file handlers

Base URL priority:
    1. --base-url command line option
    2. LIGHTWAVE_URL environment variable
    3. server.base_url from the config file
    4. http://localhost:8000/api
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from lightwave.core.config_schema import ConfigSchema
from lightwave.core.exceptions import ConfigurationError

DEFAULT_CONFIG_PATH = Path("~/.config/lightwave/config.yaml")
API_SUFFIX = "/api"


class Settings(BaseSettings):
    """Overrides loaded from the environment."""

    url: str | None = None
    timeout: float | None = None
    config_file: Path | None = Field(
        default=None,
        validation_alias="LIGHTWAVE_CONFIG",
    )

    model_config = SettingsConfigDict(
        env_prefix="LIGHTWAVE_",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached environment settings."""
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid LIGHTWAVE_* environment variable:\n{e}") from e


def load_yaml_config(path: Path) -> dict[str, Any]:
    """Load a YAML configuration file."""
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Cannot read {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Expected a mapping at the top of {path}")
    return data


def resolve_config_path(explicit: Path | None = None) -> Path | None:
    """
    Decide which config file to read.

    An explicitly named file (option or LIGHTWAVE_CONFIG) must exist.
    The default location is only used when present.

    Returns:
        Path to load, or None to run on defaults.
    """
    if explicit is not None:
        return explicit.expanduser()

    env_path = get_settings().config_file
    if env_path is not None:
        return env_path.expanduser()

    default = DEFAULT_CONFIG_PATH.expanduser()
    return default if default.exists() else None


def load_config(path: Path | None = None) -> ConfigSchema:
    """
    Load and validate the configuration.

    Args:
        path: Config file named on the command line, if any.

    Returns:
        Validated ConfigSchema, all defaults when no file applies.

    Raises:
        ConfigurationError: If the file is missing, unreadable or invalid.
    """
    config_path = resolve_config_path(path)
    if config_path is None:
        return ConfigSchema()

    raw = load_yaml_config(config_path)
    try:
        return ConfigSchema(**raw)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration in {config_path}:\n{e}"
        ) from e


def format_base_url(url: str) -> str:
    """Strip trailing slashes and make sure the URL ends with /api."""
    url = url.strip().rstrip("/")
    if url.endswith(API_SUFFIX):
        return url
    return f"{url}{API_SUFFIX}"


def resolve_base_url(url_arg: str | None, config: ConfigSchema) -> str:
    """Pick the server base URL by priority and normalize it."""
    if url_arg:
        return format_base_url(url_arg)

    env_url = get_settings().url
    if env_url:
        return format_base_url(env_url)

    return format_base_url(config.server.base_url)


def resolve_timeout(timeout_arg: float | None, config: ConfigSchema) -> float:
    """Pick the request timeout by the same priority as the base URL."""
    if timeout_arg is not None:
        return timeout_arg

    env_timeout = get_settings().timeout
    if env_timeout is not None:
        return env_timeout

    return config.server.timeout
