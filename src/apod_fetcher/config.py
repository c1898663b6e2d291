"""Configuration loading for apod-fetcher."""

import logging
import os
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from apod_fetcher.exceptions import ConfigError
from schemas.config import ApodConfig

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".apod"
DEFAULT_API_KEY = "DEMO_KEY"


def config_path(home: str | Path | None = None) -> Path | None:
    """Location of the config file, or None when no home directory is known."""
    if home is None:
        home = os.environ.get("HOME")
    if not home:
        return None
    return Path(home) / CONFIG_FILENAME


def load_config(home: str | Path | None = None) -> ApodConfig:
    """Load the user's config file.

    A missing home directory or missing file is not an error; both yield
    the default (empty) config.

    Args:
        home: Home directory to look in. Defaults to $HOME.

    Returns:
        The parsed ApodConfig

    Raises:
        ConfigError: If the file exists but cannot be read or is not a
            valid JSON config object
    """
    path = config_path(home)
    if path is None:
        logger.debug("No home directory set, using default config")
        return ApodConfig()

    try:
        content = path.read_bytes()
    except FileNotFoundError:
        logger.debug(f"No config file at {path}, using default config")
        return ApodConfig()
    except OSError as e:
        raise ConfigError(f"Unable to read config: {e}") from e

    try:
        config = ApodConfig.model_validate_json(content)
    except PydanticValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        detail = f"{location}: {first['msg']}" if location else first["msg"]
        raise ConfigError(f"Unable to parse config {path}: {detail}") from e

    logger.debug(f"Loaded config from {path}")
    return config


def resolve_api_key(config: ApodConfig) -> str:
    """Return the configured API key, falling back to DEMO_KEY with a warning."""
    if config.api_key is None:
        logger.warning(f"No api key found in config. Using {DEFAULT_API_KEY}")
        return DEFAULT_API_KEY
    return config.api_key
