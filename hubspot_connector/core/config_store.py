"""Configuration loading and persistence for the HubSpot connector."""

import json
import logging
import os
from pathlib import Path
from typing import Any, Mapping

from .models import ClientConfig, IntegrationError

logger = logging.getLogger(__name__)

ENV_HOME = "HUBSPOT_CONNECTOR_HOME"
ENV_API_KEY = "HUBSPOT_API_KEY"
ENV_TIMEOUT = "HUBSPOT_TIMEOUT"

CONFIG_FILE_NAME = "config.json"


def get_base_dir() -> Path:
    """
    Get the base directory for storing configuration.

    The directory is determined by:
    1. Environment variable HUBSPOT_CONNECTOR_HOME if set
    2. Otherwise, ~/.hubspot_connector

    The directory is created if it does not exist.

    Returns:
        Path to the base directory
    """
    env_home = os.environ.get(ENV_HOME)
    if env_home:
        base_dir = Path(env_home)
    else:
        base_dir = Path.home() / ".hubspot_connector"

    base_dir.mkdir(parents=True, exist_ok=True)
    return base_dir


def config_path() -> Path:
    """Return the path of the connector's configuration file."""
    return get_base_dir() / CONFIG_FILE_NAME


def save_json(path: Path, data: dict) -> Path:
    """
    Save a dictionary as JSON.

    Args:
        path: Destination file
        data: Dictionary to save

    Returns:
        Path to the saved file

    Raises:
        IntegrationError: If the file cannot be written
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    try:
        with open(path, "w") as f:
            json.dump(data, f, indent=2)
    except OSError as e:
        raise IntegrationError(f"Failed to save JSON to {path}: {e}", cause=e) from e

    logger.debug(f"Saved JSON to {path}")
    return path


def load_json(path: Path) -> dict:
    """
    Load a dictionary from a JSON file.

    Args:
        path: File to read

    Returns:
        The loaded dictionary

    Raises:
        IntegrationError: If the file does not exist or JSON is invalid
    """
    if not path.exists():
        raise IntegrationError(f"Configuration file not found: {path}")

    try:
        with open(path, "r") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise IntegrationError(f"Invalid JSON in {path}: {e}", cause=e) from e
    except OSError as e:
        raise IntegrationError(f"Failed to load JSON from {path}: {e}", cause=e) from e

    if not isinstance(data, dict):
        raise IntegrationError(f"Invalid configuration in {path}: expected a JSON object")

    logger.debug(f"Loaded JSON from {path}")
    return data


def _parse_timeout(value: Any) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError) as e:
        raise IntegrationError(f"Invalid timeout value: {value!r}", cause=e) from e

    if timeout <= 0:
        raise IntegrationError(f"Invalid timeout value: {value!r}")

    return timeout


def load_config(
    path: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> ClientConfig:
    """
    Build a ClientConfig from the environment and the config file.

    Environment variables (HUBSPOT_API_KEY, HUBSPOT_TIMEOUT) take precedence
    over values stored in the config file. A missing config file is not an
    error as long as the environment provides the API key.

    Args:
        path: Config file to read (defaults to config_path())
        env: Environment mapping (defaults to os.environ)

    Returns:
        The resolved ClientConfig

    Raises:
        IntegrationError: If no API key is available or a value is invalid
    """
    if env is None:
        env = os.environ
    if path is None:
        path = config_path()

    data: dict[str, Any] = {}
    if path.exists():
        data = load_json(path)
    else:
        logger.debug(f"No configuration file at {path}")

    if env.get(ENV_API_KEY):
        data["api_key"] = env[ENV_API_KEY]
    if env.get(ENV_TIMEOUT):
        data["timeout_seconds"] = env[ENV_TIMEOUT]

    if data.get("timeout_seconds") is not None:
        data["timeout_seconds"] = _parse_timeout(data["timeout_seconds"])

    return ClientConfig.from_dict(data)


def save_config(config: ClientConfig, path: Path | None = None) -> Path:
    """
    Save a ClientConfig to disk.

    Args:
        config: ClientConfig to save
        path: Destination (defaults to config_path())

    Returns:
        Path to the saved file
    """
    if path is None:
        path = config_path()
    return save_json(path, config.to_dict())
