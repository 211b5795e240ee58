"""Core components for the HubSpot connector."""

from .models import (
    DEFAULT_API_BASE_URL,
    ClientConfig,
    SearchRequest,
    UpdateRequest,
    IntegrationError,
)
from .config_store import (
    get_base_dir,
    config_path,
    save_json,
    load_json,
    load_config,
    save_config,
)

__all__ = [
    "DEFAULT_API_BASE_URL",
    "ClientConfig",
    "SearchRequest",
    "UpdateRequest",
    "IntegrationError",
    "get_base_dir",
    "config_path",
    "save_json",
    "load_json",
    "load_config",
    "save_config",
]
