"""Tests for the configuration store."""

import json
import pytest

from hubspot_connector.core.models import ClientConfig, IntegrationError
from hubspot_connector.core.config_store import (
    get_base_dir,
    config_path,
    save_json,
    load_json,
    load_config,
    save_config,
)


@pytest.fixture
def temp_home(tmp_path, monkeypatch):
    """Set up a temporary home directory for config storage."""
    monkeypatch.setenv("HUBSPOT_CONNECTOR_HOME", str(tmp_path))
    monkeypatch.delenv("HUBSPOT_API_KEY", raising=False)
    monkeypatch.delenv("HUBSPOT_TIMEOUT", raising=False)
    return tmp_path


def test_get_base_dir_with_env_var(temp_home):
    """Test get_base_dir uses HUBSPOT_CONNECTOR_HOME environment variable."""
    base_dir = get_base_dir()
    assert base_dir == temp_home
    assert base_dir.exists()


def test_get_base_dir_creates_directory(temp_home):
    """Test get_base_dir creates the directory if it doesn't exist."""
    temp_home.rmdir()
    assert not temp_home.exists()

    base_dir = get_base_dir()
    assert base_dir.exists()
    assert base_dir.is_dir()


def test_config_path(temp_home):
    """Test config_path points into the base directory."""
    assert config_path() == temp_home / "config.json"


def test_save_and_load_json(temp_home):
    """Test saving and loading JSON data."""
    data = {"key1": "value1", "key2": 42}

    path = save_json(temp_home / "nested" / "data.json", data)
    assert path.exists()
    assert load_json(path) == data


def test_load_json_missing_file(temp_home):
    """Test load_json raises IntegrationError for a missing file."""
    with pytest.raises(IntegrationError) as exc_info:
        load_json(temp_home / "missing.json")
    assert "Configuration file not found" in str(exc_info.value)


def test_load_json_invalid_json(temp_home):
    """Test load_json raises IntegrationError for invalid JSON."""
    path = temp_home / "bad.json"
    path.write_text("{ invalid json }")

    with pytest.raises(IntegrationError) as exc_info:
        load_json(path)
    assert "Invalid JSON" in str(exc_info.value)


def test_load_json_not_an_object(temp_home):
    """Test load_json rejects JSON that is not an object."""
    path = temp_home / "list.json"
    path.write_text("[1, 2]")

    with pytest.raises(IntegrationError):
        load_json(path)


def test_load_config_from_env_only(temp_home):
    """Test that the environment alone is enough."""
    config = load_config(env={"HUBSPOT_API_KEY": "env-key", "HUBSPOT_TIMEOUT": "2.5"})

    assert config.api_key == "env-key"
    assert config.timeout_seconds == 2.5


def test_load_config_from_file(temp_home):
    """Test loading the stored configuration file."""
    config_path().write_text(json.dumps({"api_key": "file-key", "timeout_seconds": 7}))

    config = load_config(env={})

    assert config.api_key == "file-key"
    assert config.timeout_seconds == 7.0


def test_load_config_env_overrides_file(temp_home):
    """Test that environment values take precedence over the file."""
    config_path().write_text(json.dumps({"api_key": "file-key", "timeout_seconds": 7}))

    config = load_config(env={"HUBSPOT_API_KEY": "env-key"})

    assert config.api_key == "env-key"
    assert config.timeout_seconds == 7.0


def test_load_config_reads_os_environ(temp_home, monkeypatch):
    """Test that os.environ is used by default."""
    monkeypatch.setenv("HUBSPOT_API_KEY", "os-key")
    assert load_config().api_key == "os-key"


def test_load_config_missing_key(temp_home):
    """Test that a missing API key raises IntegrationError."""
    with pytest.raises(IntegrationError) as exc_info:
        load_config(env={})
    assert "API Key is required" in str(exc_info.value)


@pytest.mark.parametrize("timeout", ["abc", "0", "-1"])
def test_load_config_invalid_timeout(temp_home, timeout):
    """Test that an invalid timeout raises IntegrationError."""
    with pytest.raises(IntegrationError) as exc_info:
        load_config(env={"HUBSPOT_API_KEY": "key", "HUBSPOT_TIMEOUT": timeout})
    assert "Invalid timeout" in str(exc_info.value)


def test_save_and_load_config(temp_home):
    """Test that a saved config loads back unchanged."""
    config = ClientConfig(api_key="saved-key", timeout_seconds=3.0)

    path = save_config(config)

    assert path == temp_home / "config.json"
    assert load_config(env={}) == config


def test_load_config_non_string_key_in_file(temp_home):
    """Test that a numeric API key in the config file is rejected."""
    config_path().write_text(json.dumps({"api_key": 12345}))

    with pytest.raises(IntegrationError) as exc_info:
        load_config(env={})
    assert "API Key must be a string!" in str(exc_info.value)
