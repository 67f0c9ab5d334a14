"""
LevelFilter - Configuration Tests
Shared fixtures: isolated ConfigFileLoader state and temp config files
"""

import json

import pytest

from levelfilter.configuration.config_file_loader import ConfigFileLoader


@pytest.fixture(autouse=True)
def _reset_config_loader(monkeypatch):
    """Ensure ConfigFileLoader cache and paths don't leak between tests."""
    saved = (
        ConfigFileLoader._config,
        ConfigFileLoader._config_path,
        ConfigFileLoader._user_config_path,
    )
    ConfigFileLoader._config = None
    monkeypatch.delenv("LEVELFILTER_MIN_LEVEL", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    yield
    (
        ConfigFileLoader._config,
        ConfigFileLoader._config_path,
        ConfigFileLoader._user_config_path,
    ) = saved


@pytest.fixture
def write_config(tmp_path):
    """Write a JSON config file into tmp_path and return its path."""
    def _write(data, name="app_config.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_config():
    """Valid app config dict."""
    return {
        "level_filter": {
            "levels": ["DEBUG", "WARN", "ERROR"],
            "min_level": "WARN",
            "colorize": True,
        }
    }
