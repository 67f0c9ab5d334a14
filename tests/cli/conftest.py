"""
LevelFilter - CLI Tests
Shared fixtures: isolated config loader, temp configs and log files
"""

import json

import pytest

from levelfilter.configuration.config_file_loader import ConfigFileLoader


@pytest.fixture(autouse=True)
def _isolated_cli(tmp_path, monkeypatch):
    """Run each CLI test in an empty working dir with a fresh loader."""
    saved = (
        ConfigFileLoader._config,
        ConfigFileLoader._config_path,
        ConfigFileLoader._user_config_path,
    )
    ConfigFileLoader._config = None
    ConfigFileLoader._config_path = "configs/app_config.json"
    ConfigFileLoader._user_config_path = "user_configs/app_config.json"
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LEVELFILTER_MIN_LEVEL", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    yield
    (
        ConfigFileLoader._config,
        ConfigFileLoader._config_path,
        ConfigFileLoader._user_config_path,
    ) = saved


@pytest.fixture
def config_file(tmp_path):
    """App config with a four level list and min level INFO."""
    path = tmp_path / "cli_config.json"
    path.write_text(json.dumps({
        "level_filter": {
            "levels": ["DEBUG", "INFO", "WARN", "ERROR"],
            "min_level": "INFO",
            "colorize": True,
        }
    }), encoding="utf-8")
    return path


@pytest.fixture
def log_file(tmp_path):
    """Tagged log lines in order."""
    path = tmp_path / "app.log"
    path.write_text(
        "[WARN] foo\n"
        "[ERROR] bar\n"
        "[DEBUG] baz\n"
        "[WARN] buzz\n"
        "untagged\n",
        encoding="utf-8"
    )
    return path
