import json
from pathlib import Path
from threading import Lock
from typing import Any, Dict, Optional, Tuple

from levelfilter.framework.exceptions.configuration_errors import ConfigurationError
from levelfilter.framework.logging.bootstrap_logger import get_global_logger

vLog = get_global_logger()


class ConfigFileLoader:
    """
    Simple loader for program main configuration: app_config.json
    """

    _config: Optional[Dict[str, Any]] = None
    _config_path: Optional[str] = "configs/app_config.json"
    _user_config_path: Optional[str] = "user_configs/app_config.json"
    _lock = Lock()

    @staticmethod
    def initialize(config_path: str, user_config_path: Optional[str] = None):
        """Point the loader at a config file and drop any cached config."""
        with ConfigFileLoader._lock:
            ConfigFileLoader._config_path = config_path
            if user_config_path is not None:
                ConfigFileLoader._user_config_path = user_config_path
            ConfigFileLoader._config = None

    @staticmethod
    def get_config() -> Tuple[Dict[str, Any], bool]:
        """
        Returns the configuration and whether it was loaded during this call.

        Loads the config once and caches it. The boolean indicates if the config
        was freshly loaded (`True`) or returned from cache (`False`).

        Returns:
            Tuple[Dict[str, Any], bool]: (config_dict, was_first_load)
        """
        with ConfigFileLoader._lock:
            was_first_load = False

            if ConfigFileLoader._config is None:
                ConfigFileLoader._config = ConfigFileLoader._load()
                was_first_load = True

            return ConfigFileLoader._config, was_first_load

    @staticmethod
    def reload() -> Dict[str, Any]:
        """Force reload of config."""
        with ConfigFileLoader._lock:
            ConfigFileLoader._config = ConfigFileLoader._load()
            return ConfigFileLoader._config

    @staticmethod
    def _load() -> Dict[str, Any]:
        """
        Load configuration with user override support.

        Loads base config from configs/app_config.json and optionally
        merges user overrides from user_configs/app_config.json.

        Returns:
            Merged configuration dictionary
        """
        if ConfigFileLoader._config_path is None:
            raise RuntimeError(
                "ConfigFileLoader not initialized. Call initialize(path).")

        base_config = ConfigFileLoader._read_json(ConfigFileLoader._config_path)
        vLog.debug(f"Loaded config: {ConfigFileLoader._config_path}")

        # Try to load user override configuration
        user_config_path = ConfigFileLoader._user_config_path
        if user_config_path and Path(user_config_path).exists():
            user_override = ConfigFileLoader._read_json(user_config_path)
            merged_config = ConfigFileLoader._deep_merge(
                base_config, user_override)
            vLog.debug(f"Merged user config: {user_config_path}")
            return merged_config

        # No user config - return base config
        return base_config

    @staticmethod
    def _read_json(path: str) -> Dict[str, Any]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except FileNotFoundError:
            raise FileNotFoundError(
                f"Config file not found: {path}\n"
                f"   Please ensure the file exists or pass --config."
            )
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in config file: {path}\n"
                f"   Error: {e}"
            )

    @staticmethod
    def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """
        Deep merge override dict into base dict.

        Args:
            base: Base configuration dictionary
            override: Override configuration dictionary

        Returns:
            Merged configuration dictionary
        """
        result = base.copy()

        for key, value in override.items():
            if (
                key in result and
                isinstance(result[key], dict) and
                isinstance(value, dict)
            ):
                # Recursive merge for nested dicts
                result[key] = ConfigFileLoader._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
