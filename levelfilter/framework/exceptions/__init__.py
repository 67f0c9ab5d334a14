from .configuration_errors import ConfigurationError, LevelFilterConfigurationError

__all__ = [
    "ConfigurationError",
    "LevelFilterConfigurationError",
]
