from typing import Any, Dict


class ConfigurationError(Exception):
    """Base class for all configuration errors"""

    def get_context(self) -> Dict[str, Any]:
        """Get error context for logger"""
        return {}


class LevelFilterConfigurationError(ConfigurationError):
    """
    Raised when the level_filter config block is missing or malformed.

    Not raised for a min_level that is absent from the level list -
    that is a valid (block everything) configuration.
    """

    def __init__(
        self,
        field: str,
        reason: str,
        value: Any = None
    ):
        self.field = field
        self.reason = reason
        self.value = value
        message = (
            f"Level Filter Configuration Error - Field 'level_filter.{field}'!\n"
            f"   Reason is: {reason}"
        )

        super().__init__(message)

    def get_context(self) -> Dict[str, Any]:
        return {
            'field': self.field,
            'value': self.value
        }
