"""
LevelFilter - Level Filter Configuration
Reads the level_filter block of app_config.json

Features:
- Validation: levels list, min_level and colorize types
- Environment overrides: LEVELFILTER_MIN_LEVEL, NO_COLOR
- Factory for LevelFilter instances

Expected structure:
    {
        "level_filter": {
            "levels": ["DEBUG", "WARN", "ERROR"],
            "min_level": "WARN",
            "colorize": true
        }
    }
"""

import os
from typing import Any, Dict, List, Optional

from levelfilter.components.level_filter import LevelFilter
from levelfilter.configuration.config_file_loader import ConfigFileLoader
from levelfilter.framework.exceptions.configuration_errors import LevelFilterConfigurationError
from levelfilter.framework.logging.bootstrap_logger import get_global_logger
from levelfilter.framework.types.log_level_types import LogLevel

vLog = get_global_logger()

ENV_MIN_LEVEL = 'LEVELFILTER_MIN_LEVEL'
ENV_NO_COLOR = 'NO_COLOR'


class LevelFilterConfig:
    """
    Level filter configuration.

    Loaded from ConfigFileLoader unless a config dict is passed in.
    """

    def __init__(self, config_dict: Optional[Dict[str, Any]] = None):
        """
        Initialize level filter config.

        Args:
            config_dict: Full app config (default: loaded via ConfigFileLoader)

        Raises:
            LevelFilterConfigurationError: If required fields missing or invalid
        """
        if config_dict is None:
            config_dict, _ = ConfigFileLoader.get_config()

        self._config = config_dict.get('level_filter', None)
        if self._config is None:
            raise LevelFilterConfigurationError(
                field='',
                reason="Level filter config not found (<<JSON root>>/level_filter). "
                       "Recommendation: see configs/app_config.json for the structure.")

        self._levels = self._validate_levels(self._config.get('levels'))

        # Min level (env override wins, also when the file has none)
        min_level = os.environ.get(ENV_MIN_LEVEL) or self._config.get('min_level')
        if min_level is None:
            raise LevelFilterConfigurationError(
                field='min_level', reason="min_level is required")
        if not isinstance(min_level, str) or not min_level:
            raise LevelFilterConfigurationError(
                field='min_level',
                reason=f"min_level must be a non-empty string, got: {min_level!r}",
                value=min_level)
        self._min_level = min_level

        if self._min_level not in self._levels:
            vLog.warning(
                f"min_level {self._min_level!r} is not one of {self._levels} - "
                f"every known level will be suppressed")

        # Colorize (NO_COLOR convention disables it)
        colorize = self._config.get('colorize', True)
        if not isinstance(colorize, bool):
            raise LevelFilterConfigurationError(
                field='colorize',
                reason=f"colorize must be true/false, got: {type(colorize).__name__}",
                value=colorize)
        if os.environ.get(ENV_NO_COLOR):
            colorize = False
        self._colorize = colorize

    def _validate_levels(self, levels: Any) -> List[LogLevel]:
        """
        Validate the level list.

        Args:
            levels: Raw levels value

        Returns:
            Level list (low to high severity)

        Raises:
            LevelFilterConfigurationError: If not a non-empty list of strings
        """
        if not isinstance(levels, list) or not levels:
            raise LevelFilterConfigurationError(
                field='levels',
                reason="levels must be a non-empty list, low to high severity",
                value=levels)

        for level in levels:
            if not isinstance(level, str) or not level:
                raise LevelFilterConfigurationError(
                    field='levels',
                    reason=f"every level must be a non-empty string, got: {level!r}",
                    value=levels)

        if len(set(levels)) != len(levels):
            vLog.warning(
                f"levels {levels} contain duplicates - ordering of duplicated "
                f"levels is undefined")

        return list(levels)

    # ============================================
    # Public Properties
    # ============================================

    @property
    def levels(self) -> List[LogLevel]:
        """Level list, low to high severity"""
        return list(self._levels)

    @property
    def min_level(self) -> LogLevel:
        """Minimum level allowed through (after env override)"""
        return self._min_level

    @property
    def colorize(self) -> bool:
        """Color passing lines (after NO_COLOR override)"""
        return self._colorize

    # ============================================
    # Factory
    # ============================================

    def create_filter(self, writer: Any) -> LevelFilter:
        """
        Build a LevelFilter from this config.

        Args:
            writer: Underlying sink

        Returns:
            LevelFilter instance
        """
        return LevelFilter(
            levels=self.levels,
            min_level=self._min_level,
            writer=writer,
            colorize=self._colorize,
        )

    def __repr__(self) -> str:
        """Debug representation"""
        return (
            f"LevelFilterConfig("
            f"levels={self._levels}, "
            f"min_level={self._min_level!r}, "
            f"colorize={self._colorize})"
        )
