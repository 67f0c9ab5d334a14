"""
LevelFilter - stdlib logging bridge
Feeds Python logging records through a LevelFilter

The filter only understands a leading [LEVEL] tag, so records are
formatted as "[LEVELNAME] message" before they reach it.
"""

import logging
from typing import Dict, Optional

from levelfilter.components.level_filter import LevelFilter
from levelfilter.framework.types.log_level_types import LogLevel


class BracketLevelFormatter(logging.Formatter):
    """Formats records as "[LEVELNAME] message" (optionally renamed levels)"""

    def __init__(self, level_names: Optional[Dict[str, LogLevel]] = None):
        super().__init__()
        self.level_names = dict(level_names or {})

    def format(self, record: logging.LogRecord) -> str:
        level = self.level_names.get(record.levelname, record.levelname)
        formatted = f"[{level}] {record.getMessage()}"
        if record.exc_info:
            formatted += "\n" + self.formatException(record.exc_info)
        return formatted


def attach_level_filter(
    logger: logging.Logger,
    level_filter: LevelFilter,
    level_names: Optional[Dict[str, LogLevel]] = None
) -> logging.StreamHandler:
    """
    Route a logger's output through a level filter.

    Args:
        logger: Logger to attach to
        level_filter: Filter that receives the formatted lines
        level_names: Optional stdlib level name -> tag label mapping,
                     e.g. STDLIB_LEVEL_NAMES

    Returns:
        The attached handler (pass to logger.removeHandler to detach)
    """
    handler = logging.StreamHandler(level_filter)
    handler.setFormatter(BracketLevelFormatter(level_names))
    logger.addHandler(handler)
    return handler
