"""
LevelFilter - Bootstrap Logger (Factory)
Provides the package logger and its console setup

Library code only fetches the logger; the console handler is installed
by applications (the CLI) via setup_console_logging().

Usage:
    from levelfilter.framework.logging.bootstrap_logger import get_global_logger
    vLog = get_global_logger()
    vLog.info("Config loaded")
"""

import logging
import sys
from datetime import datetime
from typing import Optional

from levelfilter.components.color import Attribute, escape_sequence

LOGGER_NAME = "levelfilter"

# Singleton console handler
_console_handler: Optional[logging.Handler] = None


class ColorCodes:
    """ANSI Color Codes for console output (sequences of color.Attribute)"""
    RED = escape_sequence(Attribute.FG_RED)
    YELLOW = escape_sequence(Attribute.FG_YELLOW)
    BLUE = escape_sequence(Attribute.FG_BLUE)
    GREEN = escape_sequence(Attribute.FG_GREEN)
    GRAY = escape_sequence(Attribute.FG_GRAY)
    BOLD = escape_sequence(Attribute.BOLD)
    RESET = escape_sequence(Attribute.RESET)


class VisualLogFormatter(logging.Formatter):
    """
    Custom Formatter:
    - Colored log levels
    - Relative time (ms since start)
    """

    def __init__(self, start_time: Optional[datetime] = None, use_colors: bool = True):
        super().__init__()
        self.start_time = start_time or datetime.now()
        self.use_colors = use_colors

        # Level -> Color mapping
        self.level_colors = {
            logging.CRITICAL: ColorCodes.RED,
            logging.ERROR: ColorCodes.RED,
            logging.WARNING: ColorCodes.YELLOW,
            logging.INFO: ColorCodes.BLUE,
            logging.DEBUG: ColorCodes.GRAY,
        }

    def _paint(self, color: str, text: str) -> str:
        if not self.use_colors:
            return text
        return f"{color}{text}{ColorCodes.RESET}"

    def format(self, record: logging.LogRecord) -> str:
        """Format log entry"""
        elapsed_ms = int(
            (datetime.fromtimestamp(record.created) - self.start_time).total_seconds() * 1000)

        # Time format: from 1000ms → "Xs XXXms" for better readability
        if elapsed_ms >= 1000:
            seconds = elapsed_ms // 1000
            millis = elapsed_ms % 1000
            time_display = f"{seconds:>3}s {millis:03d}ms"
        else:
            time_display = f"   {elapsed_ms:>3}ms  "

        level_color = self.level_colors.get(record.levelno, ColorCodes.RESET)

        formatted = (
            f"{self._paint(ColorCodes.GRAY, time_display)} - "
            f"{self._paint(level_color, f'{record.levelname:<7}')} - "
            f"{record.getMessage()}"
        )

        if record.exc_info:
            formatted += "\n" + self.formatException(record.exc_info)

        return formatted


def get_global_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """
    Get the package logger.

    Args:
        name: Logger name (default: "levelfilter")

    Returns:
        stdlib Logger instance
    """
    return logging.getLogger(name)


def setup_console_logging(level: str = "INFO", stream=None, use_colors: bool = True) -> logging.Handler:
    """
    Install the colored console handler on the package logger (only once).

    Calling again only updates the level.

    Args:
        level: stdlib level name (DEBUG, INFO, WARNING, ERROR)
        stream: Target stream (default: stderr)
        use_colors: Color the level names

    Returns:
        The console handler
    """
    global _console_handler

    logger = get_global_logger()
    logger.setLevel(level.upper())

    if _console_handler is None:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(VisualLogFormatter(use_colors=use_colors))
        logger.addHandler(handler)
        _console_handler = handler

    return _console_handler
