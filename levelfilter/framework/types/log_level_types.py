"""
LevelFilter - Log Level Types
Severity labels and default level sets

A LogLevel is an opaque, case-sensitive label (e.g. "DEBUG", "WARN").
Ordering is never intrinsic - it comes solely from the position of the
label in a configured level list (lowest to highest severity).
"""

from typing import Dict, FrozenSet, List

LogLevel = str

SuppressedLevels = FrozenSet[LogLevel]

# Default level list, low to high urgency
DEFAULT_LEVELS: List[LogLevel] = ["DEBUG", "WARN", "ERROR"]
DEFAULT_MIN_LEVEL: LogLevel = "WARN"

# stdlib logging level names -> bracket tag labels
STDLIB_LEVEL_NAMES: Dict[str, LogLevel] = {
    "WARNING": "WARN",
    "CRITICAL": "ERROR",
}
