from .components.color import Attribute
from .components.level_filter import LevelFilter, build_suppressed_levels, extract_tag
from .components.logging_bridge import BracketLevelFormatter, attach_level_filter
from .configuration.level_filter_config import LevelFilterConfig

__all__ = [
    "Attribute",
    "LevelFilter",
    "build_suppressed_levels",
    "extract_tag",
    "BracketLevelFormatter",
    "attach_level_filter",
    "LevelFilterConfig",
]
