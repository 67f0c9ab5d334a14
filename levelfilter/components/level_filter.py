"""
LevelFilter - Level Filter
Stream wrapper that gates log lines on an embedded [LEVEL] tag

Sits between a logging frontend and its output sink:
- Extracts the first bracketed tag of each line
- Drops lines whose level is below the configured minimum
- Colors passing lines by severity and forwards them to the sink

Once the filter is in use somewhere, the level list and the sink must
not be modified. set_min_level() is the only supported mutation.

Usage:
    import sys
    from levelfilter.components.level_filter import LevelFilter

    level_filter = LevelFilter(
        levels=["DEBUG", "WARN", "ERROR"],
        min_level="WARN",
        writer=sys.stdout,
    )
    level_filter.write("[DEBUG] dropped\n")
    level_filter.write("[ERROR] shown in red\n")
"""

from threading import Lock
from typing import Any, Iterable, List, Optional, Tuple, Union

from levelfilter.components.color import Attribute, color_for_gap, render
from levelfilter.framework.logging.bootstrap_logger import get_global_logger
from levelfilter.framework.types.log_level_types import LogLevel, SuppressedLevels

vLog = get_global_logger()

LineData = Union[str, bytes, bytearray]


def build_suppressed_levels(levels: Iterable[LogLevel], min_level: LogLevel) -> SuppressedLevels:
    """
    Derive the set of levels that must be blocked.

    Walks the level list from lowest to highest and collects every entry
    until the minimum level is reached. If the minimum level is not in
    the list, every entry is collected (nothing passes).

    Args:
        levels: Level list, low to high severity
        min_level: Minimum level allowed through

    Returns:
        Frozen set of suppressed levels
    """
    suppressed = set()
    for level in levels:
        if level == min_level:
            break
        suppressed.add(level)
    return frozenset(suppressed)


def extract_tag(line: LineData) -> Optional[LogLevel]:
    """
    Extract the level tag from a raw log line.

    The tag is the text between the first '[' and the first ']' that
    follows it. Nested or repeated brackets get no special handling.

    Args:
        line: Raw log line (text is inspected as UTF-8 bytes, lone
              surrogates map back to the bytes they escape)

    Returns:
        Tag label, or None if the line carries no bracket pair
    """
    raw = line.encode('utf-8', errors='surrogateescape') if isinstance(line, str) else bytes(line)

    start = raw.find(b'[')
    if start < 0:
        return None
    end = raw.find(b']', start)
    if end < 0:
        return None
    return raw[start + 1:end].decode('utf-8', errors='surrogateescape')


class LevelFilter:
    """
    File-like filter for log lines with a [LEVEL] tag.

    Lines tagged with a suppressed level are discarded. Everything else
    (known levels at or above the minimum, unknown tags, untagged lines)
    is forwarded to the sink, colored by severity.

    The suppressed level set is built lazily on first use, exactly once
    even with concurrent first callers, and rebuilt by set_min_level().
    """

    def __init__(
        self,
        levels: List[LogLevel],
        min_level: LogLevel,
        writer: Any,
        colorize: bool = True
    ):
        """
        Initialize level filter.

        Args:
            levels: Level list in increasing order of severity,
                    e.g. ["DEBUG", "WARN", "ERROR"]
            min_level: Minimum level allowed through
            writer: Underlying sink (anything with a write() method)
            colorize: Wrap passing lines in color escape sequences
        """
        self.levels = levels
        self.min_level = min_level
        self.writer = writer
        self.colorize = colorize

        self._suppressed_levels: SuppressedLevels = frozenset()
        self._initialized = False
        self._init_lock = Lock()

    # ============================================
    # Initialization
    # ============================================

    def initialize(self):
        """
        Build the suppressed level set if not done yet.

        Safe to call redundantly and from several threads: only the first
        call builds the set, all callers return after it is in place.
        """
        if self._initialized:
            return
        with self._init_lock:
            if not self._initialized:
                self._rebuild()
                self._initialized = True

    def _rebuild(self):
        """Recompute the suppressed level set from levels and min_level"""
        self._suppressed_levels = build_suppressed_levels(
            self.levels, self.min_level)
        vLog.debug(
            f"Level filter rebuilt: levels={list(self.levels)} "
            f"min_level={self.min_level!r} "
            f"suppressed={sorted(self._suppressed_levels)}")

    @property
    def suppressed_levels(self) -> SuppressedLevels:
        """Levels currently blocked by this filter"""
        self.initialize()
        return self._suppressed_levels

    # ============================================
    # Filtering
    # ============================================

    def extract_tag(self, line: LineData) -> Optional[LogLevel]:
        """Extract the level tag of a line (see module-level extract_tag)"""
        return extract_tag(line)

    def check(self, line: LineData) -> Tuple[Attribute, bool]:
        """
        Check if a line passes the filter and get its color.

        Args:
            line: Raw log line

        Returns:
            (color, allowed) - suppressed lines return (FG_BLACK, False),
            unknown or missing tags return (RESET, True)
        """
        self.initialize()

        level = self.extract_tag(line)
        if level in self._suppressed_levels:
            return Attribute.FG_BLACK, False

        # Highest severity gets the most alarming color, the next three
        # step down the palette, anything further keeps the default color
        color = Attribute.RESET
        for index, candidate in enumerate(self.levels):
            if candidate == level:
                color = color_for_gap(len(self.levels) - index - 1)
                break
        return color, True

    # ============================================
    # Stream Interface
    # ============================================

    def write(self, data: LineData) -> Any:
        """
        Write one log line through the filter.

        Suppressed lines are dropped but reported as fully written, so the
        caller never sees a short write. Passing lines are rendered and
        handed to the sink; the sink's own return value is returned, which
        counts the rendered length (escape sequences included).

        Args:
            data: Log line (str or bytes)

        Returns:
            Number of units reported written
        """
        color, allowed = self.check(data)
        if not allowed:
            return len(data)

        if not self.colorize:
            color = Attribute.RESET
        return self.writer.write(render(color, data))

    def flush(self):
        """Flush the underlying sink (if it supports flushing)"""
        flush = getattr(self.writer, 'flush', None)
        if flush is not None:
            flush()

    def set_min_level(self, min_level: LogLevel):
        """
        Update the minimum level and rebuild the suppressed level set.

        Takes effect on the very next check(). Not safe to call while
        other threads are writing through this filter.

        Args:
            min_level: New minimum level allowed through
        """
        self.min_level = min_level
        self._rebuild()
        self._initialized = True

    def __repr__(self) -> str:
        """Debug representation"""
        return (
            f"LevelFilter("
            f"levels={list(self.levels)}, "
            f"min_level={self.min_level!r}, "
            f"colorize={self.colorize})"
        )
