"""
LevelFilter - Terminal Color Rendering
SGR display attributes and the severity color palette

Provides:
- Attribute enum (SGR codes used for console output)
- COLOR_PALETTE (top 4 severities, most alarming first)
- render() - wraps text or bytes with an attribute escape sequence

Usage:
    from levelfilter.components.color import Attribute, render

    render(Attribute.FG_RED, "[ERROR] disk full\n")
    # -> "\x1b[31m[ERROR] disk full\n\x1b[0m"
"""

from enum import IntEnum
from typing import List, Union


class Attribute(IntEnum):
    """SGR display attributes (ANSI escape codes)"""
    RESET = 0
    BOLD = 1
    FG_BLACK = 30
    FG_RED = 31
    FG_GREEN = 32
    FG_YELLOW = 33
    FG_BLUE = 34
    FG_GRAY = 90


# Indexed by distance from the highest severity (gap 0 = most severe)
COLOR_PALETTE: List[Attribute] = [
    Attribute.FG_RED,
    Attribute.FG_YELLOW,
    Attribute.FG_GREEN,
    Attribute.FG_BLUE,
]

ESCAPE = '\x1b['
RESET_SEQUENCE = f"{ESCAPE}{int(Attribute.RESET)}m"


def color_for_gap(gap: int) -> Attribute:
    """
    Get palette color for a severity's distance from the top of the list.

    Args:
        gap: Number of positions below the highest severity

    Returns:
        Palette attribute, or Attribute.RESET when the gap has no slot
    """
    if gap < 0 or gap >= len(COLOR_PALETTE):
        return Attribute.RESET
    return COLOR_PALETTE[gap]


def escape_sequence(attribute: Attribute) -> str:
    """Get the escape sequence that switches the terminal to an attribute"""
    return f"{ESCAPE}{int(attribute)}m"


def render(attribute: Attribute, data: Union[str, bytes, bytearray]) -> Union[str, bytes]:
    """
    Wrap data with an attribute's escape sequence.

    Attribute.RESET renders the data unwrapped (default terminal color).
    The result keeps the input type: str in, str out; bytes in, bytes out.

    Args:
        attribute: Display attribute
        data: Text or raw bytes of a log line

    Returns:
        Rendered line
    """
    if attribute == Attribute.RESET:
        return bytes(data) if isinstance(data, bytearray) else data

    prefix = escape_sequence(attribute)
    if isinstance(data, (bytes, bytearray)):
        return prefix.encode('ascii') + bytes(data) + RESET_SEQUENCE.encode('ascii')
    return f"{prefix}{data}{RESET_SEQUENCE}"
