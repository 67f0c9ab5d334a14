"""
LevelFilter - Color Tests
Palette lookup and escape sequence rendering.
"""

import pytest

from levelfilter.components.color import (
    COLOR_PALETTE,
    Attribute,
    color_for_gap,
    render,
)


class TestColorForGap:
    """Palette slots by distance from the top severity."""

    @pytest.mark.parametrize("gap, expected", [
        (0, Attribute.FG_RED),
        (1, Attribute.FG_YELLOW),
        (2, Attribute.FG_GREEN),
        (3, Attribute.FG_BLUE),
    ])
    def test_palette_slots(self, gap, expected):
        assert color_for_gap(gap) == expected

    def test_beyond_palette(self):
        assert color_for_gap(len(COLOR_PALETTE)) == Attribute.RESET
        assert color_for_gap(10) == Attribute.RESET

    def test_negative_gap(self):
        assert color_for_gap(-1) == Attribute.RESET


class TestRender:
    """render() wraps text and bytes."""

    def test_text(self):
        assert render(Attribute.FG_YELLOW, "[WARN] x\n") == "\x1b[33m[WARN] x\n\x1b[0m"

    def test_bytes(self):
        assert render(Attribute.FG_BLUE, b"[DEBUG] x") == b"\x1b[34m[DEBUG] x\x1b[0m"

    def test_bytearray_becomes_bytes(self):
        assert render(Attribute.FG_RED, bytearray(b"x")) == b"\x1b[31mx\x1b[0m"

    def test_reset_is_unwrapped(self):
        assert render(Attribute.RESET, "plain") == "plain"
        assert render(Attribute.RESET, b"plain") == b"plain"
