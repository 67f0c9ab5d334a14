"""
LevelFilter - Level Filter Tests
Shared fixtures for filter, color and logging bridge tests

No config files. Sinks are in-memory buffers.
"""

import io

import pytest

from levelfilter.components.level_filter import LevelFilter


LEVELS = ["DEBUG", "WARN", "ERROR"]


# ============================================
# Fixtures
# ============================================

@pytest.fixture
def levels():
    """Default level list, low to high severity."""
    return list(LEVELS)


@pytest.fixture
def buf():
    """Text sink capturing forwarded lines."""
    return io.StringIO()


@pytest.fixture
def byte_buf():
    """Byte sink capturing forwarded lines."""
    return io.BytesIO()


@pytest.fixture
def warn_filter(levels, buf):
    """Filter with min level WARN writing to a text buffer."""
    return LevelFilter(levels=levels, min_level="WARN", writer=buf)
