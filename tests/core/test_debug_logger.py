"""
test_debug_logger.py
--------------------
Tests for category and level filtering.
"""

import pytest

from dungeon_core.core.debug.debug_logger import DebugLogger, LoggerConfig


@pytest.fixture(autouse=True)
def restore_config():
    level = LoggerConfig.LOG_LEVEL
    categories = dict(LoggerConfig.CATEGORIES)
    yield
    LoggerConfig.LOG_LEVEL = level
    LoggerConfig.CATEGORIES = categories
    DebugLogger.set_frame_time(None)


def test_disabled_category_is_silent(capsys):
    DebugLogger.configure("VERBOSE", movement=False)
    DebugLogger.trace("step")
    assert capsys.readouterr().out == ""


def test_trace_needs_verbose(capsys):
    DebugLogger.configure("INFO", movement=True)
    DebugLogger.trace("step")
    assert capsys.readouterr().out == ""

    DebugLogger.configure("VERBOSE")
    DebugLogger.trace("step")
    assert "[TRACE] step" in capsys.readouterr().out


def test_game_time_stamp(capsys):
    DebugLogger.configure("INFO", combat=True)
    DebugLogger.set_frame_time(1200)
    DebugLogger.action("hit", category="combat")
    assert "t=    1200ms" in capsys.readouterr().out


def test_unknown_level_rejected():
    with pytest.raises(ValueError):
        DebugLogger.configure("LOUD")
