"""
debug_logger.py
---------------
Category-filtered console logger for the player core.

Lines are stamped with the session's game clock (milliseconds, as passed
to GameplayController.update) so movement and cooldown traces line up with
frame timing. Before the first frame the wall clock is shown instead.
"""

import sys
from datetime import datetime


# ===========================================================
# Logger Configuration
# ===========================================================

class LoggerConfig:
    """Controls which components emit log messages and at what verbosity."""

    ENABLE_LOGGING = True
    LOG_LEVEL = "INFO"  # NONE, ERROR, WARN, INFO, VERBOSE

    CATEGORIES = {
        # Core
        "system": True,
        "loading": False,
        "session": True,
        "input": False,
        "event_manager": False,

        # Player core
        "movement": False,
        "tile": True,
        "powerup": True,
        "combat": True,
        "ability": True,

        # Feedback
        "effects": False,
    }

    SHOW_TIMESTAMP = True


# ===========================================================
# ANSI Colors
# ===========================================================

class Colors:
    RESET = "\033[0m"
    WHITE = "\033[97m"
    GREEN = "\033[92m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    BLUE = "\033[94m"
    YELLOW = "\033[93m"
    RED = "\033[91m"


# tag -> (color, minimum LOG_LEVEL that shows it)
_TAGS = {
    "INIT": (Colors.WHITE, "INFO"),
    "SYSTEM": (Colors.MAGENTA, "INFO"),
    "STATE": (Colors.CYAN, "INFO"),
    "ACTION": (Colors.GREEN, "INFO"),
    "TRACE": (Colors.BLUE, "VERBOSE"),
    "WARN": (Colors.YELLOW, "WARN"),
    "FAIL": (Colors.RED, "ERROR"),
}

_LEVELS = ("NONE", "ERROR", "WARN", "INFO", "VERBOSE")


# ===========================================================
# Debug Logger
# ===========================================================

class DebugLogger:
    """Static logger. Call sites pick a tag method and a category."""

    _frame_time = None

    # ===========================================================
    # Configuration
    # ===========================================================

    @staticmethod
    def configure(level=None, **categories):
        """
        Adjust verbosity at runtime.

        Usage:
            DebugLogger.configure("VERBOSE", movement=True, combat=False)
        """
        if level is not None:
            if level not in _LEVELS:
                raise ValueError(f"Unknown log level: {level}")
            LoggerConfig.LOG_LEVEL = level
        LoggerConfig.CATEGORIES.update(categories)

    @staticmethod
    def set_frame_time(time_ms):
        """Stamp following lines with this game time. None restores wall clock."""
        DebugLogger._frame_time = time_ms

    @staticmethod
    def enabled(category: str, tag: str = "INFO") -> bool:
        if not LoggerConfig.ENABLE_LOGGING:
            return False
        if not LoggerConfig.CATEGORIES.get(category, False):
            return False
        _, needed = _TAGS.get(tag, (None, "INFO"))
        configured = LoggerConfig.LOG_LEVEL if LoggerConfig.LOG_LEVEL in _LEVELS else "INFO"
        return _LEVELS.index(needed) <= _LEVELS.index(configured)

    # ===========================================================
    # Formatting
    # ===========================================================

    @staticmethod
    def _source() -> str:
        """Calling class name, or the calling module's name when outside a class."""
        try:
            frame = sys._getframe(3)
        except ValueError:
            return "?"

        owner = frame.f_locals.get("self")
        if owner is not None:
            return type(owner).__name__
        module = frame.f_globals.get("__name__", "?")
        return module.rsplit(".", 1)[-1]

    @staticmethod
    def _stamp() -> str:
        if not LoggerConfig.SHOW_TIMESTAMP:
            return ""
        if DebugLogger._frame_time is not None:
            return f"[t={DebugLogger._frame_time:>8.0f}ms] "
        return f"[{datetime.now().strftime('%H:%M:%S')}] "

    @staticmethod
    def _emit(tag: str, msg: str, category: str):
        if not DebugLogger.enabled(category, tag):
            return
        color, _ = _TAGS[tag]
        print(f"{color}{DebugLogger._stamp()}[{DebugLogger._source()}][{tag}] {msg}{Colors.RESET}")

    # ===========================================================
    # Public Log Methods
    # ===========================================================

    @staticmethod
    def init(msg: str, category: str = "system"):
        DebugLogger._emit("INIT", msg, category)

    @staticmethod
    def system(msg: str, category: str = "system"):
        DebugLogger._emit("SYSTEM", msg, category)

    @staticmethod
    def state(msg: str, category: str = "system"):
        """State transitions (room entry, pause, game over)."""
        DebugLogger._emit("STATE", msg, category)

    @staticmethod
    def action(msg: str, category: str = "system"):
        """Gameplay outcomes (damage, pickups, ability)."""
        DebugLogger._emit("ACTION", msg, category)

    @staticmethod
    def trace(msg: str, category: str = "movement"):
        """Per-frame detail, only at VERBOSE."""
        DebugLogger._emit("TRACE", msg, category)

    @staticmethod
    def warn(msg: str, category: str = "system"):
        DebugLogger._emit("WARN", msg, category)

    @staticmethod
    def fail(msg: str, category: str = "system"):
        DebugLogger._emit("FAIL", msg, category)
