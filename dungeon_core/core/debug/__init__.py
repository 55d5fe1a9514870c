"""Console diagnostics."""

from dungeon_core.core.debug.debug_logger import DebugLogger, LoggerConfig

__all__ = ['DebugLogger', 'LoggerConfig']
