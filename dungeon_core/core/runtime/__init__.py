"""
Runtime configuration exports.

game_state is imported directly by path since it depends on entities.
"""

from dungeon_core.core.runtime.game_settings import (
    Grid,
    Layers,
    FeedbackColors,
)
from dungeon_core.core.runtime.session_stats import SessionStats

__all__ = [
    'Grid',
    'Layers',
    'FeedbackColors',
    'SessionStats',
]
