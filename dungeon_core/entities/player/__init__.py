"""
Player module exports.

Per-frame behavior (movement, effects, combat, ability) is imported
directly by path from the sibling modules.
"""

from dungeon_core.entities.player.player_core import Player
from dungeon_core.entities.player.player_config import DEFAULT_CONFIG, load_player_config

__all__ = ['Player', 'DEFAULT_CONFIG', 'load_player_config']
