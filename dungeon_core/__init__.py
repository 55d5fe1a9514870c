"""
dungeon_core
------------
Player controller and combat resolution for a grid-based dungeon shooter.
"""

from dungeon_core.core.runtime.game_state import SessionState, MissingContextError
from dungeon_core.systems.level.tile_map import Room, TileGrid, TileKind
from dungeon_core.scenes.game.gameplay_controller import GameplayController

__all__ = [
    'SessionState',
    'MissingContextError',
    'Room',
    'TileGrid',
    'TileKind',
    'GameplayController',
]
