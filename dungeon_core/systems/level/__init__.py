"""
Level system exports.

Provides the tile palette, grid access and the per-room collections.
tile_interaction is imported directly by path since it depends on the player.
"""

from dungeon_core.systems.level.tile_map import (
    TileKind,
    TileGrid,
    GlyphOverlay,
    Room,
    tile_kind,
)

__all__ = [
    'TileKind',
    'TileGrid',
    'GlyphOverlay',
    'Room',
    'tile_kind',
]
