"""
tile_map.py
-----------
Tile palette, grid access and the per-room collections the core works on.

Responsibilities
----------------
- Map raw tile codes from the room system onto a closed TileKind enum
- Answer passability (in bounds and not collidable)
- Convert grid cells to canonical world positions
- Consume a tile: set it to floor, update its glyph and remove the
  matching pickup entity as one operation
"""

from enum import IntEnum
from typing import Dict, List, Optional, Tuple

import pygame

from dungeon_core.core.debug.debug_logger import DebugLogger
from dungeon_core.core.runtime.game_settings import FLOOR_GLYPH, FeedbackColors, Grid
from dungeon_core.entities.items.item_types import PowerUpKind


# ===========================================================
# Tile Palette
# ===========================================================

class TileKind(IntEnum):
    """Tile codes shared with the room generator. Values are the raw grid codes."""
    FLOOR = 0
    WALL = 1
    DOOR_CLOSED = 2
    DOOR_OPEN = 3
    EXIT = 4
    SPIKE = 5
    TREASURE = 6
    PILLAR = 7
    FIRE_PIT = 8
    GUST_RIGHT = 9
    GUST_LEFT = 10
    STAIRS = 11
    WATER = 12
    DOOR_LOCKED = 13
    DOOR_SEALED = 14
    POWERUP_SHIELD = 19
    POWERUP_TRIPLE_SHOT = 20
    POWERUP_SPEED_BOOST = 21
    POWERUP_SLOW_SHOT = 22
    POWERUP_HEAL = 23


COLLIDABLE_TILES = frozenset({
    TileKind.WALL,
    TileKind.DOOR_CLOSED,
    TileKind.PILLAR,
    TileKind.DOOR_LOCKED,
    TileKind.DOOR_SEALED,
})

HAZARD_TILES = frozenset({TileKind.SPIKE, TileKind.FIRE_PIT})

POWERUP_TILES: Dict[TileKind, PowerUpKind] = {
    TileKind.POWERUP_SHIELD: PowerUpKind.SHIELD,
    TileKind.POWERUP_TRIPLE_SHOT: PowerUpKind.TRIPLE_SHOT,
    TileKind.POWERUP_SPEED_BOOST: PowerUpKind.SPEED_BOOST,
    TileKind.POWERUP_SLOW_SHOT: PowerUpKind.SLOW_SHOT,
    TileKind.POWERUP_HEAL: PowerUpKind.HEAL,
}

# One-way wind: column step applied to the player standing on the tile
WIND_TILES: Dict[TileKind, int] = {
    TileKind.GUST_RIGHT: 1,
    TileKind.GUST_LEFT: -1,
}


def tile_kind(code) -> Optional[TileKind]:
    """Return the TileKind for a raw code, or None for codes outside the palette."""
    try:
        return TileKind(code)
    except ValueError:
        return None


# ===========================================================
# Glyph Overlay
# ===========================================================

class GlyphOverlay:
    """
    Textual view of the grid, one glyph per cell.
    The room renderer may replace this with anything exposing set_glyph().
    """

    def __init__(self):
        self._glyphs: Dict[Tuple[int, int], Tuple[str, str]] = {}

    def set_glyph(self, col: int, row: int, glyph: str, color: str):
        self._glyphs[(col, row)] = (glyph, color)

    def glyph_at(self, col: int, row: int) -> Optional[Tuple[str, str]]:
        return self._glyphs.get((col, row))


# ===========================================================
# Tile Grid
# ===========================================================

class TileGrid:
    """Row-major 2D array of tile codes, mutated in place on consumption."""

    def __init__(self, tiles: List[list], tile_size: int = Grid.TILE_SIZE, overlay=None):
        """
        Args:
            tiles: tiles[row][col] raw codes; shared with the room system, not copied
            tile_size: World units per cell
            overlay: Optional object with set_glyph(col, row, glyph, color)
        """
        if not tiles or not tiles[0]:
            raise ValueError("TileGrid requires at least one row and one column")
        width = len(tiles[0])
        if any(len(row) != width for row in tiles):
            raise ValueError("TileGrid rows must all have the same length")

        self.tiles = tiles
        self.rows = len(tiles)
        self.cols = width
        self.tile_size = tile_size
        self.overlay = overlay

    @classmethod
    def filled(cls, cols=Grid.COLS, rows=Grid.ROWS, kind=TileKind.FLOOR, **kwargs):
        """Uniform grid, mostly for tools and tests."""
        return cls([[int(kind)] * cols for _ in range(rows)], **kwargs)

    # ===========================================================
    # Queries
    # ===========================================================

    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self.cols and 0 <= row < self.rows

    def kind_at(self, col: int, row: int) -> Optional[TileKind]:
        """TileKind at a cell; None when out of bounds or not in the palette."""
        if not self.in_bounds(col, row):
            return None
        return tile_kind(self.tiles[row][col])

    def is_passable(self, col: int, row: int) -> bool:
        """In bounds and not one of the collidable tile kinds."""
        if not self.in_bounds(col, row):
            return False
        return self.kind_at(col, row) not in COLLIDABLE_TILES

    def world_position(self, col: int, row: int) -> pygame.Vector2:
        """Canonical world coordinates of a cell."""
        return pygame.Vector2(col * self.tile_size, row * self.tile_size)

    # ===========================================================
    # Mutation
    # ===========================================================

    def set_kind(self, col: int, row: int, kind: TileKind):
        self.tiles[row][col] = int(kind)

    def clear_to_floor(self, col: int, row: int):
        """Revert a consumed cell to floor and refresh its glyph."""
        self.set_kind(col, row, TileKind.FLOOR)
        if self.overlay is not None:
            self.overlay.set_glyph(col, row, FLOOR_GLYPH, FeedbackColors.CONSUMED_GLYPH)


# ===========================================================
# Room
# ===========================================================

class Room:
    """
    Everything the room system lends to the core for one room:
    grid, enemies, enemy projectiles, power-up pickups, optional key,
    and the list player bullets are spawned into.
    """

    def __init__(self, grid: TileGrid, enemies=None, enemy_projectiles=None,
                 powerups=None, key=None, player_bullets=None):
        self.grid = grid
        self.enemies = enemies if enemies is not None else []
        self.enemy_projectiles = enemy_projectiles if enemy_projectiles is not None else []
        self.powerups = powerups if powerups is not None else []
        self.key = key
        self.player_bullets = player_bullets if player_bullets is not None else []

    def find_powerup(self, cell) -> Optional[object]:
        cell = tuple(cell)
        for pickup in self.powerups:
            if pickup.cell == cell:
                return pickup
        return None

    def consume_tile(self, cell):
        """
        Set the cell to floor and destroy the pickup anchored there.

        Returns:
            The removed pickup, or None when no pickup matched the cell.
        """
        col, row = cell
        self.grid.clear_to_floor(col, row)

        pickup = self.find_powerup(cell)
        if pickup is None:
            DebugLogger.trace(f"No pickup entity at {tuple(cell)}", category="tile")
            return None

        pickup.destroy()
        self.powerups = [p for p in self.powerups if p is not pickup]
        return pickup

    def destroy_enemy(self, enemy):
        enemy.destroy()
        if enemy in self.enemies:
            self.enemies.remove(enemy)

    def take_key(self):
        """Destroy and detach the key pickup, if any."""
        key, self.key = self.key, None
        if key is not None:
            key.destroy()
        return key

    def clear_hostiles(self) -> Tuple[int, int]:
        """Destroy every enemy and enemy projectile. Returns the counts cleared."""
        enemies, projectiles = list(self.enemies), list(self.enemy_projectiles)
        for entity in enemies + projectiles:
            entity.destroy()
        self.enemies.clear()
        self.enemy_projectiles.clear()
        return len(enemies), len(projectiles)
