"""
base_item.py
------------
Collectible entities placed by the room system.

PowerUpPickup is anchored to a grid cell and matched by cell on collection.
KeyPickup is collected by world-space overlap with the player.
"""

from dungeon_core.core.runtime.game_settings import Grid, Layers
from dungeon_core.entities.base_entity import BaseEntity
from dungeon_core.entities.entity_types import CollisionTags, EntityCategory
from dungeon_core.entities.items.item_types import PowerUpKind


class GridPickup(BaseEntity):
    """Pickup whose position is derived from a grid cell."""

    __slots__ = ('cell',)

    def __init__(self, cell, tile_size=Grid.TILE_SIZE, size=(32, 32)):
        col, row = cell
        super().__init__(col * tile_size, row * tile_size, size=size, category=EntityCategory.PICKUP)
        self.cell = (int(col), int(row))
        self.collision_tag = CollisionTags.PICKUP
        self.layer = Layers.PICKUPS


class PowerUpPickup(GridPickup):
    """Visual for a power-up tile. The tile code carries the effect."""

    __slots__ = ('kind',)

    def __init__(self, cell, kind, tile_size=Grid.TILE_SIZE):
        super().__init__(cell, tile_size=tile_size)
        self.kind = PowerUpKind(kind)


class KeyPickup(BaseEntity):
    """Single key per room; sets the session key flag on overlap."""

    __slots__ = ()

    def __init__(self, x, y, size=(32, 32)):
        super().__init__(x, y, size=size, category=EntityCategory.PICKUP)
        self.collision_tag = CollisionTags.KEY
        self.layer = Layers.PICKUPS
