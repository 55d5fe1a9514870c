"""
base_entity.py
--------------
Foundational class for all entities the core reads or destroys
(Player, Enemy, Projectile, Pickup, Shield).

Coordinate System
-----------------
All entities use center-based coordinates:
- self.pos is the entity's world-space center
- self.rect is the overlap box, always centered on self.pos after sync_rect()
"""

from typing import Optional

import pygame

from dungeon_core.core.runtime.game_settings import Layers
from dungeon_core.entities.entity_state import LifecycleState
from dungeon_core.entities.entity_types import CollisionTags


class BaseEntity:
    """
    Base class for game entities.

    Subclassed by Player, BaseEnemy, EnemyProjectile, PlayerBullet,
    PowerUpPickup, KeyPickup and ShieldOrbit.
    """

    __slots__ = (
        'pos', 'size', 'rect', 'active',
        'death_state', 'layer', 'category', 'collision_tag',
    )

    def __init__(self, x: float, y: float, size=(32, 32), category: Optional[str] = None):
        """
        Args:
            x: Center X position
            y: Center Y position
            size: (width, height) of the overlap box
            category: EntityCategory value
        """
        self.pos = pygame.Vector2(x, y)
        self.size = (int(size[0]), int(size[1]))
        self.rect = pygame.Rect(0, 0, *self.size)

        self.active = True
        self.death_state = LifecycleState.ALIVE
        self.layer = Layers.ENEMIES
        self.category = category
        self.collision_tag = CollisionTags.NEUTRAL

        self.sync_rect()

    def sync_rect(self):
        """Center the overlap box on the current position."""
        self.rect.center = (round(self.pos.x), round(self.pos.y))

    def move_to(self, x: float, y: float):
        self.pos.xy = (x, y)
        self.sync_rect()

    def destroy(self):
        """Remove from play. Idempotent."""
        self.active = False
        self.death_state = LifecycleState.DEAD

    @property
    def alive(self) -> bool:
        return self.death_state == LifecycleState.ALIVE

    def __repr__(self):
        return f"{type(self).__name__}(pos=({self.pos.x:.1f}, {self.pos.y:.1f}), active={self.active})"
