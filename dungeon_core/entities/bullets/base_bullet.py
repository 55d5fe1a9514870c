"""
base_bullet.py
--------------
Projectile entities.

EnemyProjectile is owned by the enemy system; the core only clears them.
PlayerBullet is spawned by the core when the player shoots; its flight
and hit handling belong to the room system.
"""

import math

import pygame

from dungeon_core.core.runtime.game_settings import Layers
from dungeon_core.entities.base_entity import BaseEntity
from dungeon_core.entities.entity_types import CollisionTags, EntityCategory


class EnemyProjectile(BaseEntity):
    """Hostile projectile."""

    __slots__ = ('velocity',)

    def __init__(self, x, y, velocity=(0, 0), size=(8, 8)):
        super().__init__(x, y, size=size, category=EntityCategory.PROJECTILE)
        self.collision_tag = CollisionTags.ENEMY_BULLET
        self.layer = Layers.BULLETS
        self.velocity = pygame.Vector2(velocity)


class PlayerBullet(BaseEntity):
    """Bullet fired along an angle at a fixed speed."""

    __slots__ = ('velocity', 'rotation', 'damage', 'slows_enemies')

    def __init__(self, x, y, angle, speed, damage, slows_enemies=False, size=(8, 8)):
        """
        Args:
            angle: Heading in radians (0 = right, pi/2 = down)
            speed: World units per second
            damage: Damage dealt on hit
            slows_enemies: Whether a hit applies the slow debuff
        """
        super().__init__(x, y, size=size, category=EntityCategory.PROJECTILE)
        self.collision_tag = CollisionTags.PLAYER_BULLET
        self.layer = Layers.BULLETS
        self.rotation = angle
        self.velocity = pygame.Vector2(math.cos(angle) * speed, math.sin(angle) * speed)
        self.damage = damage
        self.slows_enemies = slows_enemies
