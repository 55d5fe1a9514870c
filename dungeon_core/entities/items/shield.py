"""
shield.py
---------
Orbiting shield visual anchored to its owner.
Exists only while the owner has shield charges.
"""

import math

from dungeon_core.core.runtime.game_settings import Layers
from dungeon_core.core.debug.debug_logger import DebugLogger
from dungeon_core.entities.base_entity import BaseEntity
from dungeon_core.entities.entity_types import CollisionTags, EntityCategory


class ShieldOrbit(BaseEntity):
    """Circles the owner at a fixed radius."""

    __slots__ = ('owner', 'radius')

    def __init__(self, owner, radius=30, size=(20, 20)):
        """
        Args:
            owner: Entity to orbit (the player)
            radius: Orbit distance from the owner's center
        """
        super().__init__(owner.pos.x, owner.pos.y, size=size, category=EntityCategory.EFFECT)
        self.owner = owner
        self.radius = radius
        self.collision_tag = CollisionTags.SHIELD
        self.layer = Layers.SHIELD

        DebugLogger.trace(f"Shield created for {type(owner).__name__}, radius={radius}", category="combat")

    def follow(self, angle: float):
        """Place at owner position + radius * (cos angle, sin angle)."""
        self.pos.x = self.owner.pos.x + math.cos(angle) * self.radius
        self.pos.y = self.owner.pos.y + math.sin(angle) * self.radius
        self.sync_rect()

    def destroy(self):
        self.owner = None
        super().destroy()
