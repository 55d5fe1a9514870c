"""
base_enemy.py
-------------
Roaming enemy as seen by the player core.

Target selection and steering belong to the enemy system; the core only
reads position and the active flag, and destroys enemies on contact.
"""

from dungeon_core.core.runtime.game_settings import Layers
from dungeon_core.entities.base_entity import BaseEntity
from dungeon_core.entities.entity_types import CollisionTags, EntityCategory


class BaseEnemy(BaseEntity):
    """Enemy contract: position, active flag, destroy()."""

    __slots__ = ('enemy_type', 'slowed')

    def __init__(self, x, y, size=(32, 32), enemy_type="grunt"):
        super().__init__(x, y, size=size, category=EntityCategory.ENEMY)
        self.collision_tag = CollisionTags.ENEMY
        self.layer = Layers.ENEMIES
        self.enemy_type = enemy_type
        self.slowed = False
