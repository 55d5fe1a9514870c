"""
Entity module exports.

Lightweight enums and constants shared by every entity.

Exports:
    LifecycleState - Entity life/death progression (ALIVE, DEAD)
    MovementPhase  - Player grid movement phase (IDLE, TRANSITIONING)
    EntityCategory - Logical entity groupings (PLAYER, ENEMY, PROJECTILE, etc.)
    CollisionTags  - Collision tag constants (PLAYER, ENEMY, KEY, etc.)
"""

from dungeon_core.entities.entity_state import LifecycleState, MovementPhase
from dungeon_core.entities.entity_types import EntityCategory, CollisionTags

__all__ = [
    # States
    'LifecycleState',
    'MovementPhase',
    # Types
    'EntityCategory',
    'CollisionTags',
]
