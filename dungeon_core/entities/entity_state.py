"""
entity_state.py
---------------
Runtime state enumerations for entities.
Contains only states that change over time during gameplay.
"""

from enum import IntEnum


class LifecycleState(IntEnum):
    """
    Tracks whether an entity still takes part in the frame.
    Destroyed entities are removed from their room collections.
    """
    ALIVE = 0
    DEAD = 1


class MovementPhase(IntEnum):
    """
    Two-phase grid movement.

    IDLE          -> position is the canonical world position of the grid cell
    TRANSITIONING -> position is interpolated between from-cell and to-cell;
                     the grid cell is still the from-cell until arrival
    """
    IDLE = 0
    TRANSITIONING = 1
