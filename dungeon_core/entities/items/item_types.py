"""
item_types.py
-------------
Closed enumeration of power-up kinds.
"""
from enum import Enum


class PowerUpKind(str, Enum):
    """
    Power-ups collectable from the grid. Inherits from `str` so members
    can be used directly as string values in events and logs.
    """
    SHIELD = "shield"
    TRIPLE_SHOT = "triple_shot"
    SPEED_BOOST = "speed_boost"
    SLOW_SHOT = "slow_shot"
    HEAL = "heal"
