"""
Core services exports.

Provides the event system, configuration loading and input.
"""

from dungeon_core.core.services.config_manager import load_config
from dungeon_core.core.services.event_manager import (
    EventManager,
    BaseEvent,
    FeedbackEvent,
    TileEnteredEvent,
    PowerUpCollectedEvent,
    KeyCollectedEvent,
    PlayerDamagedEvent,
    ShieldAbsorbedEvent,
    GameOverEvent,
    AbilityUsedEvent,
    EnemyDefeatedEvent,
)
from dungeon_core.core.services.input_manager import InputManager, ActionSnapshot

__all__ = [
    'load_config',
    'EventManager',
    'BaseEvent',
    'FeedbackEvent',
    'TileEnteredEvent',
    'PowerUpCollectedEvent',
    'KeyCollectedEvent',
    'PlayerDamagedEvent',
    'ShieldAbsorbedEvent',
    'GameOverEvent',
    'AbilityUsedEvent',
    'EnemyDefeatedEvent',
    'InputManager',
    'ActionSnapshot',
]
