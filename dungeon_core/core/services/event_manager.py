"""
event_manager.py
----------------
Pub-sub events between the player core and its external collaborators.
The room, UI and enemy systems subscribe to what the core reports,
and report enemy defeats back without importing the core.
"""

from collections import defaultdict
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Type
from dungeon_core.core.debug.debug_logger import DebugLogger


# ===========================================================
# Event Definitions
# ===========================================================

@dataclass(frozen=True)
class BaseEvent:
    """Base class for all events."""
    pass


@dataclass(frozen=True)
class FeedbackEvent(BaseEvent):
    """Fire-and-forget floating text. position None means screen center."""
    text: str
    position: Optional[tuple]
    color: str
    duration_ms: float


@dataclass(frozen=True)
class TileEnteredEvent(BaseEvent):
    """Dispatched once per committed grid-cell arrival."""
    cell: tuple
    kind: Optional[int]


@dataclass(frozen=True)
class PowerUpCollectedEvent(BaseEvent):
    kind: str
    cell: tuple


@dataclass(frozen=True)
class KeyCollectedEvent(BaseEvent):
    position: tuple


@dataclass(frozen=True)
class PlayerDamagedEvent(BaseEvent):
    amount: int
    source: str
    health: int


@dataclass(frozen=True)
class ShieldAbsorbedEvent(BaseEvent):
    remaining: int


@dataclass(frozen=True)
class GameOverEvent(BaseEvent):
    """Dispatched exactly once per session when health reaches zero."""
    cause: str


@dataclass(frozen=True)
class AbilityUsedEvent(BaseEvent):
    enemies_cleared: int
    projectiles_cleared: int


@dataclass(frozen=True)
class EnemyDefeatedEvent(BaseEvent):
    """Dispatched by the enemy system; feeds the ability charge."""
    position: tuple
    charge: int




# ===========================================================
# Event Manager
# ===========================================================
class EventManager:
    """
    Per-session pub-sub bus keyed by exact event class.

    Callbacks run synchronously inside dispatch(), in subscription order.
    """

    def __init__(self):
        self._subscribers: Dict[Type[BaseEvent], List[Callable]] = defaultdict(list)

    def subscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """Register callback for event_type. Registering the same callback twice is a no-op."""
        callbacks = self._subscribers[event_type]
        if callback not in callbacks:
            callbacks.append(callback)
            DebugLogger.system(f"{_name(callback)} -> {event_type.__name__}", category="event_manager")

    def unsubscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        callbacks = self._subscribers.get(event_type, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def dispatch(self, event: BaseEvent) -> None:
        """
        Deliver event to every subscriber of its type.
        A subscriber that raises is logged and skipped; dispatch never raises.
        """
        for callback in tuple(self._subscribers.get(type(event), ())):
            try:
                callback(event)
            except Exception as e:
                DebugLogger.warn(f"{_name(callback)} failed on {type(event).__name__}: {e}",
                                 category="system")

    def clear_all(self) -> None:
        self._subscribers.clear()

    def get_subscriber_count(self, event_type: Type[BaseEvent] = None) -> int:
        if event_type is not None:
            return len(self._subscribers.get(event_type, ()))
        return sum(len(callbacks) for callbacks in self._subscribers.values())


def _name(callback) -> str:
    return getattr(callback, "__qualname__", None) or repr(callback)
