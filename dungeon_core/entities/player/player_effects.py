"""
player_effects.py
-----------------
Power-up effect handlers.

Responsibilities
----------------
- Consume the power-up tile and its pickup entity as one operation
- Apply the effect for the collected kind
- Every timer or charge write is an absolute overwrite, never a sum
"""

from dungeon_core.core.debug.debug_logger import DebugLogger
from dungeon_core.core.runtime.game_settings import FEEDBACK_OFFSET_Y, FeedbackColors
from dungeon_core.core.services.event_manager import PowerUpCollectedEvent
from dungeon_core.entities.items.item_types import PowerUpKind
from dungeon_core.entities.timer_registry import TimerName


POWER_UP_HANDLERS = {}


def power_up_handler(kind: PowerUpKind):
    """Decorator to register the handler for a power-up kind."""
    def decorator(func):
        POWER_UP_HANDLERS[kind] = func
        return func
    return decorator


# ===========================================================
# Effect Handlers
# ===========================================================
@power_up_handler(PowerUpKind.SHIELD)
def handle_SHIELD(session, player):
    """Set shield charges (overwrite) and make sure the visual exists."""
    player.shield_charges = player.cfg["powerups"]["shield_charges"]
    player.ensure_shield()
    DebugLogger.action(f"Shield x{player.shield_charges}", category="powerup")


def _set_duration(session, player, timer):
    duration = player.cfg["powerups"]["duration_ms"]
    session.timers.set(timer, duration)
    DebugLogger.action(f"{timer.value} for {duration}ms", category="powerup")


@power_up_handler(PowerUpKind.TRIPLE_SHOT)
def handle_TRIPLE_SHOT(session, player):
    _set_duration(session, player, TimerName.TRIPLE_SHOT)


@power_up_handler(PowerUpKind.SPEED_BOOST)
def handle_SPEED_BOOST(session, player):
    _set_duration(session, player, TimerName.SPEED_BOOST)


@power_up_handler(PowerUpKind.SLOW_SHOT)
def handle_SLOW_SHOT(session, player):
    _set_duration(session, player, TimerName.SLOW_SHOT)


@power_up_handler(PowerUpKind.HEAL)
def handle_HEAL(session, player):
    """Restore health up to max_health."""
    amount = player.cfg["powerups"]["heal_amount"]
    old_health = player.health
    player.heal(amount)
    session.feedback(
        f"+{amount} HP!",
        (player.pos.x, player.pos.y + FEEDBACK_OFFSET_Y),
        FeedbackColors.HEAL,
        player.cfg["feedback"]["duration_ms"],
    )
    DebugLogger.action(f"Health +{amount} ({old_health} -> {player.health})", category="powerup")


# ===========================================================
# Dispatcher
# ===========================================================
def apply_power_up(session, kind, cell):
    """
    Collect the power-up at cell.

    The tile reverts to floor and the matching pickup entity is removed
    before the effect applies. A missing pickup entity only skips removal.
    """
    kind = PowerUpKind(kind)
    player = session.player

    session.room.consume_tile(cell)

    handler = POWER_UP_HANDLERS.get(kind)
    if handler is None:
        DebugLogger.warn(f"No handler for power-up {kind.value}", category="powerup")
        return

    handler(session, player)
    session.stats.powerups_collected += 1
    session.events.dispatch(PowerUpCollectedEvent(kind.value, tuple(cell)))
