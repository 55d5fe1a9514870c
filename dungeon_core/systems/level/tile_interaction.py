"""
tile_interaction.py
-------------------
Tile Interaction Resolver.

Runs once per committed cell arrival and dispatches on TileKind through
an explicit kind -> handler table. Kinds without a handler have no effect.
"""

from dungeon_core.core.debug.debug_logger import DebugLogger
from dungeon_core.core.runtime.game_settings import FEEDBACK_OFFSET_Y, FeedbackColors
from dungeon_core.core.services.event_manager import TileEnteredEvent
from dungeon_core.entities.player.player_combat import apply_damage
from dungeon_core.entities.player.player_effects import apply_power_up
from .tile_map import HAZARD_TILES, POWERUP_TILES, TileKind


TILE_HANDLERS = {}


def tile_handler(*kinds):
    """Decorator registering a handler for one or more tile kinds."""
    def decorator(func):
        for kind in kinds:
            TILE_HANDLERS[kind] = func
        return func
    return decorator


def _above_player(player):
    return player.pos.x, player.pos.y + FEEDBACK_OFFSET_Y


# ===========================================================
# Handlers
# ===========================================================
@tile_handler(*HAZARD_TILES)
def handle_hazard(session, cell, kind):
    player = session.player
    damage = player.cfg["combat"]["hazard_damage"]
    session.stats.hazard_hits += 1
    session.feedback(f"-{damage} HP!", _above_player(player), FeedbackColors.DAMAGE,
                     player.cfg["feedback"]["duration_ms"])
    apply_damage(session, damage, kind.name.lower())


@tile_handler(TileKind.TREASURE)
def handle_treasure(session, cell, kind):
    player = session.player
    amount = player.cfg["combat"]["treasure_score"]
    session.stats.add_score(amount)
    session.stats.treasures_collected += 1
    session.room.consume_tile(cell)
    session.feedback(f"+{amount} Score!", _above_player(player), FeedbackColors.SCORE,
                     player.cfg["feedback"]["duration_ms"])
    DebugLogger.action(f"Treasure at {tuple(cell)}, score {session.stats.score}", category="tile")


@tile_handler(*POWERUP_TILES)
def handle_powerup(session, cell, kind):
    apply_power_up(session, POWERUP_TILES[kind], cell)


# ===========================================================
# Dispatcher
# ===========================================================
def resolve_tile(session, cell):
    """Apply the effect of the tile at cell. No-op once the session is over."""
    if session.game_over:
        return

    col, row = cell
    kind = session.room.grid.kind_at(col, row)
    if kind is None:
        return

    session.events.dispatch(TileEnteredEvent(tuple(cell), kind))

    handler = TILE_HANDLERS.get(kind)
    if handler is not None:
        handler(session, cell, kind)
