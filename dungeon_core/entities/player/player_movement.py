"""
player_movement.py
------------------
Grid Movement Controller.

Movement is a two-phase state machine on the Player:
IDLE -> TRANSITIONING (a Transition tweens world position between cells)
-> arrival (commit cell, snap, resolve tile) -> IDLE.

New moves are gated by the movement cooldown, which starts when a move
begins rather than when it lands.
"""

import math

from dungeon_core.core.debug.debug_logger import DebugLogger
from dungeon_core.core.runtime.game_settings import FeedbackColors
from dungeon_core.core.services.event_manager import KeyCollectedEvent
from dungeon_core.entities.timer_registry import TimerName
from dungeon_core.systems.collision.collision_manager import overlaps
from dungeon_core.systems.level.tile_map import TileKind, WIND_TILES
from dungeon_core.systems.level.tile_interaction import resolve_tile
from .player_state import Transition


# Sampled in this order; the first held and passable direction wins.
DIRECTIONS = (
    ("move_left", (-1, 0), math.pi),
    ("move_right", (1, 0), 0.0),
    ("move_up", (0, -1), -math.pi / 2),
    ("move_down", (0, 1), math.pi / 2),
)


# ===========================================================
# Per-frame Update
# ===========================================================
def update_movement(session, player, actions, now: float, delta_ms: float):
    """
    Advance any in-flight transition, then try to start a new one.

    Args:
        session: SessionState with an active room
        player: Player being moved
        actions: ActionSnapshot for this frame
        now: Current time in milliseconds
        delta_ms: Time since the previous frame
    """
    if session.game_over:
        return

    if player.transition is not None:
        _advance_transition(session, player, delta_ms)
        if session.game_over:
            return

    cooldown = player.cfg["movement"]["cooldown_ms"]
    if player.last_move_time is not None and now - player.last_move_time < cooldown:
        return
    if player.transition is not None:
        return

    player.velocity.xy = (0, 0)

    grid = session.room.grid
    col, row = player.cell

    # Wind gets the first claim on this tick's move
    push = WIND_TILES.get(grid.kind_at(col, row))
    if push is not None and grid.is_passable(col + push, row):
        angle = 0.0 if push > 0 else math.pi
        _begin_move(session, player, (col + push, row), angle,
                    player.cfg["movement"]["wind_drift_speed"], now)
        DebugLogger.trace(f"Wind push to {(col + push, row)}")
        return

    speed_key = "boosted_speed" if session.timers.is_active(TimerName.SPEED_BOOST) else "normal_speed"
    speed = player.cfg["movement"][speed_key]

    for action, (dx, dy), angle in DIRECTIONS:
        if not actions.is_held(action):
            continue
        target = (col + dx, row + dy)
        if grid.is_passable(*target):
            _begin_move(session, player, target, angle, speed, now)
            return


def _begin_move(session, player, target, angle, speed, now):
    """Start a tween toward target and open the cooldown window."""
    grid = session.room.grid
    movement = player.cfg["movement"]

    if grid.kind_at(*target) == TileKind.WATER:
        duration = movement["water_duration_ms"]
    else:
        duration = movement["normal_duration_ms"]

    player.velocity.from_polar((speed, math.degrees(angle)))
    player.transition = Transition(
        from_cell=player.cell,
        to_cell=target,
        start=player.pos.copy(),
        end=grid.world_position(*target),
        duration_ms=duration,
    )
    player.last_move_time = now
    session.timers.set(TimerName.MOVE_COOLDOWN, movement["cooldown_ms"])


def _advance_transition(session, player, delta_ms):
    """Tween the world position; on arrival commit the cell and resolve the tile."""
    transition = player.transition
    player.move_to(*transition.advance(delta_ms))

    if not transition.finished:
        return

    player.transition = None
    player.cell = transition.to_cell
    player.snap_to_cell()
    session.stats.moves += 1
    DebugLogger.trace(f"Arrived at {player.cell}")
    resolve_tile(session, player.cell)


# ===========================================================
# Key Pickup
# ===========================================================
def check_key_pickup(session, player) -> bool:
    """Collect the room key on world-space overlap. Does not consume a move."""
    if session.game_over:
        return False

    key = session.room.key
    if key is None or not key.active or not overlaps(player, key):
        return False

    session.has_key = True
    session.room.take_key()
    session.feedback("KEY GET!", None, FeedbackColors.BANNER, player.cfg["feedback"]["key_duration_ms"])
    session.events.dispatch(KeyCollectedEvent((key.pos.x, key.pos.y)))
    DebugLogger.action("Key collected", category="movement")
    return True
