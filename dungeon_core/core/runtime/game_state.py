"""
game_state.py
-------------
Explicit per-session state passed by reference into every core component.

Holds the player, timers, score, key flag, game-over and pause flags,
the active room, the event bus and feedback effects. Nothing here is a
module-level singleton; a game creates one SessionState per run.
"""

from dungeon_core.core.debug.debug_logger import DebugLogger
from dungeon_core.core.runtime.session_stats import SessionStats
from dungeon_core.core.services.event_manager import (
    EventManager, EnemyDefeatedEvent, FeedbackEvent, GameOverEvent,
)
from dungeon_core.entities.player.player_core import Player
from dungeon_core.entities.timer_registry import TimerRegistry
from dungeon_core.systems.effects.effects_manager import EffectsManager


class MissingContextError(RuntimeError):
    """A frame needs the room, its grid or the player, and one is absent."""


class SessionState:
    """Everything one game session owns, plus the room it is currently in."""

    def __init__(self, player=None, room=None, config=None, events=None):
        """
        Args:
            player: Existing Player; created from config when None
            room: Active Room, may be attached later with enter_room()
            config: Player config dict (player.json merged over defaults)
            events: EventManager; a fresh one is created when None
        """
        self.events = events if events is not None else EventManager()
        self.effects = EffectsManager(self.events)
        self.timers = TimerRegistry()
        self.stats = SessionStats()

        self.player = player if player is not None else Player(config=config)
        self.config = self.player.cfg
        self.room = None

        self.has_key = False
        self.game_over = False
        self.game_over_cause = None
        self.paused = False

        self.events.subscribe(EnemyDefeatedEvent, self._on_enemy_defeated)

        if room is not None:
            self.enter_room(room, spawn_cell=self.player.cell)

    # ===========================================================
    # Context
    # ===========================================================
    def require_room(self):
        """Return the active room or raise MissingContextError."""
        if self.player is None:
            raise MissingContextError("player is not set")
        if self.room is None:
            raise MissingContextError("no active room")
        if getattr(self.room, "grid", None) is None:
            raise MissingContextError("active room has no grid")
        return self.room

    def enter_room(self, room, spawn_cell=None):
        """
        Swap in a new room and place the player on a passable cell.

        Raises:
            ValueError: spawn cell is out of bounds or collidable
        """
        cell = tuple(spawn_cell) if spawn_cell is not None else self.player.cell
        if room.grid is None or not room.grid.is_passable(*cell):
            raise ValueError(f"Spawn cell {cell} is not passable in the new room")

        self.room = room
        self.player.tile_size = room.grid.tile_size
        self.player.spawn_cell = cell
        self.player.place(cell)
        DebugLogger.state(f"Entered room {room.grid.cols}x{room.grid.rows} at {cell}", category="session")

    # ===========================================================
    # Exposed State
    # ===========================================================
    @property
    def score(self) -> int:
        return self.stats.score

    def snapshot(self) -> dict:
        """Read-only view for UI and room systems."""
        return {
            "health": self.player.health,
            "score": self.stats.score,
            "has_key": self.has_key,
            "shield_charges": self.player.shield_charges,
            "timers": self.timers.snapshot(),
            "charge": self.player.charge,
            "game_over": self.game_over,
        }

    # ===========================================================
    # Transitions
    # ===========================================================
    def feedback(self, text, position, color, duration_ms):
        """Fire-and-forget floating text."""
        if position is not None:
            position = (position[0], position[1])
        self.events.dispatch(FeedbackEvent(text, position, color, duration_ms))

    def end_game(self, cause: str) -> bool:
        """Enter the terminal over-state. Returns False if already over."""
        if self.game_over:
            return False
        self.game_over = True
        self.game_over_cause = cause
        DebugLogger.state(f"Game over ({cause}), score {self.stats.score}", category="session")
        self.events.dispatch(GameOverEvent(cause))
        return True

    def toggle_pause(self):
        self.paused = not self.paused
        DebugLogger.state("Paused" if self.paused else "Resumed", category="session")

    def reset(self, spawn_cell=None):
        """
        Restart the session: player, timers, key, stats and flags.
        Without spawn_cell the player returns to where it entered the room.

        Raises:
            ValueError: spawn cell is out of bounds or collidable in the active room
        """
        cell = tuple(spawn_cell) if spawn_cell is not None else self.player.spawn_cell
        if self.room is not None and self.room.grid is not None \
                and not self.room.grid.is_passable(*cell):
            raise ValueError(f"Spawn cell {cell} is not passable in the active room")

        self.player.reset(cell)
        self.timers.reset()
        self.stats.reset()
        self.effects.clear()
        self.has_key = False
        self.game_over = False
        self.game_over_cause = None
        self.paused = False
        DebugLogger.state("Session reset", category="session")

    def _on_enemy_defeated(self, event: EnemyDefeatedEvent):
        if self.game_over:
            return
        self.player.add_charge(event.charge)
