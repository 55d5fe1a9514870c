"""
gameplay_controller.py
----------------------
Per-frame orchestrator for the player core.

Order each frame:
1. Pause toggle and feedback aging (always)
2. Freeze everything else once the session is over or paused
3. Timers, movement, key pickup, shield, enemy contacts, ability, shooting
"""

from dungeon_core.core.debug.debug_logger import DebugLogger
from dungeon_core.core.runtime.game_state import MissingContextError
from dungeon_core.core.services.input_manager import EMPTY_SNAPSHOT
from dungeon_core.entities.player.player_ability import update_ability, update_shooting
from dungeon_core.entities.player.player_combat import resolve_enemy_contacts, update_shield
from dungeon_core.entities.player.player_movement import check_key_pickup, update_movement


class GameplayController:
    """Runs the player core against one SessionState."""

    def __init__(self, session):
        self.session = session
        self._missing_context = False
        DebugLogger.init("GameplayController ready", category="system")

    def update(self, time_ms: float, delta_ms: float, actions=None):
        """
        Advance one frame.

        Args:
            time_ms: Current wall-clock time in milliseconds
            delta_ms: Milliseconds since the previous frame
            actions: ActionSnapshot for this frame
        """
        session = self.session
        actions = actions if actions is not None else EMPTY_SNAPSHOT
        DebugLogger.set_frame_time(time_ms)

        if actions.was_pressed("pause") and not session.game_over:
            session.toggle_pause()

        session.effects.update(delta_ms)

        if session.game_over or session.paused:
            return

        try:
            session.require_room()
        except MissingContextError as e:
            # Logged once per outage; the next frame retries
            if not self._missing_context:
                DebugLogger.fail(f"Skipping frame: {e}", category="session")
            self._missing_context = True
            return
        self._missing_context = False

        player = session.player
        session.timers.update(delta_ms)

        update_movement(session, player, actions, time_ms, delta_ms)
        check_key_pickup(session, player)
        update_shield(session, player, delta_ms)
        resolve_enemy_contacts(session, player)
        update_ability(session, player, actions)
        update_shooting(session, player, actions)
