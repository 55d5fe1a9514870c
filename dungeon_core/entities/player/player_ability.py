"""
player_ability.py
-----------------
Ability Charge Gate and player shooting.

Both fire once per discrete press (rising edge), never while held.
"""

import math

from dungeon_core.core.debug.debug_logger import DebugLogger
from dungeon_core.core.runtime.game_settings import FeedbackColors
from dungeon_core.core.services.event_manager import AbilityUsedEvent
from dungeon_core.entities.bullets.base_bullet import PlayerBullet
from dungeon_core.entities.timer_registry import TimerName


ABILITY_BANNER = "NUKE!"


# ===========================================================
# Ability
# ===========================================================
def update_ability(session, player, actions) -> bool:
    """
    Clear every enemy and enemy projectile when the ability is pressed
    with a full charge. A press below the threshold is ignored.

    Returns:
        True if the ability fired this frame.
    """
    if session.game_over or not actions.was_pressed("ability"):
        return False

    if not player.charge_ready:
        DebugLogger.trace(f"Ability pressed at charge {player.charge}", category="ability")
        return False

    enemies, projectiles = session.room.clear_hostiles()
    player.charge = 0
    session.stats.enemies_destroyed += enemies

    session.feedback(ABILITY_BANNER, None, FeedbackColors.BANNER,
                     player.cfg["feedback"]["ability_duration_ms"])
    session.events.dispatch(AbilityUsedEvent(enemies, projectiles))
    DebugLogger.action(f"Ability cleared {enemies} enemies, {projectiles} projectiles",
                       category="ability")
    return True


# ===========================================================
# Shooting
# ===========================================================
def fire_shot(session, player, aim=None):
    """
    Spawn bullets from the player toward aim.

    Three bullets spread around the aim angle while triple-shot is active,
    otherwise one. With no aim point the shot heads right.

    Returns:
        List of spawned PlayerBullet instances.
    """
    combat = player.cfg["combat"]
    if aim is None:
        angle = 0.0
    else:
        angle = math.atan2(aim[1] - player.pos.y, aim[0] - player.pos.x)

    if session.timers.is_active(TimerName.TRIPLE_SHOT):
        spread = combat["triple_shot_spread"]
        offsets = (-spread, 0.0, spread)
    else:
        offsets = (0.0,)

    slows = session.timers.is_active(TimerName.SLOW_SHOT)
    bullets = [
        PlayerBullet(player.pos.x, player.pos.y, angle + offset,
                     combat["bullet_speed"], combat["bullet_damage"], slows_enemies=slows)
        for offset in offsets
    ]
    session.room.player_bullets.extend(bullets)
    DebugLogger.trace(f"Fired {len(bullets)} bullet(s) at {angle:.2f} rad", category="combat")
    return bullets


def update_shooting(session, player, actions):
    if session.game_over or not actions.was_pressed("attack"):
        return []
    return fire_shot(session, player, actions.aim)
