"""
player_combat.py
----------------
Shield and contact resolution, run every frame regardless of movement.

- Orbit the shield visual while shield charges remain
- Resolve each player-enemy overlap in enumeration order:
  a shield charge absorbs the hit, otherwise the player takes contact damage
- Route all health loss through apply_damage(), the single terminal check
"""

from dungeon_core.core.debug.debug_logger import DebugLogger
from dungeon_core.core.services.event_manager import PlayerDamagedEvent, ShieldAbsorbedEvent
from dungeon_core.systems.collision.collision_manager import overlapping


# ===========================================================
# Damage
# ===========================================================
def apply_damage(session, amount: int, source: str) -> int:
    """
    Reduce player health and enter the over-state at zero.

    No-op once the session is over, so damage can never be applied twice
    past the terminal transition.

    Returns:
        Health actually lost.
    """
    if session.game_over:
        return 0

    player = session.player
    lost = player.take_damage(amount)
    DebugLogger.action(f"-{amount} HP from {source} ({player.health} left)", category="combat")
    session.events.dispatch(PlayerDamagedEvent(amount, source, player.health))

    if player.health <= 0:
        session.end_game(source)
    return lost


# ===========================================================
# Shield Visual
# ===========================================================
def update_shield(session, player, delta_ms: float):
    """Advance the orbit phase while charged; drop the visual otherwise."""
    if session.game_over:
        return

    if player.shield_charges > 0:
        shield = player.ensure_shield()
        player.shield_angle += player.cfg["shield"]["angular_rate"] * delta_ms
        shield.follow(player.shield_angle)
    else:
        player.remove_shield()


# ===========================================================
# Enemy Contacts
# ===========================================================
def resolve_enemy_contacts(session, player) -> int:
    """
    Resolve every active enemy overlapping the player this frame.

    Returns:
        Number of enemies destroyed.
    """
    if session.game_over:
        return 0

    room = session.room
    contact_damage = player.cfg["combat"]["contact_damage"]
    destroyed = 0

    for enemy in overlapping(player, room.enemies):
        if session.game_over:
            break

        room.destroy_enemy(enemy)
        destroyed += 1
        session.stats.enemies_destroyed += 1

        if player.shield_charges > 0:
            player.shield_charges -= 1
            DebugLogger.action(f"Shield absorbed hit ({player.shield_charges} left)", category="combat")
            session.events.dispatch(ShieldAbsorbedEvent(player.shield_charges))
            if player.shield_charges == 0:
                player.remove_shield()
        else:
            apply_damage(session, contact_damage, "enemy")

    return destroyed
