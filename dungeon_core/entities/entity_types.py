"""Entity types."""


class EntityCategory:
    """High-level logical grouping for entities."""
    PLAYER = "player"
    ENEMY = "enemy"
    PROJECTILE = "projectile"  # Used for bullets (both player and enemy)
    PICKUP = "pickup"
    EFFECT = "effect"


# ===========================================================
# Collision Tag Constants
# ===========================================================
class CollisionTags:
    """Standard collision tags for entity.collision_tag."""
    NEUTRAL = "neutral"

    PLAYER = "player"
    PLAYER_BULLET = "player_bullet"
    SHIELD = "shield"

    ENEMY = "enemy"
    ENEMY_BULLET = "enemy_bullet"

    PICKUP = "pickup"
    KEY = "key"
