"""
player_config.py
----------------
Player tuning defaults with JSON overrides.

The player always spawns with a complete config even if player.json
is missing or only overrides a few values.
"""

from dungeon_core.core.services.config_manager import load_config, merge_config

# ===========================================================
# Default Fallback Configuration
# ===========================================================
DEFAULT_CONFIG = {
    "core_attributes": {
        "health": 100,           # Starting health
        "max_health": 100,       # Heal clamp
        "hitbox_size": [32, 32], # Overlap box, centered on position
    },

    # Times in milliseconds
    "movement": {
        "cooldown_ms": 200,
        "normal_duration_ms": 100,
        "water_duration_ms": 200,
        "normal_speed": 100,     # Cosmetic velocity during a tween
        "boosted_speed": 150,
        "wind_drift_speed": 50,
    },

    "powerups": {
        "duration_ms": 30000,
        "shield_charges": 3,
        "heal_amount": 25,
    },

    "combat": {
        "hazard_damage": 20,
        "treasure_score": 50,
        "contact_damage": 10,
        "bullet_speed": 300,
        "bullet_damage": 11,
        "triple_shot_spread": 0.2,  # Radians either side of the aim angle
    },

    "shield": {
        "orbit_radius": 30,
        "angular_rate": 0.005,   # Radians per millisecond
    },

    "ability": {
        "threshold": 1000,
    },

    "feedback": {
        "duration_ms": 500,
        "key_duration_ms": 1000,
        "ability_duration_ms": 1500,
    },
}


def load_player_config(overrides=None):
    """
    Load player.json over DEFAULT_CONFIG, then apply in-code overrides.

    Returns:
        dict: Complete player configuration dictionary.
    """
    config = load_config("player.json", DEFAULT_CONFIG)
    if overrides:
        config = merge_config(config, overrides)
    return config
